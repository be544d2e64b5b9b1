import socket
import struct

import pytest

from barstat import status
from barstat.config import Arg
from barstat.status import main, parse_args, render_status


def _const(value):
    return lambda: value


def test_render_joins_formatted_values():
    args = [Arg(_const("a"), "[%s]"), Arg(_const("b"), "<%s>")]
    assert render_status(args, "n/a", 100) == "[a]<b>"


def test_render_uses_unknown_for_none():
    args = [Arg(_const(None), "(%s)")]
    assert render_status(args, "n/a", 100) == "(n/a)"


def test_render_keeps_empty_string():
    args = [Arg(_const(""), "(%s)")]
    assert render_status(args, "n/a", 100) == "()"


def test_render_handles_percent_escape():
    args = [Arg(_const("5"), "%s%%")]
    assert render_status(args, "n/a", 100) == "5%"


def test_render_stops_at_first_entry_that_does_not_fit():
    args = [
        Arg(_const("abcd"), "%s"),
        Arg(_const("efgh"), "%s"),
        Arg(_const("ijkl"), "%s"),
        Arg(_const("x"), "%s"),
    ]
    assert render_status(args, "n/a", 10) == "abcdefgh"


def test_render_respects_byte_limit():
    args = [Arg(_const("y" * 50), "%s")] * 10
    result = render_status(args, "n/a", 120)
    assert len(result.encode("utf-8")) < 120
    assert result == "y" * 100


@pytest.mark.parametrize(
    "argv, expected",
    [([], False), (["-s"], True), (["-ss"], True), (["--"], False), (["-s", "--"], True)],
)
def test_parse_args(argv, expected):
    assert parse_args(argv) is expected


@pytest.mark.parametrize("argv", [["-x"], ["foo"], ["-s", "--", "foo"], ["--x"], ["-"]])
def test_parse_args_rejects(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1


def test_main_rejects_unknown_flag():
    with pytest.raises(SystemExit) as info:
        main(["-q"])
    assert info.value.code == 1


def test_main_without_display_fails(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1


def test_loop_publishes_until_stopped():
    entry = Arg(_const("up"), "<%s>")
    loop = status._StatusLoop(args=[entry], interval=0)
    seen = []

    def publish(text):
        seen.append(text)
        if len(seen) == 3:
            loop.stop()

    loop.run(publish)
    assert seen == [render_status([entry], "n/a", 2048)] * 3
    assert seen == ["<up>"] * 3


@pytest.mark.parametrize(
    "name, words, padded",
    [("hi", 7, b"hi\0\0"), ("abcde", 8, b"abcde\0\0\0")],
)
def test_store_name_sends_change_property(name, words, padded):
    left, right = socket.socketpair()
    with left, right:
        status._Display(left, 0x200).store_name(name)
        request = right.recv(100)
    assert len(request) == words * 4
    assert request[0] == 18
    assert struct.unpack_from("<H", request, 2)[0] == words
    assert struct.unpack_from("<III", request, 4) == (0x200, 39, 31)
    assert request[16] == 8
    assert struct.unpack_from("<I", request, 20)[0] == len(name)
    assert request[24:24 + len(name)] == name.encode()
    assert len(request[24:]) == len(padded)


def _setup_body(screens):
    header = struct.pack(
        "<IIIIHHBBBBBBBB4x", 0, 0, 0, 0, 3, 0xFFFF, len(screens), 1, 0, 0, 32, 32, 8, 255
    )
    return header + b"abc\0" + bytes(8) + b"".join(screens)


def _screen(root, depths=()):
    block = struct.pack("<I", root) + bytes(35) + bytes([len(depths)])
    for visuals in depths:
        block += struct.pack("<BxH4x", 24, visuals) + bytes(24 * visuals)
    return block


def test_root_window_of_first_screen():
    body = _setup_body([_screen(0x1234, depths=(1,))])
    assert status._root_window(body, 0) == 0x1234


def test_root_window_of_second_screen():
    body = _setup_body([_screen(0x1234, depths=(2, 0)), _screen(0x5678)])
    assert status._root_window(body, 1) == 0x5678


def test_root_window_missing_screen():
    body = _setup_body([_screen(0x1234)])
    with pytest.raises(OSError):
        status._root_window(body, 1)