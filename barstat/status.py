"""Status line assembly and the command that publishes it."""

from __future__ import annotations

import os
import signal
import socket
import struct
import sys
import threading
import time
from pathlib import Path

from .config import ARGS, INTERVAL, MAXLEN, UNKNOWN_STR
from .util import TruncationError, die, format_bounded

__all__ = ["render_status", "parse_args", "main"]

_PROGRAM = "barstat"

_CHANGE_PROPERTY = 18
_PROP_MODE_REPLACE = 0
_ATOM_STRING = 31
_ATOM_WM_NAME = 39
_AUTH_NAME = b"MIT-MAGIC-COOKIE-1"
_FAMILY_LOCAL = 256
_FAMILY_WILD = 65535


def render_status(args, unknown: str, maxlen: int) -> str:
    """Join the formatted values of ``args``, stopping before ``maxlen`` bytes."""
    parts: list[str] = []
    used = 0
    for arg in args:
        result = arg.value()
        if result is None:
            result = unknown
        try:
            piece = format_bounded(arg.fmt, result, maxlen - used)
        except TruncationError:
            break
        parts.append(piece)
        used += len(piece.encode("utf-8"))
    return "".join(parts)


def _usage() -> None:
    die(f"usage: {_PROGRAM} [-s]")


def parse_args(argv) -> bool:
    """Parse command-line options; return True when -s asks for standard output."""
    args = list(argv)
    to_stdout = False
    index = 0
    while index < len(args):
        current = args[index]
        if not (current.startswith("-") and len(current) > 1):
            break
        index += 1
        if current == "--":
            break
        for flag in current[1:]:
            if flag == "s":
                to_stdout = True
            else:
                _usage()
    if index < len(args):
        _usage()
    return to_stdout


def _pad(length: int) -> int:
    return -length % 4


def _read_exact(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise OSError("connection closed by X server")
        chunks.extend(chunk)
    return bytes(chunks)


def _xauth_entries(data: bytes):
    offset = 0
    try:
        while offset < len(data):
            (family,) = struct.unpack_from(">H", data, offset)
            offset += 2
            fields = []
            for _ in range(4):
                (length,) = struct.unpack_from(">H", data, offset)
                offset += 2
                fields.append(data[offset : offset + length])
                offset += length
            yield (family, *fields)
    except struct.error:
        return


def _xauth_cookie(host: str, number: str) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.join(os.path.expanduser("~"), ".Xauthority")
    try:
        data = Path(path).read_bytes()
    except OSError:
        return b"", b""
    local = host in ("", "unix")
    local_name = socket.gethostname().encode()
    for family, address, num, name, cookie in _xauth_entries(data):
        if num not in (b"", number.encode()):
            continue
        if local and not (
            family == _FAMILY_WILD or (family == _FAMILY_LOCAL and address == local_name)
        ):
            continue
        if name == _AUTH_NAME:
            return name, cookie
    return b"", b""


def _root_window(extra: bytes, screen: int) -> int:
    """Find the root window of ``screen`` in the body of a connection setup reply."""
    try:
        (vendor_len,) = struct.unpack_from("<H", extra, 16)
        screens, formats = extra[20], extra[21]
        if not 0 <= screen < screens:
            raise OSError(f"no such screen: {screen}")
        offset = 32 + vendor_len + _pad(vendor_len) + 8 * formats
        for _ in range(screen):
            depths = extra[offset + 39]
            offset += 40
            for _ in range(depths):
                (visuals,) = struct.unpack_from("<H", extra, offset + 2)
                offset += 8 + 24 * visuals
        (root,) = struct.unpack_from("<I", extra, offset)
    except (struct.error, IndexError) as exc:
        raise OSError("malformed X setup reply") from exc
    return root


class _Display:
    """Minimal X connection able to set the name of the root window."""

    def __init__(self, sock: socket.socket, root: int) -> None:
        self.sock = sock
        self.root = root

    @classmethod
    def open(cls, name: str | None = None) -> "_Display":
        name = os.environ.get("DISPLAY", "") if name is None else name
        host, sep, rest = name.rpartition(":")
        number, _, screen = rest.partition(".")
        if not sep or not number.isdigit():
            raise OSError(f"invalid display: {name!r}")
        if host in ("", "unix"):
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                sock.connect(f"/tmp/.X11-unix/X{number}")
            except OSError:
                sock.close()
                raise
        else:
            sock = socket.create_connection((host, 6000 + int(number)))
        try:
            auth_name, auth_data = _xauth_cookie(host, number)
            sock.sendall(
                struct.pack("<BxHHHHxx", 0x6C, 11, 0, len(auth_name), len(auth_data))
                + auth_name
                + bytes(_pad(len(auth_name)))
                + auth_data
                + bytes(_pad(len(auth_data)))
            )
            status, _, _, _, length = struct.unpack("<BBHHH", _read_exact(sock, 8))
            extra = _read_exact(sock, length * 4)
            if status != 1:
                raise OSError("X server refused the connection")
            root = _root_window(extra, int(screen) if screen.isdigit() else 0)
        except OSError:
            sock.close()
            raise
        return cls(sock, root)

    def store_name(self, text: str) -> None:
        data = text.encode("utf-8")
        length = 6 + (len(data) + _pad(len(data))) // 4
        self.sock.sendall(
            struct.pack(
                "<BBHIIIB3xI",
                _CHANGE_PROPERTY,
                _PROP_MODE_REPLACE,
                length,
                self.root,
                _ATOM_WM_NAME,
                _ATOM_STRING,
                8,
                len(data),
            )
            + data
            + bytes(_pad(len(data)))
        )

    def close(self) -> None:
        self.sock.close()


class _StatusLoop:
    """Renders and publishes the status line every interval until stopped."""

    def __init__(self, args=ARGS, interval=INTERVAL, unknown=UNKNOWN_STR, maxlen=MAXLEN):
        self.args = args
        self.interval = interval
        self.unknown = unknown
        self.maxlen = maxlen
        self._done = threading.Event()

    def stop(self, signo=None, frame=None) -> None:
        self._done.set()

    def run(self, publish) -> None:
        while not self._done.is_set():
            start = time.monotonic()
            publish(render_status(self.args, self.unknown, self.maxlen))
            if not self._done.is_set():
                wait = self.interval / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    self._done.wait(wait)


def _print_status(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError as exc:
        die(f"puts: {exc.strerror or exc}")


def _run_with_signals(loop: _StatusLoop, publish) -> None:
    previous = {
        signo: signal.signal(signo, loop.stop) for signo in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        loop.run(publish)
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def _open_display() -> _Display:
    try:
        return _Display.open()
    except OSError:
        die("XOpenDisplay: Failed to open display")
        raise


def main(argv=None) -> int:
    """Show the status line in the root window name, or on stdout with -s."""
    to_stdout = parse_args(sys.argv[1:] if argv is None else argv)
    loop = _StatusLoop()
    if to_stdout:
        _run_with_signals(loop, _print_status)
        return 0

    display = _open_display()

    def publish(status: str) -> None:
        try:
            display.store_name(status)
        except OSError:
            die("XStoreName: Allocation failed")

    _run_with_signals(loop, publish)
    try:
        display.store_name("")
    except OSError:
        pass
    try:
        display.close()
    except OSError:
        die("XCloseDisplay: Failed to close display")
    return 0


if __name__ == "__main__":
    sys.exit(main())