"""Wireless link quality and network name."""

from __future__ import annotations

import array
import fcntl
import itertools
import re
import socket
import struct
from pathlib import Path

from .util import BUFFER_SIZE, TruncationError, format_bounded, warn

__all__ = ["wifi_perc", "wifi_essid"]

NET_DIR = Path("/sys/class/net")
WIRELESS = Path("/proc/net/wireless")

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
IFNAMSIZ = 16
_IWREQ_SIZE = 32
_MAX_LINK_QUALITY = 70

_LINK = re.compile(r"\s*[+-]?\d+(?!\d)\s*([+-]?\d+)")


def wifi_perc(interface: str) -> str | None:
    """Return the link quality of ``interface`` in percent, if it is up."""
    state_path = NET_DIR / interface / "operstate"
    try:
        with open(state_path, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn(f"fopen '{state_path}': {exc.strerror or exc}")
        return None
    if status != "up\n":
        return None

    try:
        with open(WIRELESS, encoding="utf-8", errors="replace") as handle:
            lines = list(itertools.islice(handle, 3))
    except OSError as exc:
        warn(f"fopen '{WIRELESS}': {exc.strerror or exc}")
        return None
    if len(lines) < 3:
        return None

    line = lines[2][: BUFFER_SIZE - 2]
    position = line.find(interface)
    if position < 0:
        return None
    match = _LINK.match(line, position + len(interface) + 2)
    if match is None:
        return None
    quality = int(match.group(1))
    return str(int(quality / _MAX_LINK_QUALITY * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID that ``interface`` is associated with."""
    try:
        name = format_bounded("%s", interface, IFNAMSIZ)
    except TruncationError:
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name.encode("utf-8"), address, IW_ESSID_MAX_SIZE + 1, 0)
    )
    request.extend(bytes(max(0, _IWREQ_SIZE - len(request))))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror or exc}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror or exc}")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode("utf-8", errors="replace") or None