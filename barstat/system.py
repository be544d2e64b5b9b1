"""Host and user facts: entropy, hostname, kernel, load, uptime, ids."""

from __future__ import annotations

import os
import pwd
import socket
import sys
import time

from .util import read_int, warn

__all__ = [
    "entropy",
    "hostname",
    "kernel_release",
    "load_avg",
    "uptime",
    "gid",
    "username",
    "uid",
]

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UPTIME_CLOCK = getattr(
    time, "CLOCK_BOOTTIME", getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
)


def entropy() -> str | None:
    """Return the available kernel entropy; BSDs report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    num = read_int(ENTROPY_AVAIL)
    return None if num is None else str(num)


def hostname() -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn(f"gethostbyname: {exc.strerror or exc}")
        return None


def kernel_release() -> str | None:
    """Return the kernel release, as `uname -r` prints it."""
    try:
        return os.uname().release
    except OSError as exc:
        warn(f"uname: {exc.strerror or exc}")
        return None


def load_avg() -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        avgs = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return "%.2f %.2f %.2f" % avgs


def uptime() -> str | None:
    """Return the system uptime as 'Hh Mm'."""
    try:
        seconds = int(time.clock_gettime(_UPTIME_CLOCK))
    except OSError:
        warn(f"clock_gettime {_UPTIME_CLOCK}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid() -> str:
    """Return the real group id of the process."""
    return str(os.getgid())


def username() -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def uid() -> str:
    """Return the effective user id of the process."""
    return str(os.geteuid())