"""IPv4 and IPv6 addresses of a network interface."""

from __future__ import annotations

import socket

import psutil

from .util import warn

__all__ = ["ipv4", "ipv6"]


def _ip(interface: str, family: int) -> str | None:
    try:
        table = psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror or exc}")
        return None
    for addr in table.get(interface, ()):
        if addr.family == family and addr.address:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)