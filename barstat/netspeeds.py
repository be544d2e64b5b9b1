"""Receive and transmit rates of a network interface."""

from __future__ import annotations

from pathlib import Path

from .util import fmt_human, read_int

__all__ = ["ByteRate", "netspeed_rx", "netspeed_tx"]

NET_DIR = Path("/sys/class/net")
INTERVAL_MS = 1000
_COUNTERS = ("rx_bytes", "tx_bytes")
_WRAP = 1 << 64


class ByteRate:
    """Turns a cumulative byte counter into a per-second rate between updates."""

    def __init__(self, counter: str, interval: int = INTERVAL_MS, net_dir=NET_DIR) -> None:
        if counter not in _COUNTERS:
            raise ValueError(f"unknown counter: {counter}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.counter = counter
        self.interval = interval
        self.net_dir = Path(net_dir)
        self._bytes = 0

    def update(self, interface: str) -> str | None:
        """Read the counter; return the rate since the last update, or None."""
        previous = self._bytes
        current = read_int(self.net_dir / interface / "statistics" / self.counter)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _WRAP
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = ByteRate("rx_bytes")
_tx = ByteRate("tx_bytes")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of ``interface`` per second."""
    return _rx.update(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of ``interface`` per second."""
    return _tx.update(interface)