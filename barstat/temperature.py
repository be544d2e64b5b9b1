"""Temperature from a thermal sensor file."""

from __future__ import annotations

from .util import read_int

__all__ = ["temp"]


def temp(file: str) -> str | None:
    """Return the temperature in whole degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    if value is None:
        return None
    return str(value // 1000)