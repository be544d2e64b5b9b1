"""Memory usage from /proc/meminfo."""

from __future__ import annotations

from .util import fmt_human, read_text

__all__ = ["ram_free", "ram_perc", "ram_total", "ram_used"]

MEMINFO = "/proc/meminfo"


def _meminfo(*fields: str) -> tuple[int, ...] | None:
    text = read_text(MEMINFO)
    if text is None:
        return None
    values: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        words = rest.split()
        if sep and words:
            try:
                values[name.strip()] = int(words[0])
            except ValueError:
                continue
    try:
        return tuple(values[field] for field in fields)
    except KeyError:
        return None


def ram_free() -> str | None:
    """Return the available memory."""
    found = _meminfo("MemAvailable")
    return None if found is None else fmt_human(found[0] * 1024, 1024)


def ram_perc() -> str | None:
    """Return the share of memory in use, excluding buffers and cache, in percent."""
    found = _meminfo("MemTotal", "MemFree", "Buffers", "Cached")
    if found is None:
        return None
    total, free, buffers, cached = found
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total() -> str | None:
    """Return the total memory."""
    found = _meminfo("MemTotal")
    return None if found is None else fmt_human(found[0] * 1024, 1024)


def ram_used() -> str | None:
    """Return the memory in use, excluding buffers and cache."""
    found = _meminfo("MemTotal", "MemFree", "Buffers", "Cached")
    if found is None:
        return None
    total, free, buffers, cached = found
    return fmt_human((total - free - buffers - cached) * 1024, 1024)