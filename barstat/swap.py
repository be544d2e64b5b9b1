"""Swap usage from /proc/meminfo."""

from __future__ import annotations

from .util import fmt_human, read_text

__all__ = ["swap_free", "swap_perc", "swap_total", "swap_used"]

MEMINFO = "/proc/meminfo"
_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")


def _swap_info() -> dict[str, int] | None:
    text = read_text(MEMINFO)
    if text is None:
        return None
    info: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if sep and name in _FIELDS and name not in info:
            words = rest.split()
            try:
                info[name] = int(words[0])
            except (IndexError, ValueError):
                continue
        if len(info) == len(_FIELDS):
            break
    return info


def _get(*fields: str) -> tuple[int, ...] | None:
    info = _swap_info()
    if info is None or any(field not in info for field in fields):
        return None
    return tuple(info[field] for field in fields)


def swap_free() -> str | None:
    """Return the free swap space."""
    found = _get("SwapFree")
    return None if found is None else fmt_human(found[0] * 1024, 1024)


def swap_perc() -> str | None:
    """Return the share of swap in use, excluding swap cache, in percent."""
    found = _get(*_FIELDS)
    if found is None:
        return None
    total, free, cached = found
    if total == 0:
        return None
    return str(int(100 * (total - free - cached) / total))


def swap_total() -> str | None:
    """Return the total swap space."""
    found = _get("SwapTotal")
    return None if found is None else fmt_human(found[0] * 1024, 1024)


def swap_used() -> str | None:
    """Return the swap in use, excluding swap cache."""
    found = _get(*_FIELDS)
    if found is None:
        return None
    total, free, cached = found
    return fmt_human((total - free - cached) * 1024, 1024)