"""Shared helpers: diagnostics, bounded formatting, human-readable sizes, file reads."""

from __future__ import annotations

import os
import re
import sys

__all__ = [
    "TruncationError",
    "warn",
    "die",
    "format_bounded",
    "fmt_human",
    "read_text",
    "read_int",
]

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

BUFFER_SIZE = 1024


class TruncationError(ValueError):
    """Raised when formatted output does not fit into its size limit."""


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""


def warn(message: str) -> None:
    """Write a diagnostic line to standard error, prefixed by the program name."""
    name = _program_name()
    prefix = f"{name}: " if name and not message.startswith("usage") else ""
    sys.stderr.write(f"{prefix}{message}\n")
    sys.stderr.flush()


def die(message: str) -> None:
    """Report a fatal error and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def format_bounded(fmt: str, value, limit: int) -> str:
    """Format ``value`` with ``fmt``; raise TruncationError if it needs ``limit`` bytes or more."""
    result = fmt % value
    if len(result.encode("utf-8")) >= limit:
        warn("vsnprintf: Output truncated")
        raise TruncationError(f"formatted output exceeds {limit - 1} bytes")
    return result


def fmt_human(num: float, base: int) -> str:
    """Scale ``num`` by ``base`` (1000 or 1024) and append the matching unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        warn("fmt_human: Invalid base")
        raise ValueError(f"invalid base: {base}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return format_bounded("%.1f %s", (scaled, prefixes[index]), BUFFER_SIZE)


def read_text(path) -> str | None:
    """Return the contents of a text file, or None (with a warning) if it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror or exc}")
        return None


def read_int(path) -> int | None:
    """Return the leading integer of a file, or None if unreadable or absent."""
    text = read_text(path)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None