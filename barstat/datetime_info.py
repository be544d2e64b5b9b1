"""Local date and time formatted with strftime."""

from __future__ import annotations

import time

from .util import BUFFER_SIZE, warn

__all__ = ["datetime"]


def datetime(fmt: str) -> str | None:
    """Return the current local time formatted with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result