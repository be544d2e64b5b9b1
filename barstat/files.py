"""Directory entry counts and shell command output."""

from __future__ import annotations

import os
import subprocess

from .util import BUFFER_SIZE, warn

__all__ = ["num_files", "run_command"]


def num_files(path: str) -> str | None:
    """Return the number of entries in a directory."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(count)


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` in a shell and return the first line of its output."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None
    with proc:
        assert proc.stdout is not None
        line = proc.stdout.readline(BUFFER_SIZE - 2)
        proc.stdout.close()
        proc.wait()
    text = line.decode("utf-8", errors="replace")
    if text.endswith("\n"):
        text = text[:-1]
    return text or None