"""CPU frequency and utilisation."""

from __future__ import annotations

from .util import fmt_human, read_int, read_text

__all__ = ["CpuUsage", "cpu_freq", "cpu_perc"]

SCALING_CUR_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"


class CpuUsage:
    """Tracks /proc/stat between samples to compute CPU usage in percent."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._last: tuple[float, ...] = (0.0,) * 7

    def _read(self) -> tuple[float, ...] | None:
        text = read_text(self.stat_path)
        if text is None:
            return None
        fields = text.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return tuple(float(field) for field in fields)
        except ValueError:
            return None

    def sample(self) -> str | None:
        """Take a new sample; return usage since the previous one, or None."""
        current = self._read()
        if current is None:
            return None
        previous, self._last = self._last, current
        if previous[0] == 0:
            return None
        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy_indices = (0, 1, 2, 5, 6)
        busy = sum(previous[i] for i in busy_indices) - sum(current[i] for i in busy_indices)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_freq() -> str | None:
    """Return the current frequency of the first CPU in human-readable Hz."""
    freq = read_int(SCALING_CUR_FREQ)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


def cpu_perc() -> str | None:
    """Return CPU usage since the previous call, in percent."""
    return _usage.sample()