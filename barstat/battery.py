"""Battery charge, state and remaining time from the power-supply class in sysfs."""

from __future__ import annotations

import os
from pathlib import Path

from .util import read_int, read_text

__all__ = ["battery_perc", "battery_state", "battery_remaining"]

POWER_SUPPLY_DIR = Path("/sys/class/power_supply")

_STATE_SYMBOLS = {"Charging": "+", "Discharging": "-"}


def _pick(bat: str, first: str, second: str) -> Path | None:
    for name in (first, second):
        path = POWER_SUPPLY_DIR / bat / name
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(bat: str) -> str | None:
    text = read_text(POWER_SUPPLY_DIR / bat / "status")
    if text is None:
        return None
    words = text.split()
    return words[0][:12] if words else None


def battery_perc(bat: str) -> str | None:
    """Return the battery capacity in percent."""
    perc = read_int(POWER_SUPPLY_DIR / bat / "capacity")
    return None if perc is None else str(perc)


def battery_state(bat: str) -> str | None:
    """Return '+' when charging, '-' when discharging, '?' otherwise."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the remaining time as 'Hh Mm' while discharging, else an empty string."""
    state = _read_state(bat)
    if state is None:
        return None
    path = _pick(bat, "charge_now", "energy_now")
    if path is None:
        return None
    charge_now = read_int(path)
    if charge_now is None:
        return None
    if state != "Discharging":
        return ""
    path = _pick(bat, "current_now", "power_now")
    if path is None:
        return None
    current_now = read_int(path)
    if not current_now:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"