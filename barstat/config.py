"""Status line layout: which components to show and how."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from . import battery, cpu, disk, files, ip, netspeeds, ram, swap, system, temperature
from . import volume, wifi
from .datetime_info import datetime

__all__ = [
    "Arg",
    "INTERVAL",
    "UNKNOWN_STR",
    "MAXLEN",
    "VOL",
    "MIC",
    "ARGS",
    "COMPONENTS",
]

INTERVAL = 1000
"""Milliseconds between updates."""

UNKNOWN_STR = "n/a"
"""Text shown when a component cannot produce a value."""

MAXLEN = 2048
"""Maximum length of the status line in bytes."""


@dataclass(frozen=True)
class Arg:
    """One status line entry: a component, its format and its argument."""

    func: Callable[..., Optional[str]]
    fmt: str
    argument: Optional[str] = None

    def value(self) -> str | None:
        """Run the component and return its text, or None if unavailable."""
        if self.argument is None:
            return self.func()
        return self.func(self.argument)


def _amixer_command(control: str) -> str:
    query = f"amixer sget {control} | tail -n 1"
    return (
        f"[ `{query} | awk '{{print $6;}}'` = \"[on]\" ] "
        f"&& printf \"`{query} | awk '{{print $5;}}' | grep -Po '\\[\\K[^%]*'`%%\" "
        "|| printf 'Off'"
    )


VOL = _amixer_command("Master")
MIC = _amixer_command("Capture")

COMPONENTS: dict[str, Callable[..., Optional[str]]] = {
    "battery_perc": battery.battery_perc,
    "battery_state": battery.battery_state,
    "battery_remaining": battery.battery_remaining,
    "cpu_freq": cpu.cpu_freq,
    "cpu_perc": cpu.cpu_perc,
    "datetime": datetime,
    "disk_free": disk.disk_free,
    "disk_perc": disk.disk_perc,
    "disk_total": disk.disk_total,
    "disk_used": disk.disk_used,
    "entropy": system.entropy,
    "hostname": system.hostname,
    "ipv4": ip.ipv4,
    "ipv6": ip.ipv6,
    "kernel_release": system.kernel_release,
    "load_avg": system.load_avg,
    "netspeed_rx": netspeeds.netspeed_rx,
    "netspeed_tx": netspeeds.netspeed_tx,
    "num_files": files.num_files,
    "ram_free": ram.ram_free,
    "ram_perc": ram.ram_perc,
    "ram_total": ram.ram_total,
    "ram_used": ram.ram_used,
    "run_command": files.run_command,
    "swap_free": swap.swap_free,
    "swap_perc": swap.swap_perc,
    "swap_total": swap.swap_total,
    "swap_used": swap.swap_used,
    "temp": temperature.temp,
    "uptime": system.uptime,
    "gid": system.gid,
    "username": system.username,
    "uid": system.uid,
    "vol_perc": volume.vol_perc,
    "wifi_perc": wifi.wifi_perc,
    "wifi_essid": wifi.wifi_essid,
}

ARGS: tuple[Arg, ...] = (
    Arg(datetime, "   %s             ", "%a %F %T"),
    Arg(cpu.cpu_perc, " %s%%"),
    Arg(temperature.temp, "(%s°C)  ", "/sys/class/thermal/thermal_zone0/temp"),
    Arg(ram.ram_used, "  %s"),
    Arg(ram.ram_perc, "(%s%%)  "),
    Arg(files.run_command, " %s%%  ", "xbacklight -get"),
    Arg(battery.battery_perc, " %s%%", "BAT0"),
    Arg(battery.battery_state, "(%s)  ", "BAT0"),
    Arg(volume.vol_perc, " %s%%  ", "/dev/mixer"),
    Arg(files.run_command, " %s  ", MIC),
)