"""Master volume from an OSS mixer device."""

from __future__ import annotations

import array
import fcntl
import os

from .util import warn

__all__ = ["vol_perc", "SOUND_DEVICE_NAMES", "SOUND_MIXER_READ_DEVMASK"]

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3", "dig1",
    "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

# _IOR('M', nr, int): read direction, 4-byte argument, mixer ioctl type.
_MIXER_READ_BASE = 0x80044D00
SOUND_MIXER_READ_DEVMASK = _MIXER_READ_BASE | 0xFE


def _mixer_read(index: int) -> int:
    return _MIXER_READ_BASE | index


def _ioctl_int(fd: int, request: int) -> int:
    value = array.array("i", [0])
    fcntl.ioctl(fd, request, value, True)
    return value[0]


def vol_perc(card: str) -> str | None:
    """Return the left-channel level of the master volume of a mixer device."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}': {exc.strerror or exc}")
        return None

    level = None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {exc.strerror or exc}")
            return None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _ioctl_int(fd, _mixer_read(index))
                except OSError as exc:
                    warn(f"ioctl 'MIXER_READ({index})': {exc.strerror or exc}")
                    return None
    finally:
        os.close(fd)

    return None if level is None else str(level & 0xFF)