from unittest import mock

import pytest

from barstat import volume
from barstat.volume import SOUND_MIXER_READ_DEVMASK, vol_perc


@pytest.fixture
def mixer(tmp_path):
    path = tmp_path / "mixer"
    path.write_bytes(b"")
    return str(path)


def _fake_ioctl(devmask, level):
    def ioctl(fd, request, buf, mutate=True):
        buf[0] = devmask if request == SOUND_MIXER_READ_DEVMASK else level
        return 0

    return ioctl


def test_missing_device_gives_none(tmp_path):
    assert vol_perc(str(tmp_path / "absent")) is None


def test_regular_file_is_not_a_mixer(mixer):
    assert vol_perc(mixer) is None


def test_reports_left_channel_level(mixer):
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(1, 0x3C3C)):
        assert vol_perc(mixer) == str(0x3C)


def test_uses_low_byte_only(mixer):
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(1, 0x1E50)):
        assert vol_perc(mixer) == str(0x50)


def test_no_volume_control_in_devmask(mixer):
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(0b10, 0x3C3C)):
        assert vol_perc(mixer) is None


def test_ioctl_failure_gives_none(mixer):
    with mock.patch("fcntl.ioctl", side_effect=OSError(25, "Inappropriate ioctl")):
        assert vol_perc(mixer) is None


def test_vol_is_first_device_name():
    assert volume.SOUND_DEVICE_NAMES.index("vol") == 0
    assert volume._mixer_read(0) & 0xFF == 0