from barstat.temperature import temp


def test_millidegrees_to_degrees(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("45000\n")
    assert temp(str(sensor)) == "45"


def test_fraction_is_truncated(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("999\n")
    assert temp(str(sensor)) == "0"


def test_non_numeric_contents(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("n/a\n")
    assert temp(str(sensor)) is None


def test_missing_sensor(tmp_path):
    assert temp(str(tmp_path / "absent")) is None