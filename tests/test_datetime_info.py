from datetime import datetime as _dt

from barstat.datetime_info import datetime


def test_year_format():
    result = datetime("%Y")
    assert len(result) == 4
    assert result.isdigit()
    assert int(result) >= 2000


def test_date_time_format():
    result = datetime("%a %F %T")
    parsed = _dt.strptime(result, "%a %Y-%m-%d %H:%M:%S")
    assert parsed.year >= 2000
    assert result == parsed.strftime("%a %Y-%m-%d %H:%M:%S")


def test_literal_text_passes_through():
    assert datetime("plain text") == "plain text"


def test_empty_result_is_none(capsys):
    assert datetime("") is None
    assert "strftime" in capsys.readouterr().err


def test_oversized_result_is_none():
    assert datetime("%Y" * 300) is None