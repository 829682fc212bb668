"""Date/time helper tests"""

from datetime import date, datetime, time

import pytest

from tavola.errors import InvalidArgument
from tavola.utils.time import add_minutes, day_of_week, parse_date, parse_time


def test_parse_date():
    assert parse_date("2030-05-17") == date(2030, 5, 17)
    assert parse_date(" 2030-05-17T19:00:00 ") == date(2030, 5, 17)
    assert parse_date(datetime(2030, 5, 17, 19, 0)) == date(2030, 5, 17)


@pytest.mark.parametrize("value", ["", "17/05/2030", "2030-13-01", "2030-05-17junk", "2030-05-17T25:00", None])
def test_parse_date_invalid(value):
    with pytest.raises(InvalidArgument) as exc_info:
        parse_date(value)
    assert exc_info.value.errors[0]["field"] == "date"


def test_parse_time():
    assert parse_time("19:30") == time(19, 30)
    assert parse_time("07:05:09") == time(7, 5, 9)
    assert parse_time(time(19, 30, 0, 500)) == time(19, 30)


@pytest.mark.parametrize("value", ["7pm", "24:00", "19h30", ""])
def test_parse_time_invalid(value):
    with pytest.raises(InvalidArgument):
        parse_time(value)


def test_day_of_week_starts_on_sunday():
    assert day_of_week(date(2024, 6, 2)) == 0  # Sunday
    assert day_of_week(date(2024, 6, 3)) == 1  # Monday
    assert day_of_week(date(2024, 6, 8)) == 6  # Saturday


def test_add_minutes():
    assert add_minutes(time(19, 0), 90) == time(20, 30)
    assert add_minutes(time(23, 0), 120) == time(23, 59)
