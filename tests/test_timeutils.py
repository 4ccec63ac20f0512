from datetime import timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from winter_chances.core.timeutils import (
    AFTERNOON,
    EVENING,
    MORNING,
    evening_sort_hour,
    format_day_as_date,
    format_hour,
    hour_of,
    session_for_hour,
    venue_display_time,
    venue_to_viewer,
)


@pytest.mark.parametrize(
    "hour, session",
    [
        (0, EVENING),
        (1, EVENING),
        (2, MORNING),
        (11, MORNING),
        (12, AFTERNOON),
        (17, AFTERNOON),
        (18, EVENING),
        (23, EVENING),
    ],
)
def test_session_windows(hour, session):
    assert session_for_hour(hour) == session


def test_evening_sort_hour_continues_past_midnight():
    assert evening_sort_hour(0) == 24
    assert evening_sort_hour(1) == 25
    assert evening_sort_hour(2) == 2
    assert sorted([0, 23, 18, 1], key=evening_sort_hour) == [18, 23, 0, 1]


def test_hour_of():
    assert hour_of("09:15") == 9
    assert hour_of("21:10:00") == 21
    assert hour_of("TBD") == 0


def test_venue_display_time_keeps_hours_and_minutes():
    assert venue_display_time("11:30:00") == "11:30"
    assert venue_display_time("") == ""


def test_venue_to_viewer_with_fixed_offsets():
    assert venue_to_viewer("11:30", "7", timezone(timedelta(hours=1))) == "11:30"
    assert venue_to_viewer("11:30", "7", timezone.utc) == "10:30"
    assert venue_to_viewer("11:30", "7", timezone(timedelta(hours=-5))) == "05:30"
    assert venue_to_viewer("23:30", "7", timezone(timedelta(hours=9))) == "07:30"


def test_venue_to_viewer_with_named_zone():
    # Toronto is UTC-5 in February.
    assert venue_to_viewer("19:00", "10", ZoneInfo("America/Toronto")) == "13:00"


def test_venue_to_viewer_is_pure():
    tz = ZoneInfo("Asia/Tokyo")
    assert venue_to_viewer("18:45", "12", tz) == venue_to_viewer("18:45", "12", tz) == "02:45"


def test_venue_to_viewer_degrades_on_bad_input():
    assert venue_to_viewer("TBD", "7", timezone.utc) == "TBD"
    assert venue_to_viewer("12:00", "", timezone.utc) == "11:00"


def test_format_hour():
    assert format_hour(0) == "00:00"
    assert format_hour(24) == "00:00"
    assert format_hour(9) == "09:00"
    assert format_hour(21) == "21:00"


@pytest.mark.parametrize(
    "day, label",
    [
        ("6", "Friday, February 6th"),
        ("1", "Sunday, February 1st"),
        ("2", "Monday, February 2nd"),
        ("3", "Tuesday, February 3rd"),
        ("11", "Wednesday, February 11th"),
        ("22", "Sunday, February 22nd"),
        (None, "All Days"),
        ("final", "Day final"),
    ],
)
def test_format_day_as_date(day, label):
    assert format_day_as_date(day) == label


def test_days_out_of_calendar_range_do_not_raise():
    assert venue_to_viewer("10:00", "99999999", timezone.utc) == "10:00"
    assert venue_to_viewer("10:00", "9999999999", timezone.utc) == "10:00"
    assert format_day_as_date("99999999") == "Day 99999999"
