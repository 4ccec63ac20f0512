from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional

from .utils import parse_int


GAMES_YEAR = 2026
GAMES_MONTH = 2
FALLBACK_DAY = 7

# Milano Cortina runs on CET in February, never CEST.
VENUE_TZ = timezone(timedelta(hours=1), "CET")

MORNING = "Morning"
AFTERNOON = "Afternoon"
EVENING = "Evening"

# (name, first hour, end hour) with end hours past 24 meaning "next morning".
SESSIONS: tuple[tuple[str, int, int], ...] = (
    (MORNING, 2, 12),
    (AFTERNOON, 12, 18),
    (EVENING, 18, 26),
)

EVENING_WRAP_HOUR = 2

TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})")


def parse_time(value: str) -> Optional[tuple[int, int]]:
    match = TIME_PATTERN.match(str(value or ""))
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def hour_of(value: str) -> int:
    """Starting hour of an "HH:MM" string; unparsable times land on hour 0."""
    parsed = parse_time(value)
    if parsed is None:
        return 0
    return parsed[0]


def evening_sort_hour(hour: int) -> int:
    return hour + 24 if hour < EVENING_WRAP_HOUR else hour


def session_for_hour(hour: int) -> str:
    normalized = evening_sort_hour(hour)
    if 2 <= normalized < 12:
        return MORNING
    if 12 <= normalized < 18:
        return AFTERNOON
    return EVENING


def venue_display_time(time_begin: str) -> str:
    return str(time_begin or "")[:5]


def venue_to_viewer(time_begin: str, day: str, viewer_tz: tzinfo) -> str:
    """Shift a venue "HH:MM" on Feb ``day`` 2026 into ``viewer_tz``.

    Depends only on its arguments. An unparsable time comes back unchanged,
    an unparsable day falls back to the 7th. A day outside the calendar range
    also returns the time unchanged.
    """
    parsed = parse_time(time_begin)
    if parsed is None:
        return str(time_begin or "")
    hours, minutes = parsed
    day_number = parse_int(day) or FALLBACK_DAY
    base = datetime(GAMES_YEAR, GAMES_MONTH, 1, tzinfo=VENUE_TZ)
    try:
        venue_moment = base + timedelta(days=day_number - 1, hours=hours, minutes=minutes)
        local = venue_moment.astimezone(viewer_tz)
    except OverflowError:
        return str(time_begin or "")
    return f"{local.hour:02d}:{local.minute:02d}"


def local_timezone() -> tzinfo:
    """The execution environment's zone, resolved at call time."""
    return datetime.now().astimezone().tzinfo or timezone.utc


def format_hour(hour: int) -> str:
    if hour in (0, 24):
        return "00:00"
    return f"{hour:02d}:00"


def _ordinal(n: int) -> str:
    suffixes = {1: "st", 2: "nd", 3: "rd"}
    v = n % 100
    if v >= 20:
        return f"{n}{suffixes.get((v - 20) % 10, 'th')}"
    return f"{n}{suffixes.get(v, 'th')}"


def format_day_as_date(day: Optional[str]) -> str:
    """"Sunday, February 8th" for day "8" of the Games month."""
    if not day:
        return "All Days"
    day_number = parse_int(day)
    if day_number is None:
        return f"Day {day}"
    try:
        moment = date(GAMES_YEAR, GAMES_MONTH, 1) + timedelta(days=day_number - 1)
    except OverflowError:
        return f"Day {day}"
    return f"{moment.strftime('%A')}, {moment.strftime('%B')} {_ordinal(moment.day)}"
