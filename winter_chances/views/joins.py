from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from winter_chances.core.tables import CalendarDay, Disciplin
from winter_chances.core.utils import normalize_key


class _HasDisciplinId(Protocol):
    disciplin_id: str


RowT = TypeVar("RowT", bound=_HasDisciplinId)


def find_by_disciplin_id(disciplin_id: str, rows: Iterable[RowT]) -> Optional[RowT]:
    """First row whose normalized ``disciplin_id`` matches, else ``None``."""
    key = normalize_key(disciplin_id)
    for row in rows:
        if normalize_key(row.disciplin_id) == key:
            return row
    return None


def rows_for_disciplin(disciplin_id: str, rows: Iterable[RowT]) -> list[RowT]:
    key = normalize_key(disciplin_id)
    return [row for row in rows if normalize_key(row.disciplin_id) == key]


def index_by_disciplin_id(rows: Sequence[RowT]) -> dict[str, RowT]:
    """First-wins lookup table, equivalent to repeated ``find_by_disciplin_id`` calls."""
    index: dict[str, RowT] = {}
    for row in rows:
        index.setdefault(normalize_key(row.disciplin_id), row)
    return index


def find_disciplin(disciplin_id: str, disciplins: Iterable[Disciplin]) -> Optional[Disciplin]:
    return find_by_disciplin_id(disciplin_id, disciplins)


def find_calendar_day(disciplin_id: str, calendar: Iterable[CalendarDay]) -> Optional[CalendarDay]:
    return find_by_disciplin_id(disciplin_id, calendar)


def day_for(disciplin_id: str, calendar: Iterable[CalendarDay]) -> Optional[str]:
    entry = find_calendar_day(disciplin_id, calendar)
    if entry is None:
        return None
    return entry.day or None


def sport_for(disciplin_id: str, disciplins: Iterable[Disciplin]) -> Optional[str]:
    disciplin = find_disciplin(disciplin_id, disciplins)
    if disciplin is None or not disciplin.sport:
        return None
    return disciplin.sport


def disciplin_label(disciplin_id: str, disciplins: Iterable[Disciplin]) -> str:
    disciplin = find_disciplin(disciplin_id, disciplins)
    if disciplin is None or not disciplin.name:
        return disciplin_id
    return disciplin.name
