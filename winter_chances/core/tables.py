from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, Mapping, TypeVar


RowT = TypeVar("RowT", bound="_Row")


class _Row:
    """Mixin for flat spreadsheet rows: every column is a string, missing ones are ""."""

    @classmethod
    def from_record(cls: type[RowT], record: Mapping[str, Any]) -> RowT:
        values: dict[str, str] = {}
        for field in fields(cls):  # type: ignore[arg-type]
            raw = record.get(field.name, "")
            values[field.name] = "" if raw is None else str(raw)
        return cls(**values)

    def to_record(self) -> dict[str, str]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Athlete(_Row):
    firstname: str = ""
    lastname: str = ""
    country: str = ""
    disciplin_id: str = ""
    chance: str = ""
    desc: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"


@dataclass(frozen=True)
class Disciplin(_Row):
    disciplin_id: str = ""
    name: str = ""
    sport: str = ""
    gender: str = ""


@dataclass(frozen=True)
class CalendarDay(_Row):
    day: str = ""
    disciplin_id: str = ""


@dataclass(frozen=True)
class Event(_Row):
    day: str = ""
    disciplin_id: str = ""
    time_begin: str = ""
    time_end: str = ""
    desc: str = ""
    is_medal: str = ""
    is_game: str = ""
    team_1: str = ""
    team_2: str = ""

    @property
    def medal(self) -> bool:
        return self.is_medal == "1"

    @property
    def game(self) -> bool:
        return self.is_game == "1"


TABLE_TYPES: dict[str, type[_Row]] = {
    "athletes": Athlete,
    "disciplins": Disciplin,
    "calendar": CalendarDay,
    "events": Event,
}


def _rows(row_type: type[RowT], records: Iterable[Mapping[str, Any]] | None) -> tuple[RowT, ...]:
    if not records:
        return ()
    return tuple(row_type.from_record(record) for record in records)


@dataclass(frozen=True)
class Dataset:
    """The four source tables of one page visit. Never mutated."""

    athletes: tuple[Athlete, ...] = ()
    disciplins: tuple[Disciplin, ...] = ()
    calendar: tuple[CalendarDay, ...] = ()
    events: tuple[Event, ...] = ()

    @classmethod
    def empty(cls) -> "Dataset":
        return cls()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Iterable[Mapping[str, Any]] | None]) -> "Dataset":
        return cls(
            athletes=_rows(Athlete, payload.get("athletes")),
            disciplins=_rows(Disciplin, payload.get("disciplins")),
            calendar=_rows(CalendarDay, payload.get("calendar")),
            events=_rows(Event, payload.get("events")),
        )

    def to_payload(self) -> dict[str, list[dict[str, str]]]:
        return {
            "athletes": [row.to_record() for row in self.athletes],
            "disciplins": [row.to_record() for row in self.disciplins],
            "calendar": [row.to_record() for row in self.calendar],
            "events": [row.to_record() for row in self.events],
        }

    def row_counts(self) -> dict[str, int]:
        return {
            "athletes": len(self.athletes),
            "disciplins": len(self.disciplins),
            "calendar": len(self.calendar),
            "events": len(self.events),
        }

    def is_empty(self) -> bool:
        return not any(self.row_counts().values())
