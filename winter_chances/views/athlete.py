from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from winter_chances.core.chances import chance_weight, group_by_category
from winter_chances.core.tables import Athlete, Dataset, Disciplin
from winter_chances.core.utils import create_athlete_slug, normalize_key, parse_athlete_slug

from .joins import index_by_disciplin_id


@dataclass(frozen=True)
class AthleteDisciplinEntry:
    disciplin: Disciplin
    chance: str
    desc: str
    day: Optional[str]

    @property
    def weight(self) -> int:
        return chance_weight(self.chance)


@dataclass(frozen=True)
class AthleteView:
    firstname: str
    lastname: str
    country: str
    groups: list[tuple[str, list[AthleteDisciplinEntry]]] = field(default_factory=list)

    @property
    def slug(self) -> str:
        return create_athlete_slug(self.firstname, self.lastname)

    @property
    def entries(self) -> list[AthleteDisciplinEntry]:
        return [entry for _, entries in self.groups for entry in entries]


def _same_name(athlete: Athlete, firstname: str, lastname: str) -> bool:
    return athlete.firstname.lower() == firstname.lower() and athlete.lastname.lower() == lastname.lower()


def find_athlete_by_slug(athletes: tuple[Athlete, ...], slug: str) -> Optional[Athlete]:
    """Decode the slug and match it against the table by case-insensitive name.

    Decoding is lossy, so "anne-marie-dupont" looks for firstname "Anne marie".
    """
    parsed = parse_athlete_slug(slug)
    if parsed is None:
        return None
    for athlete in athletes:
        if _same_name(athlete, parsed["firstname"], parsed["lastname"]):
            return athlete
    return None


def athlete_view(dataset: Dataset, slug: str) -> Optional[AthleteView]:
    athlete = find_athlete_by_slug(dataset.athletes, slug)
    if athlete is None:
        return None

    rows = [row for row in dataset.athletes if _same_name(row, athlete.firstname, athlete.lastname)]
    disciplins = index_by_disciplin_id(dataset.disciplins)
    calendar = index_by_disciplin_id(dataset.calendar)

    entries: list[AthleteDisciplinEntry] = []
    seen: set[str] = set()
    for row in rows:
        disciplin_key = normalize_key(row.disciplin_id)
        if disciplin_key in seen:
            continue
        seen.add(disciplin_key)
        disciplin = disciplins.get(disciplin_key)
        if disciplin is None:
            continue
        calendar_entry = calendar.get(disciplin_key)
        entries.append(
            AthleteDisciplinEntry(
                disciplin=disciplin,
                chance=row.chance,
                desc=row.desc,
                day=(calendar_entry.day or None) if calendar_entry else None,
            )
        )

    entries.sort(key=lambda entry: entry.disciplin.name)
    return AthleteView(
        firstname=athlete.firstname,
        lastname=athlete.lastname,
        country=athlete.country,
        groups=group_by_category(entries, lambda entry: entry.chance),
    )
