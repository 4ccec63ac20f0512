from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from winter_chances.core.chances import chance_weight
from winter_chances.core.countries import country_code_from_slug, get_country_name
from winter_chances.core.tables import Athlete, Dataset, Disciplin, Event
from winter_chances.core.utils import normalize_key

from .joins import index_by_disciplin_id


@dataclass(frozen=True)
class DailyChance:
    athlete: Athlete
    disciplin: Optional[Disciplin]

    @property
    def weight(self) -> int:
        return chance_weight(self.athlete.chance)


@dataclass(frozen=True)
class DailyEvent:
    event: Event
    disciplin: Optional[Disciplin]

    @property
    def label(self) -> str:
        if self.disciplin is not None and self.disciplin.name:
            return self.disciplin.name
        return self.event.disciplin_id


@dataclass(frozen=True)
class DailyDigest:
    country_code: str
    country_name: str
    day: str
    best_chance: Optional[DailyChance] = None
    other_chances: list[DailyChance] = field(default_factory=list)
    to_watch: list[DailyEvent] = field(default_factory=list)
    dont_miss: list[DailyEvent] = field(default_factory=list)

    def is_empty(self) -> bool:
        return self.best_chance is None and not self.other_chances and not self.to_watch and not self.dont_miss


def _events_on(dataset: Dataset, day: str) -> list[Event]:
    key = normalize_key(day)
    return [event for event in dataset.events if normalize_key(event.day) == key]


def daily_chances(dataset: Dataset, country_code: str, day: str) -> list[DailyChance]:
    """Country entries in disciplines holding a medal event on ``day``, best first."""
    medal_ids = {normalize_key(event.disciplin_id) for event in _events_on(dataset, day) if event.medal}
    disciplins = index_by_disciplin_id(dataset.disciplins)
    code = normalize_key(country_code)
    chances = [
        DailyChance(athlete=athlete, disciplin=disciplins.get(normalize_key(athlete.disciplin_id)))
        for athlete in dataset.athletes
        if normalize_key(athlete.country) == code and normalize_key(athlete.disciplin_id) in medal_ids
    ]
    return sorted(chances, key=lambda chance: -chance.weight)


def events_to_watch(dataset: Dataset, country_code: str, day: str) -> list[Event]:
    """Team games the country plays in, plus events of disciplines it has entries in."""
    code = normalize_key(country_code)
    entered = {
        normalize_key(athlete.disciplin_id) for athlete in dataset.athletes if normalize_key(athlete.country) == code
    }
    selected: list[Event] = []
    for event in _events_on(dataset, day):
        if event.game:
            if code in (normalize_key(event.team_1), normalize_key(event.team_2)):
                selected.append(event)
        elif normalize_key(event.disciplin_id) in entered:
            selected.append(event)
    return selected


def medal_events(dataset: Dataset, day: str) -> list[Event]:
    return [event for event in _events_on(dataset, day) if event.medal]


def daily_digest(dataset: Dataset, country_slug: str, day: str) -> Optional[DailyDigest]:
    country_code = country_code_from_slug(country_slug)
    if country_code is None:
        return None
    country_name = get_country_name(country_code)
    if not country_name:
        return None

    disciplins = index_by_disciplin_id(dataset.disciplins)

    def enrich(events: list[Event]) -> list[DailyEvent]:
        return [DailyEvent(event=event, disciplin=disciplins.get(normalize_key(event.disciplin_id))) for event in events]

    chances = daily_chances(dataset, country_code, day)
    return DailyDigest(
        country_code=country_code,
        country_name=country_name,
        day=day,
        best_chance=chances[0] if chances else None,
        other_chances=chances[1:],
        to_watch=enrich(events_to_watch(dataset, country_code, day)),
        dont_miss=enrich(medal_events(dataset, day)),
    )
