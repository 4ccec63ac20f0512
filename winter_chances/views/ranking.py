from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from winter_chances.core.chances import chance_weight
from winter_chances.core.tables import Athlete, Dataset, Disciplin
from winter_chances.core.utils import create_athlete_slug, normalize_key

from .joins import index_by_disciplin_id


@dataclass(frozen=True)
class AthleteChance:
    disciplin_id: str
    chance: str
    disciplin: Optional[Disciplin]
    day: Optional[str]

    @property
    def weight(self) -> int:
        return chance_weight(self.chance)


@dataclass(frozen=True)
class RankedAthlete:
    firstname: str
    lastname: str
    country: str
    chance_count: int
    total_power: int
    chances: list[AthleteChance] = field(default_factory=list)

    @property
    def slug(self) -> str:
        return create_athlete_slug(self.firstname, self.lastname)


def athlete_key(athlete: Athlete) -> tuple[str, str, str]:
    return (
        normalize_key(athlete.firstname),
        normalize_key(athlete.lastname),
        normalize_key(athlete.country),
    )


def rank_athletes(dataset: Dataset) -> list[RankedAthlete]:
    """Distinct athletes ordered by the sum of their chance weights.

    Ties keep first-seen order; each athlete's chances are ordered by weight.
    """
    disciplins = index_by_disciplin_id(dataset.disciplins)
    calendar = index_by_disciplin_id(dataset.calendar)

    groups: dict[tuple[str, str, str], tuple[Athlete, list[AthleteChance]]] = {}
    for athlete in dataset.athletes:
        disciplin_key = normalize_key(athlete.disciplin_id)
        calendar_entry = calendar.get(disciplin_key)
        entry = AthleteChance(
            disciplin_id=athlete.disciplin_id,
            chance=athlete.chance,
            disciplin=disciplins.get(disciplin_key),
            day=calendar_entry.day if calendar_entry else None,
        )
        key = athlete_key(athlete)
        if key not in groups:
            groups[key] = (athlete, [])
        groups[key][1].append(entry)

    ranked = [
        RankedAthlete(
            firstname=sample.firstname,
            lastname=sample.lastname,
            country=sample.country,
            chance_count=len(chances),
            total_power=sum(chance.weight for chance in chances),
            chances=sorted(chances, key=lambda chance: -chance.weight),
        )
        for sample, chances in groups.values()
    ]
    return sorted(ranked, key=lambda entry: -entry.total_power)
