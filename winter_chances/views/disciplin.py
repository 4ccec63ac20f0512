from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from winter_chances.core.chances import group_by_category
from winter_chances.core.tables import Athlete, Dataset, Disciplin, Event
from winter_chances.core.utils import parse_int

from .joins import day_for, find_disciplin, rows_for_disciplin


@dataclass(frozen=True)
class DisciplinView:
    disciplin: Disciplin
    day: Optional[str]
    events: list[Event] = field(default_factory=list)
    athlete_groups: list[tuple[str, list[Athlete]]] = field(default_factory=list)

    @property
    def athletes(self) -> list[Athlete]:
        return [athlete for _, athletes in self.athlete_groups for athlete in athletes]


def sort_events(events: list[Event]) -> list[Event]:
    return sorted(events, key=lambda event: (parse_int(event.day, 0), event.time_begin))


def disciplin_view(dataset: Dataset, disciplin_id: str) -> Optional[DisciplinView]:
    disciplin = find_disciplin(disciplin_id, dataset.disciplins)
    if disciplin is None:
        return None

    athletes = sorted(rows_for_disciplin(disciplin_id, dataset.athletes), key=lambda athlete: athlete.full_name)
    return DisciplinView(
        disciplin=disciplin,
        day=day_for(disciplin_id, dataset.calendar),
        events=sort_events(rows_for_disciplin(disciplin_id, dataset.events)),
        athlete_groups=group_by_category(athletes, lambda athlete: athlete.chance),
    )
