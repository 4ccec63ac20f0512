from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from winter_chances.core.chances import chance_weight
from winter_chances.core.tables import Dataset, Disciplin
from winter_chances.core.utils import normalize_key

from .joins import index_by_disciplin_id


LOW_CHANCE_SUM = 5
HIGH_CHANCE_SUM = 20


@dataclass(frozen=True)
class DisciplinStats:
    disciplin: Disciplin
    day: Optional[str]
    chance_sum: int
    athlete_count: int

    @property
    def level(self) -> str:
        if self.chance_sum == 0:
            return "empty"
        if self.chance_sum < LOW_CHANCE_SUM:
            return "low"
        if self.chance_sum > HIGH_CHANCE_SUM:
            return "high"
        return "normal"


@dataclass(frozen=True)
class DataCheckingView:
    stats: list[DisciplinStats] = field(default_factory=list)

    @property
    def total_chance_sum(self) -> int:
        return sum(stat.chance_sum for stat in self.stats)

    @property
    def total_athletes(self) -> int:
        return sum(stat.athlete_count for stat in self.stats)

    def totals(self) -> dict[str, int]:
        return {
            "chance_sum": self.total_chance_sum,
            "athletes": self.total_athletes,
            "disciplins": len(self.stats),
        }


def data_checking_view(dataset: Dataset) -> DataCheckingView:
    """Chance distribution per discipline, heaviest first."""
    calendar = index_by_disciplin_id(dataset.calendar)
    weights: dict[str, list[int]] = {}
    for athlete in dataset.athletes:
        weights.setdefault(normalize_key(athlete.disciplin_id), []).append(chance_weight(athlete.chance))

    stats: list[DisciplinStats] = []
    for disciplin in dataset.disciplins:
        key = normalize_key(disciplin.disciplin_id)
        calendar_entry = calendar.get(key)
        entries = weights.get(key, [])
        stats.append(
            DisciplinStats(
                disciplin=disciplin,
                day=(calendar_entry.day or None) if calendar_entry else None,
                chance_sum=sum(entries),
                athlete_count=len(entries),
            )
        )
    return DataCheckingView(stats=sorted(stats, key=lambda stat: -stat.chance_sum))


def stats_as_frame(view: DataCheckingView) -> pd.DataFrame:
    columns = ["disciplin_id", "name", "sport", "day", "athlete_count", "chance_sum", "level"]
    rows = [
        {
            "disciplin_id": stat.disciplin.disciplin_id,
            "name": stat.disciplin.name,
            "sport": stat.disciplin.sport,
            "day": stat.day or "-",
            "athlete_count": stat.athlete_count,
            "chance_sum": stat.chance_sum,
            "level": stat.level,
        }
        for stat in view.stats
    ]
    return pd.DataFrame(rows, columns=columns)
