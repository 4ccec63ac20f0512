from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from winter_chances.core.chances import category_rank, group_by_category
from winter_chances.core.tables import Athlete, Dataset, Disciplin
from winter_chances.core.utils import normalize_key, parse_int

from .countries import country_power, rank_countries
from .joins import index_by_disciplin_id


NO_DAY_SORT_VALUE = 9999

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HomeFilters:
    """Selections of the home page; an empty selection means "no restriction"."""

    day: Optional[str] = None
    sports: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()


@dataclass(frozen=True)
class AthleteRow:
    athlete: Athlete
    disciplin: Optional[Disciplin]
    day: Optional[str]


@dataclass(frozen=True)
class HomeView:
    filters: HomeFilters
    groups: list[tuple[str, list[AthleteRow]]] = field(default_factory=list)
    sports: list[str] = field(default_factory=list)
    active_sports: list[str] = field(default_factory=list)
    days: list[str] = field(default_factory=list)
    countries: list[str] = field(default_factory=list)
    country_power: dict[str, int] = field(default_factory=dict)

    @property
    def rows(self) -> list[AthleteRow]:
        return [row for _, rows in self.groups for row in rows]


def _disciplin_ids_for_day(dataset: Dataset, day: str) -> set[str]:
    return {normalize_key(entry.disciplin_id) for entry in dataset.calendar if entry.day == day}


def filter_athletes(dataset: Dataset, filters: HomeFilters) -> list[AthleteRow]:
    """Athlete rows passing every active filter, enriched with discipline and day."""
    selected = list(dataset.athletes)

    if filters.day:
        day_ids = _disciplin_ids_for_day(dataset, filters.day)
        selected = [athlete for athlete in selected if normalize_key(athlete.disciplin_id) in day_ids]

    if filters.sports:
        sport_ids = {
            normalize_key(disciplin.disciplin_id)
            for disciplin in dataset.disciplins
            if disciplin.sport in filters.sports
        }
        selected = [athlete for athlete in selected if normalize_key(athlete.disciplin_id) in sport_ids]

    if filters.countries:
        selected = [athlete for athlete in selected if athlete.country in filters.countries]

    disciplins = index_by_disciplin_id(dataset.disciplins)
    calendar = index_by_disciplin_id(dataset.calendar)
    rows: list[AthleteRow] = []
    for athlete in selected:
        key = normalize_key(athlete.disciplin_id)
        disciplin = disciplins.get(key)
        if disciplin is None and athlete.disciplin_id:
            logger.debug("Discipline not found for disciplin_id %r", athlete.disciplin_id)
        calendar_entry = calendar.get(key)
        rows.append(
            AthleteRow(
                athlete=athlete,
                disciplin=disciplin,
                day=(calendar_entry.day or None) if calendar_entry else None,
            )
        )
    return rows


def home_country_power(dataset: Dataset, filters: HomeFilters) -> dict[str, int]:
    """Home page sidebar: power over the currently filtered athletes only."""
    return country_power(row.athlete for row in filter_athletes(dataset, filters))


def sports(dataset: Dataset) -> list[str]:
    return sorted({disciplin.sport for disciplin in dataset.disciplins if disciplin.sport})


def active_sports(dataset: Dataset, day: Optional[str]) -> list[str]:
    """Sports with at least one discipline on ``day``; every sport when no day is set."""
    all_sports = sports(dataset)
    if not day:
        return all_sports
    day_ids = _disciplin_ids_for_day(dataset, day)
    active = {
        disciplin.sport
        for disciplin in dataset.disciplins
        if disciplin.sport and normalize_key(disciplin.disciplin_id) in day_ids
    }
    return [sport for sport in all_sports if sport in active]


def header_days(days: list[str]) -> list[str]:
    """Distinct day labels, numeric ones first in numeric order."""
    unique = list(dict.fromkeys(day for day in days if day))
    return sorted(unique, key=lambda day: (parse_int(day) is None, parse_int(day, 0), day))


def _row_sort_key(row: AthleteRow) -> tuple[int, int, str]:
    day_number = parse_int(row.day) if row.day else None
    return (
        category_rank(row.athlete.chance),
        NO_DAY_SORT_VALUE if day_number is None else day_number,
        row.athlete.full_name,
    )


def home_view(dataset: Dataset, filters: HomeFilters | None = None) -> HomeView:
    filters = filters or HomeFilters()
    rows = sorted(filter_athletes(dataset, filters), key=_row_sort_key)
    power = home_country_power(dataset, filters)
    return HomeView(
        filters=filters,
        groups=group_by_category(rows, lambda row: row.athlete.chance),
        sports=sports(dataset),
        active_sports=active_sports(dataset, filters.day),
        days=header_days([entry.day for entry in dataset.calendar]),
        countries=rank_countries(dataset.athletes, power),
        country_power=power,
    )
