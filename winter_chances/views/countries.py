from __future__ import annotations

from typing import Iterable

from winter_chances.core.chances import chance_weight
from winter_chances.core.tables import Athlete, Dataset


def country_power(athletes: Iterable[Athlete]) -> dict[str, int]:
    """Sum of chance weights per country value; blank countries are skipped."""
    power: dict[str, int] = {}
    for athlete in athletes:
        if not athlete.country:
            continue
        power[athlete.country] = power.get(athlete.country, 0) + chance_weight(athlete.chance)
    return power


def calendar_country_power(dataset: Dataset) -> dict[str, int]:
    """Calendar page sidebar: always over the full athlete table."""
    return country_power(dataset.athletes)


def rank_countries(athletes: Iterable[Athlete], power: dict[str, int]) -> list[str]:
    countries = {athlete.country for athlete in athletes if athlete.country}
    return sorted(countries, key=lambda country: (-power.get(country, 0), country))
