from __future__ import annotations

from urllib.parse import quote

from winter_chances.core.tables import Dataset
from winter_chances.core.utils import create_athlete_slug


STATIC_ROUTES: list[tuple[str, str, float]] = [
    ("", "daily", 1.0),
    ("/calendar", "daily", 0.9),
    ("/athlete-ranking", "daily", 0.8),
    ("/data-checking", "weekly", 0.3),
]


def athlete_path(firstname: str, lastname: str) -> str:
    return f"/athlete/{create_athlete_slug(firstname, lastname)}"


def disciplin_path(disciplin_id: str) -> str:
    return f"/disciplin/{quote(disciplin_id or '', safe='')}"


def daily_path(country_slug: str, day: str) -> str:
    return f"/daily/{quote(country_slug, safe='')}/{quote(str(day), safe='')}"


def sitemap_entries(dataset: Dataset, site_url: str) -> list[dict[str, object]]:
    """One URL per static page, per discipline and per distinct athlete name."""
    base = site_url.rstrip("/")
    entries: list[dict[str, object]] = [
        {"url": f"{base}{path}", "change_frequency": frequency, "priority": priority}
        for path, frequency, priority in STATIC_ROUTES
    ]
    for disciplin in dataset.disciplins:
        entries.append(
            {"url": f"{base}{disciplin_path(disciplin.disciplin_id)}", "change_frequency": "daily", "priority": 0.8}
        )

    seen: set[tuple[str, str]] = set()
    for athlete in dataset.athletes:
        if not athlete.firstname or not athlete.lastname:
            continue
        key = (athlete.firstname.lower(), athlete.lastname.lower())
        if key in seen:
            continue
        seen.add(key)
        entries.append(
            {
                "url": f"{base}{athlete_path(athlete.firstname, athlete.lastname)}",
                "change_frequency": "daily",
                "priority": 0.7,
            }
        )
    return entries
