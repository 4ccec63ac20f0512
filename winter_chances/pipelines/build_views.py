from __future__ import annotations

import argparse
import logging
from pathlib import Path

from winter_chances.connectors.base import load_dataset
from winter_chances.connectors.registry import build_connector
from winter_chances.core.config import load_settings
from winter_chances.core.countries import country_slug, get_country_name
from winter_chances.core.metadata import write_build_meta, write_data_dictionary, write_json
from winter_chances.core.tables import Dataset
from winter_chances.core.utils import create_athlete_slug, safe_mkdir
from winter_chances.core.validation import run_all_checks
from winter_chances.views.athlete import athlete_view
from winter_chances.views.calendar import CalendarParams, TimeBase, calendar_days, calendar_view, default_day
from winter_chances.views.daily import daily_digest
from winter_chances.views.data_checking import data_checking_view, stats_as_frame
from winter_chances.views.disciplin import disciplin_view
from winter_chances.views.home import home_view
from winter_chances.views.ranking import rank_athletes
from winter_chances.views.routes import sitemap_entries
from winter_chances.views.serialize import to_jsonable


ROOT_DIR = Path(__file__).resolve().parents[2]


def export_views(dataset: Dataset, exports_dir: Path, site_url: str, viewer_tz) -> dict[str, int]:
    """Compute every view from ``dataset`` and write it under ``exports_dir``."""
    views_dir = safe_mkdir(exports_dir / "views")
    counts: dict[str, int] = {}

    write_json(exports_dir / "data.json", dataset.to_payload())
    write_json(views_dir / "home.json", to_jsonable(home_view(dataset)))
    write_json(views_dir / "athlete_ranking.json", to_jsonable(rank_athletes(dataset)))

    days = calendar_days(dataset.events)
    calendar_payload: dict[str, object] = {"default_day": default_day(dataset.events), "days": {}}
    for day in days:
        calendar_payload["days"][day] = {
            time_base.value: to_jsonable(
                calendar_view(dataset, CalendarParams(day=day, time_base=time_base, viewer_tz=viewer_tz))
            )
            for time_base in TimeBase
        }
    write_json(views_dir / "calendar.json", calendar_payload)
    counts["calendar_days"] = len(days)

    athletes: dict[str, object] = {}
    for athlete in dataset.athletes:
        slug = create_athlete_slug(athlete.firstname, athlete.lastname)
        if slug in athletes:
            continue
        view = athlete_view(dataset, slug)
        if view is not None:
            athletes[slug] = to_jsonable(view)
    write_json(views_dir / "athletes.json", athletes)
    counts["athletes"] = len(athletes)

    disciplins: dict[str, object] = {}
    for disciplin in dataset.disciplins:
        view = disciplin_view(dataset, disciplin.disciplin_id)
        if view is not None:
            disciplins.setdefault(disciplin.disciplin_id, to_jsonable(view))
    write_json(views_dir / "disciplins.json", disciplins)
    counts["disciplins"] = len(disciplins)

    digests: dict[str, dict[str, object]] = {}
    for code in sorted({athlete.country for athlete in dataset.athletes if athlete.country}):
        if not get_country_name(code):
            continue
        slug = country_slug(code)
        for day in days:
            digest = daily_digest(dataset, slug, day)
            if digest is not None and not digest.is_empty():
                digests.setdefault(slug, {})[day] = to_jsonable(digest)
    write_json(views_dir / "daily.json", digests)
    counts["daily_countries"] = len(digests)

    checking = data_checking_view(dataset)
    stats_as_frame(checking).to_csv(exports_dir / "data_checking.csv", index=False)
    write_json(views_dir / "data_checking_totals.json", checking.totals())

    write_json(exports_dir / "sitemap.json", sitemap_entries(dataset, site_url))
    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Load the medal-chance tables and export every derived view.")
    parser.add_argument("--settings", default=str(ROOT_DIR / "config" / "settings.yaml"))
    parser.add_argument("--connector", default=None, help="csv | google_sheets")
    parser.add_argument("--data-dir", default=None)
    parser.add_argument("--exports-dir", default=None)
    parser.add_argument("--viewer-timezone", default=None, help="IANA zone name or 'local'")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    settings = load_settings(Path(args.settings)).with_overrides(
        connector=args.connector,
        data_dir=args.data_dir,
        exports_dir=args.exports_dir,
        viewer_timezone=args.viewer_timezone,
    )
    connector = build_connector(settings.connector, settings)
    dataset, status, error_text = load_dataset(connector)
    if error_text:
        print(f"[build_views] load {status}: {error_text}")

    exports_dir = safe_mkdir(settings.exports_dir)
    counts = export_views(dataset, exports_dir, settings.site_url, settings.viewer_tz())

    checks = run_all_checks(dataset)
    write_build_meta(
        dataset,
        exports_dir / "meta" / "build_meta.json",
        extra={
            "pipeline": "build_views",
            "connector": connector.id,
            "connector_name": connector.name,
            "status": status,
            "error": error_text,
            "view_counts": counts,
            "validation_passed": checks["passed"],
        },
    )
    write_data_dictionary(exports_dir / "meta" / "data_dictionary.md")

    print(f"[build_views] connector={connector.id} status={status}")
    print(f"[build_views] rows: {dataset.row_counts()}")
    print(f"[build_views] views: {counts}")
    print(f"[build_views] exports: {exports_dir}")
    print(f"[build_views] validation passed: {checks['passed']}")


if __name__ == "__main__":
    main()
