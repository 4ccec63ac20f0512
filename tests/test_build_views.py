import json
import sys
from datetime import timezone

import pandas as pd

from winter_chances.core.tables import Dataset
from winter_chances.pipelines import build_views
from winter_chances.pipelines.build_views import export_views


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_export_views_writes_every_view(dataset, tmp_path):
    counts = export_views(dataset, tmp_path, "https://example.org", timezone.utc)

    assert counts == {"calendar_days": 4, "athletes": 7, "disciplins": 5, "daily_countries": 5}

    calendar = _read(tmp_path / "views" / "calendar.json")
    assert calendar["default_day"] == "7"
    assert set(calendar["days"]["13"]) == {"venue", "viewer"}
    viewer_morning = calendar["days"]["13"]["viewer"]["sessions"][0]
    assert viewer_morning["cards"][0]["display_time"] == "08:15"

    athletes = _read(tmp_path / "views" / "athletes.json")
    assert "julia-simon" in athletes
    assert "franjo-von-allmen" not in athletes

    daily = _read(tmp_path / "views" / "daily.json")
    assert set(daily) == {"canada", "france", "italy", "norway", "switzerland"}
    assert daily["norway"]["13"]["best_chance"]["athlete"]["lastname"] == "Boe"

    frame = pd.read_csv(tmp_path / "data_checking.csv")
    assert list(frame["disciplin_id"])[0] == "ALP-DH"

    assert _read(tmp_path / "data.json")["athletes"][0]["lastname"] == "Odermatt"
    assert len(_read(tmp_path / "sitemap.json")) == 17


def test_export_views_on_empty_tables(tmp_path):
    counts = export_views(Dataset.empty(), tmp_path, "https://example.org", timezone.utc)

    assert counts == {"calendar_days": 0, "athletes": 0, "disciplins": 0, "daily_countries": 0}
    assert _read(tmp_path / "views" / "calendar.json") == {"default_day": None, "days": {}}
    assert _read(tmp_path / "views" / "home.json")["groups"] == []


def test_main_runs_against_csv_exports(tmp_path, monkeypatch, capsys):
    exports_dir = tmp_path / "exports"
    monkeypatch.setattr(
        sys,
        "argv",
        ["build_views", "--exports-dir", str(exports_dir), "--viewer-timezone", "Europe/Rome"],
    )
    build_views.main()

    output = capsys.readouterr().out
    assert "[build_views] connector=csv status=success" in output
    meta = _read(exports_dir / "meta" / "build_meta.json")
    assert meta["status"] == "success"
    assert meta["connector_name"] == "Local CSV exports of the medal-chance sheets"
    assert meta["row_counts"]["athletes"] > 0
    assert (exports_dir / "meta" / "data_dictionary.md").exists()
