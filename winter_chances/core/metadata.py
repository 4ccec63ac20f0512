from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .tables import Dataset
from .utils import git_short_hash, safe_mkdir, utc_now_iso


DATA_DICTIONARY: dict[str, list[tuple[str, str]]] = {
    "athletes": [
        ("firstname", "Athlete first name as entered in the sheet"),
        ("lastname", "Athlete last name"),
        ("country", "IOC country code"),
        ("disciplin_id", "Discipline foreign key (case/whitespace-insensitive)"),
        ("chance", "Big Favourite | Favourite | Challenger | Outsider | Wildcard (or 5..1)"),
        ("desc", "Optional note shown on the athlete page"),
    ],
    "disciplins": [
        ("disciplin_id", "Discipline key"),
        ("name", "Display name (sheet header may be 'label')"),
        ("sport", "Parent sport name"),
        ("gender", "Gender category"),
    ],
    "calendar": [
        ("day", "Day of February 2026 the discipline airs"),
        ("disciplin_id", "Discipline foreign key"),
    ],
    "events": [
        ("day", "Day of February 2026"),
        ("disciplin_id", "Discipline foreign key"),
        ("time_begin", "Start time HH:MM, venue time (UTC+1)"),
        ("time_end", "End time HH:MM, venue time"),
        ("desc", "Free text (round, heat, ...)"),
        ("is_medal", "'1' for a medal event"),
        ("is_game", "'1' for a team-vs-team game"),
        ("team_1", "First team country code (games only)"),
        ("team_2", "Second team country code (games only)"),
    ],
}


def write_json(output_path: Path, payload: Any) -> Path:
    safe_mkdir(output_path.parent)
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return output_path


def write_build_meta(dataset: Dataset, output_path: Path, extra: dict[str, Any] | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "generated_at_utc": utc_now_iso(),
        "git_hash": git_short_hash(),
        "row_counts": dataset.row_counts(),
    }
    if extra:
        payload.update(extra)
    write_json(output_path, payload)
    return payload


def write_data_dictionary(output_path: Path) -> None:
    safe_mkdir(output_path.parent)
    lines: list[str] = []
    lines.append("# Data Dictionary")
    lines.append("")
    for table_name, columns in DATA_DICTIONARY.items():
        lines.append(f"## {table_name}")
        lines.append("")
        lines.append("| column | description |")
        lines.append("|---|---|")
        for column_name, description in columns:
            lines.append(f"| {column_name} | {description} |")
        lines.append("")
    output_path.write_text("\n".join(lines).strip() + "\n", encoding="utf-8")
