from __future__ import annotations

from collections import Counter
from typing import Callable, Iterable

import pandas as pd

from .chances import CHANCE_WEIGHTS
from .tables import Dataset
from .timeutils import parse_time
from .utils import normalize_key, parse_int


Check = tuple[str, Callable[[Dataset], int]]


def _orphans(disciplin_ids: Iterable[str], dataset: Dataset) -> int:
    known = {normalize_key(disciplin.disciplin_id) for disciplin in dataset.disciplins}
    return sum(1 for disciplin_id in disciplin_ids if normalize_key(disciplin_id) not in known)


def run_fk_integrity_checks(dataset: Dataset) -> list[dict[str, object]]:
    checks: list[Check] = [
        (
            "athletes.disciplin_id exists",
            lambda data: _orphans((athlete.disciplin_id for athlete in data.athletes), data),
        ),
        (
            "calendar.disciplin_id exists",
            lambda data: _orphans((entry.disciplin_id for entry in data.calendar), data),
        ),
        (
            "events.disciplin_id exists",
            lambda data: _orphans((event.disciplin_id for event in data.events), data),
        ),
    ]
    return _run(checks, dataset)


def _duplicate_disciplin_ids(dataset: Dataset) -> int:
    counts = Counter(normalize_key(disciplin.disciplin_id) for disciplin in dataset.disciplins)
    return sum(count - 1 for count in counts.values() if count > 1)


def run_sanity_checks(dataset: Dataset) -> list[dict[str, object]]:
    checks: list[Check] = [
        (
            "athletes.chance is a known category",
            lambda data: sum(1 for athlete in data.athletes if athlete.chance not in CHANCE_WEIGHTS),
        ),
        ("disciplins.disciplin_id is unique", _duplicate_disciplin_ids),
        (
            "calendar.day is numeric",
            lambda data: sum(1 for entry in data.calendar if parse_int(entry.day) is None),
        ),
        (
            "events.day is numeric",
            lambda data: sum(1 for event in data.events if parse_int(event.day) is None),
        ),
        (
            "events.time_begin is HH:MM",
            lambda data: sum(1 for event in data.events if parse_time(event.time_begin) is None),
        ),
        (
            "events.is_medal/is_game are 0 or 1",
            lambda data: sum(
                1
                for event in data.events
                if event.is_medal not in ("", "0", "1") or event.is_game not in ("", "0", "1")
            ),
        ),
    ]
    return _run(checks, dataset)


def _run(checks: list[Check], dataset: Dataset) -> list[dict[str, object]]:
    output: list[dict[str, object]] = []
    for name, count_invalid in checks:
        invalid_rows = count_invalid(dataset)
        output.append({"check": name, "invalid_rows": invalid_rows, "ok": invalid_rows == 0})
    return output


def run_all_checks(dataset: Dataset) -> dict[str, object]:
    fk_checks = run_fk_integrity_checks(dataset)
    sanity_checks = run_sanity_checks(dataset)
    all_checks = fk_checks + sanity_checks
    failed = [check for check in all_checks if not check["ok"]]
    return {
        "row_counts": dataset.row_counts(),
        "checks_total": len(all_checks),
        "checks_failed": len(failed),
        "passed": len(failed) == 0,
        "checks": all_checks,
    }


def checks_as_frame(check_results: dict[str, object]) -> pd.DataFrame:
    return pd.DataFrame(check_results["checks"])
