from __future__ import annotations

import re
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
ATHLETE_SLUG_STRIP_PATTERN = re.compile(r"[^a-z0-9-]")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def normalize_key(value: Any) -> str:
    """Join key used for every cross-table comparison: trimmed and lowercased."""
    if value is None:
        return ""
    return str(value).strip().lower()


def slugify(value: str) -> str:
    lowered = value.strip().lower()
    slug = SLUG_PATTERN.sub("-", lowered).strip("-")
    return slug or "unknown"


def create_athlete_slug(firstname: str, lastname: str) -> str:
    slug = f"{firstname}-{lastname}".lower().strip()
    slug = WHITESPACE_PATTERN.sub("-", slug)
    return ATHLETE_SLUG_STRIP_PATTERN.sub("", slug)


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def parse_athlete_slug(slug: str) -> Optional[dict[str, str]]:
    """Best-effort inverse of ``create_athlete_slug``.

    The last token is the lastname and everything before it the firstname, so
    compound names ("Van Der Berg", "Anne-Marie") do not round-trip.
    """
    parts = str(slug or "").split("-")
    if len(parts) < 2:
        return None
    lastname = parts[-1]
    firstname = " ".join(parts[:-1])
    return {
        "firstname": _capitalize_first(firstname),
        "lastname": _capitalize_first(lastname),
    }


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Leading-integer parse of a spreadsheet cell ("08", " 12", "3rd" -> 3)."""
    match = re.match(r"\s*([+-]?\d+)", str(value if value is not None else ""))
    if not match:
        return default
    return int(match.group(1))


def safe_mkdir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def git_short_hash() -> Optional[str]:
    try:
        output = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
            text=True,
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return None
    return output or None
