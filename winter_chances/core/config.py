from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import tzinfo
from pathlib import Path
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .timeutils import local_timezone


ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_SETTINGS_PATH = ROOT_DIR / "config" / "settings.yaml"
API_KEY_ENV = "GOOGLE_SHEETS_API_KEY"


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be used."""


@dataclass(frozen=True)
class Settings:
    connector: str = "csv"
    data_dir: Path = ROOT_DIR / "data" / "raw"
    spreadsheet_id: str = ""
    site_url: str = "https://winter-olympics-2026.datasportiq.com"
    viewer_timezone: str = "local"
    exports_dir: Path = ROOT_DIR / "exports"

    @property
    def api_key(self) -> Optional[str]:
        return os.getenv(API_KEY_ENV) or None

    def viewer_tz(self) -> tzinfo:
        if self.viewer_timezone.strip().lower() in ("", "local"):
            return local_timezone()
        try:
            return ZoneInfo(self.viewer_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"Unknown viewer_timezone '{self.viewer_timezone}'") from exc

    def with_overrides(self, **overrides: Any) -> "Settings":
        clean = {key: value for key, value in overrides.items() if value is not None}
        for key in ("data_dir", "exports_dir"):
            if key in clean:
                clean[key] = Path(clean[key])
        return replace(self, **clean)


def _resolve_path(value: Any, default: Path) -> Path:
    if not value:
        return default
    path = Path(str(value))
    return path if path.is_absolute() else ROOT_DIR / path


def load_settings(settings_path: Path | None = None) -> Settings:
    path = settings_path or DEFAULT_SETTINGS_PATH
    if not path.exists():
        return Settings()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid settings file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")

    defaults = Settings()
    return Settings(
        connector=str(data.get("connector", defaults.connector)).strip().lower(),
        data_dir=_resolve_path(data.get("data_dir"), defaults.data_dir),
        spreadsheet_id=str(data.get("spreadsheet_id", defaults.spreadsheet_id) or ""),
        site_url=str(data.get("site_url", defaults.site_url)).rstrip("/"),
        viewer_timezone=str(data.get("viewer_timezone", defaults.viewer_timezone) or "local"),
        exports_dir=_resolve_path(data.get("exports_dir"), defaults.exports_dir),
    )
