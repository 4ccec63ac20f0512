from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from winter_chances.core.config import ROOT_DIR, ConfigError, Settings, load_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "absent.yaml")
    assert settings == Settings()
    assert settings.connector == "csv"


def test_settings_file_is_read(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "connector: Google_Sheets\n"
        "data_dir: custom/raw\n"
        f"exports_dir: {tmp_path / 'out'}\n"
        "spreadsheet_id: abc123\n"
        "site_url: https://example.org/\n"
        "viewer_timezone: America/Toronto\n",
        encoding="utf-8",
    )
    settings = load_settings(path)

    assert settings.connector == "google_sheets"
    assert settings.data_dir == ROOT_DIR / "custom" / "raw"
    assert settings.exports_dir == tmp_path / "out"
    assert settings.spreadsheet_id == "abc123"
    assert settings.site_url == "https://example.org"
    assert settings.viewer_tz() == ZoneInfo("America/Toronto")


def test_invalid_yaml_is_a_config_error(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("connector: [csv\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)

    path.write_text("- csv\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_viewer_timezone():
    assert isinstance(Settings(viewer_timezone="local").viewer_tz(), tzinfo)
    with pytest.raises(ConfigError):
        Settings(viewer_timezone="Mars/Olympus").viewer_tz()


def test_overrides_skip_unset_values():
    settings = Settings().with_overrides(connector=None, data_dir="elsewhere", viewer_timezone="UTC")
    assert settings.connector == "csv"
    assert settings.data_dir == Path("elsewhere")
    assert settings.viewer_timezone == "UTC"


def test_api_key_comes_from_the_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_SHEETS_API_KEY", "secret")
    assert Settings().api_key == "secret"
    monkeypatch.delenv("GOOGLE_SHEETS_API_KEY")
    assert Settings().api_key is None


def test_shipped_settings_load():
    settings = load_settings()
    assert settings.connector == "csv"
    assert settings.data_dir.name == "raw"
