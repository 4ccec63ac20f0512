from __future__ import annotations

from winter_chances.core.config import Settings

from .base import Connector
from .csv_connector import CsvConnector
from .google_sheets_connector import GoogleSheetsConnector


CONNECTOR_REGISTRY = {
    "csv": lambda settings: CsvConnector(settings.data_dir),
    "google_sheets": lambda settings: GoogleSheetsConnector(settings.spreadsheet_id, settings.api_key),
}


def build_connector(connector_name: str, settings: Settings) -> Connector:
    key = connector_name.strip().lower()
    if key not in CONNECTOR_REGISTRY:
        available = ", ".join(sorted(CONNECTOR_REGISTRY))
        raise ValueError(f"Unknown connector '{connector_name}'. Available: {available}")
    return CONNECTOR_REGISTRY[key](settings)
