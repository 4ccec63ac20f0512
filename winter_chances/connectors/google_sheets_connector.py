from __future__ import annotations

import os
from typing import Any

import pandas as pd

from .base import Connector, MissingCredentialError


SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class GoogleSheetsConnector(Connector):
    id = "google_sheets"
    name = "Google Sheets medal-chance workbook"

    def __init__(self, spreadsheet_id: str, api_key: str | None = None):
        self.spreadsheet_id = spreadsheet_id
        self.api_key = api_key or os.getenv("GOOGLE_SHEETS_API_KEY")

    @property
    def base_url(self) -> str:
        return f"{SHEETS_API_URL}/{self.spreadsheet_id}"

    def _check_credentials(self) -> None:
        if not self.spreadsheet_id:
            raise MissingCredentialError("spreadsheet_id is not configured; connector skipped.")
        if not self.api_key:
            raise MissingCredentialError("GOOGLE_SHEETS_API_KEY is missing; connector skipped.")

    @staticmethod
    def _values_to_frame(values: list[list[Any]]) -> pd.DataFrame:
        if not values:
            return pd.DataFrame()
        headers = [str(header) for header in values[0]]
        rows: list[list[Any]] = []
        for raw in values[1:]:
            if not any(str(cell).strip() for cell in raw):
                continue
            padded = list(raw[: len(headers)]) + [""] * (len(headers) - len(raw))
            rows.append(["" if cell is None else str(cell) for cell in padded])
        return pd.DataFrame(rows, columns=headers, dtype=str)

    def fetch_table(self, table: str) -> pd.DataFrame:
        self._check_credentials()
        payload = self._request_json(
            f"{self.base_url}/values/{table}",
            params={
                "key": self.api_key,
                "majorDimension": "ROWS",
                "valueRenderOption": "UNFORMATTED_VALUE",
            },
        )
        return self._values_to_frame(payload.get("values", []) or [])
