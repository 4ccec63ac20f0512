from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import pandas as pd
import requests

from winter_chances.core.chances import coerce_chance
from winter_chances.core.tables import TABLE_TYPES, Dataset


DEFAULT_USER_AGENT = "WinterChances/0.1 (medal-chance views builder)"

# Spreadsheet header spellings seen in the wild, after lowercasing and snake_casing.
HEADER_ALIASES = {
    "discipline_id": "disciplin_id",
    "first_name": "firstname",
    "last_name": "lastname",
}
# Per-table aliases: the discipline sheet calls its display name "label".
TABLE_HEADER_ALIASES = {
    "disciplins": {"label": "name"},
}

logger = logging.getLogger(__name__)


class ConnectorError(RuntimeError):
    """Raised when a source cannot deliver its tables."""


class MissingCredentialError(ConnectorError):
    """Raised when connector cannot run due to missing API credentials."""


def normalize_header(header: Any, table: str) -> str:
    normalized = "_".join(str(header).strip().lower().split())
    normalized = HEADER_ALIASES.get(normalized, normalized)
    return TABLE_HEADER_ALIASES.get(table, {}).get(normalized, normalized)


class Connector(ABC):
    id: str = ""
    name: str = ""

    @abstractmethod
    def fetch_table(self, table: str) -> pd.DataFrame:
        """Raw sheet with its header row as written, every cell as a string."""
        raise NotImplementedError

    def parse_table(self, table: str, frame: pd.DataFrame) -> list[dict[str, str]]:
        if frame is None or frame.empty:
            return []
        clean = frame.rename(columns=lambda header: normalize_header(header, table))
        clean = clean.loc[:, ~clean.columns.duplicated()].fillna("").astype(str)
        if table == "athletes" and "chance" in clean.columns:
            clean["chance"] = clean["chance"].map(coerce_chance)
        return clean.to_dict(orient="records")

    def load(self) -> Dataset:
        payload: dict[str, list[dict[str, str]]] = {}
        for table in TABLE_TYPES:
            frame = self.fetch_table(table)
            payload[table] = self.parse_table(table, frame)
            logger.info("Loaded %s rows for table %s from %s", len(payload[table]), table, self.id)
        return Dataset.from_payload(payload)

    def _request_json(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        timeout: int = 45,
        retries: int = 3,
        sleep_seconds: float = 1.0,
    ) -> dict[str, Any]:
        combined_headers = {"User-Agent": DEFAULT_USER_AGENT}
        if headers:
            combined_headers.update(headers)

        last_error: Exception | None = None
        for attempt in range(1, retries + 1):
            try:
                response = requests.get(url, headers=combined_headers, params=params, timeout=timeout)
                response.raise_for_status()
                return response.json()
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                logger.warning("Request to %s failed (attempt %s/%s): %s", url, attempt, retries, exc)
                if attempt == retries:
                    break
                time.sleep(sleep_seconds * attempt)
        raise ConnectorError(f"Request failed for {url}: {last_error}") from last_error


def load_dataset(connector: Connector) -> tuple[Dataset, str, str | None]:
    """Bulk load guarded as one unit: on any failure the views run on empty tables.

    Returns the dataset, a status ("success", "skipped" or "error") and the error text.
    """
    try:
        return connector.load(), "success", None
    except MissingCredentialError as exc:
        logger.warning("%s", exc)
        return Dataset.empty(), "skipped", str(exc)
    except (ConnectorError, OSError, ValueError, pd.errors.ParserError) as exc:
        logger.error("Loading tables from %s failed: %s", connector.id, exc)
        return Dataset.empty(), "error", str(exc)
