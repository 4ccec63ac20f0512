from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .base import Connector, ConnectorError


logger = logging.getLogger(__name__)


class CsvConnector(Connector):
    id = "csv"
    name = "Local CSV exports of the medal-chance sheets"

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def table_path(self, table: str) -> Path:
        return self.data_dir / f"{table}.csv"

    def fetch_table(self, table: str) -> pd.DataFrame:
        path = self.table_path(table)
        if not path.exists():
            raise ConnectorError(f"Missing table file: {path}")
        frame = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
        logger.debug("Read %s (%s rows)", path, len(frame))
        return frame
