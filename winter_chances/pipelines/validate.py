from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from winter_chances.connectors.base import load_dataset
from winter_chances.connectors.registry import build_connector
from winter_chances.core.config import load_settings
from winter_chances.core.validation import run_all_checks


ROOT_DIR = Path(__file__).resolve().parents[2]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run join and sanity checks on the medal-chance tables.")
    parser.add_argument("--settings", default=str(ROOT_DIR / "config" / "settings.yaml"))
    parser.add_argument("--connector", default=None, help="csv | google_sheets")
    parser.add_argument("--data-dir", default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")

    settings = load_settings(Path(args.settings)).with_overrides(connector=args.connector, data_dir=args.data_dir)
    dataset, status, error_text = load_dataset(build_connector(settings.connector, settings))
    if status != "success":
        print(f"[validate] load {status}: {error_text}")
        raise SystemExit(1)

    report = run_all_checks(dataset)
    print(json.dumps(report, indent=2, ensure_ascii=False))
    if not report["passed"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
