"""Run a deadline evaluation from a JSON candidates file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from deadline_engine.adapters import csv_adapter, json_adapter
from deadline_engine.config import load_config
from deadline_engine.normalizer import parse_timestamp
from deadline_engine.pipeline import evaluate_sources


def _load_sources(path: Path) -> dict[str, list]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json_adapter.parse(str(path))
    if suffix == ".csv":
        return {"manual": csv_adapter.parse(str(path))}
    raise ValueError("Unsupported input format, expected .json or .csv")


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate case deadlines and print the risk report")
    parser.add_argument("--data", required=True, help="Path to JSON candidates file or manual-deadline CSV")
    parser.add_argument("--now", help="Evaluation timestamp (ISO-8601); defaults to the current UTC time")
    parser.add_argument("--case-id", help="Case id stamped onto deadlines that carry none")
    parser.add_argument("--config", help="Path to engine config JSON")
    parser.add_argument("--verbose", action="store_true", help="Log skipped candidates and debug output")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    now = parse_timestamp(args.now) if args.now else datetime.now(timezone.utc)
    config = load_config(Path(args.config) if args.config else None)
    sources = _load_sources(Path(args.data))

    report = evaluate_sources(now, sources, case_id=args.case_id, config=config)
    print(json.dumps(report.to_dict(), indent=2))


if __name__ == "__main__":
    main()
