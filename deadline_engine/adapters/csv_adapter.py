"""CSV adapter for manually created deadlines."""

from __future__ import annotations

import csv

_REQUIRED_COLUMNS = {"id", "title", "due_date"}

_COLUMN_MAP = {
    "id": "id",
    "case_id": "caseId",
    "title": "title",
    "due_date": "dueDate",
    "description": "description",
    "category": "category",
    "status": "status",
    "notes": "notes",
}


def _to_candidate(row: dict) -> dict:
    candidate = {}
    for column, key in _COLUMN_MAP.items():
        value = row.get(column)
        if value not in (None, ""):
            candidate[key] = value.strip()
    return candidate


def parse(file_path: str) -> list[dict]:
    """Parse a CSV file into manual deadline candidates.

    Row contents are validated by the normalizer, not here.
    """

    with open(file_path, newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        missing = sorted(_REQUIRED_COLUMNS - {name.strip() for name in reader.fieldnames})
        if missing:
            raise ValueError(f"CSV header missing required columns {missing}")

        return [_to_candidate({(k or "").strip(): v for k, v in row.items()}) for row in reader]
