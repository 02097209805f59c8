"""JSON adapter for per-domain deadline candidates."""

from __future__ import annotations

import json

from deadline_engine.normalizer import DOMAINS


def _parse_payload(payload) -> dict[str, list]:
    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object keyed by domain")

    sources: dict[str, list] = {}
    for domain in DOMAINS:
        items = payload.get(domain)
        if items is None:
            sources[domain] = []
            continue
        if not isinstance(items, list):
            raise ValueError(f"Domain '{domain}': expected a list of candidates")
        sources[domain] = items
    return sources


def loads(text: str) -> dict[str, list]:
    """Parse a JSON document into domain -> candidate list."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed JSON: {exc}") from exc
    return _parse_payload(payload)


def parse(file_path: str) -> dict[str, list]:
    """Parse a JSON file of deadline candidates keyed by domain."""

    with open(file_path, encoding="utf-8") as handle:
        return loads(handle.read())
