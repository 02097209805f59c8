"""End-to-end deadline evaluation: normalize, classify, merge, score, synthesize."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

from deadline_engine.classifier import classify_all
from deadline_engine.config import DEFAULT_CONFIG, EngineConfig
from deadline_engine.metrics import summarize
from deadline_engine.next_steps import synthesize
from deadline_engine.normalizer import (
    DOMAINS,
    normalize_court,
    normalize_housing,
    normalize_limitation,
    normalize_manual,
)
from deadline_engine.ordering import merge
from deadline_engine.risk import score
from deadline_engine.schema import DeadlineReport, UnifiedDeadline

logger = logging.getLogger(__name__)


def collect_candidates(adapters: Mapping[str, Callable[[], Optional[Iterable[Any]]]]) -> dict[str, list]:
    """Call each domain adapter; an adapter that fails contributes an empty list."""

    collected: dict[str, list] = {domain: [] for domain in DOMAINS}
    for domain, fetch in adapters.items():
        try:
            collected[domain] = list(fetch() or [])
        except Exception as exc:  # noqa: BLE001
            logger.warning("Deadline adapter %r failed; continuing without it: %s", domain, exc)
            collected[domain] = []
    return collected


def _stamp_case(deadlines: list[UnifiedDeadline], case_id: Optional[str]) -> list[UnifiedDeadline]:
    if not case_id:
        return deadlines
    return [d if d.case_id else replace(d, case_id=case_id) for d in deadlines]


def evaluate(
    now: datetime,
    housing: Optional[Iterable[Any]] = None,
    court: Optional[Iterable[Any]] = None,
    manual: Optional[Iterable[Any]] = None,
    limitation: Optional[Iterable[Any]] = None,
    case_id: Optional[str] = None,
    config: EngineConfig | None = None,
) -> DeadlineReport:
    """Evaluate all domain candidates against one captured now.

    A domain passed as None (its adapter failed or was not run) is treated
    as empty. With no candidates at all the report is empty with score 100.
    """

    if now is None:
        raise ValueError("now is required")
    cfg = config or DEFAULT_CONFIG

    per_domain = [
        normalize_housing(housing),
        normalize_court(court),
        normalize_manual(manual),
        normalize_limitation(limitation),
    ]
    classified = [_stamp_case(classify_all(records, now, cfg), case_id) for records in per_domain]

    deadlines = merge(classified)
    report = DeadlineReport(
        evaluated_at=now,
        deadlines=deadlines,
        risk_score=score(deadlines, cfg),
        next_steps=synthesize(deadlines),
        summary=summarize(deadlines),
    )
    logger.debug(
        "Evaluated %d deadlines for case %r: score=%d overdue=%d",
        len(deadlines),
        case_id,
        report.risk_score,
        report.summary["overdue"],
    )
    return report


def evaluate_sources(
    now: datetime,
    sources: Mapping[str, Optional[Iterable[Any]]],
    case_id: Optional[str] = None,
    config: EngineConfig | None = None,
) -> DeadlineReport:
    """Evaluate a domain -> candidates mapping, such as the output of collect_candidates."""

    unknown = sorted(set(sources) - set(DOMAINS))
    if unknown:
        logger.warning("Ignoring unknown deadline domains: %s", ", ".join(unknown))

    return evaluate(
        now,
        housing=sources.get("housing"),
        court=sources.get("court"),
        manual=sources.get("manual"),
        limitation=sources.get("limitation"),
        case_id=case_id,
        config=config,
    )
