"""Translate domain-native deadline candidates into unified records.

This is the only place that interprets domain vocabularies (housing
"urgent"/"passed", CPR severities, limitation severities). Every other
module works on the closed enums in ``deadline_engine.schema``.

Normalization is total: a malformed candidate is logged and skipped, never
raised. Time-based classification is not applied here; statuses produced
for non-terminal records are provisional and are re-derived by the
classifier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, Callable, Optional

from deadline_engine.schema import (
    DeadlineCategory,
    DeadlinePriority,
    DeadlineSource,
    DeadlineStatus,
    DomainCandidate,
    UnifiedDeadline,
    severity_for,
)

logger = logging.getLogger(__name__)

HOUSING = "housing"
COURT = "court"
MANUAL = "manual"
LIMITATION = "limitation"
DOMAINS = (HOUSING, COURT, MANUAL, LIMITATION)

_HOUSING_PRIORITY = {
    "urgent": DeadlinePriority.CRITICAL,
    "high": DeadlinePriority.HIGH,
    "medium": DeadlinePriority.MEDIUM,
    "low": DeadlinePriority.LOW,
}

_HOUSING_STATUS = {
    "passed": DeadlineStatus.COMPLETED,
    "overdue": DeadlineStatus.OVERDUE,
    "due_today": DeadlineStatus.DUE_TODAY,
    "upcoming": DeadlineStatus.UPCOMING,
}

_HOUSING_CATEGORY = {
    "awaabs_law": DeadlineCategory.HOUSING,
    "section_11": DeadlineCategory.HOUSING,
    "pre_action": DeadlineCategory.HOUSING,
    "limitation": DeadlineCategory.LIMITATION,
}

_HOUSING_RULE = {
    "awaabs_law": "Awaab's Law",
    "section_11": "Section 11 LTA 1985",
}

_COURT_SEVERITY = {
    "CRITICAL": DeadlinePriority.CRITICAL,
    "HIGH": DeadlinePriority.HIGH,
    "MEDIUM": DeadlinePriority.MEDIUM,
    "LOW": DeadlinePriority.LOW,
}

_COURT_TERMINAL = {
    "COMPLETED": DeadlineStatus.COMPLETED,
    "N_A": DeadlineStatus.CANCELLED,
}

_COURT_SOURCE = {
    "COURT_ORDER": DeadlineSource.COURT_ORDER,
    "MANUAL": DeadlineSource.MANUAL,
}

_MANUAL_TERMINAL = {
    "COMPLETED": DeadlineStatus.COMPLETED,
    "CANCELLED": DeadlineStatus.CANCELLED,
}

_LIMITATION_SEVERITY = {
    "critical": DeadlinePriority.CRITICAL,
    "high": DeadlinePriority.HIGH,
    "medium": DeadlinePriority.MEDIUM,
    "low": DeadlinePriority.LOW,
}

LIMITATION_RULE = "Limitation Act 1980"
LIMITATION_TITLE = "Limitation period expires"


def parse_timestamp(value: Any) -> datetime:
    """Parse a datetime, date or ISO-8601 string into a datetime."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise ValueError(f"unparseable timestamp {value!r}")


def _optional_timestamp(value: Any) -> Optional[datetime]:
    if value in (None, ""):
        return None
    return parse_timestamp(value)


def _required(item: Mapping, key: str) -> str:
    value = item.get(key)
    if value is None or not str(value).strip():
        raise ValueError(f"missing required field '{key}'")
    return str(value).strip()


def _optional_text(item: Mapping, key: str) -> Optional[str]:
    value = item.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _upper(value: Any) -> str:
    return str(value).strip().upper() if value is not None else ""


def _build(
    *,
    record_id: str,
    case_id: str,
    title: str,
    category: DeadlineCategory,
    due_date: datetime,
    priority: DeadlinePriority,
    status: DeadlineStatus,
    source: DeadlineSource,
    description: Optional[str] = None,
    source_rule: Optional[str] = None,
    completed_at: Optional[datetime] = None,
    completed_by: Optional[str] = None,
    notes: Optional[str] = None,
) -> UnifiedDeadline:
    return UnifiedDeadline(
        id=record_id,
        case_id=case_id,
        title=title,
        category=category,
        due_date=due_date,
        priority=priority,
        status=status,
        severity=severity_for(priority),
        source=source,
        description=description,
        source_rule=source_rule,
        completed_at=completed_at,
        completed_by=completed_by,
        notes=notes,
    )


def _parse_housing(item: Mapping) -> UnifiedDeadline:
    source = str(item.get("source") or "").strip().lower()
    priority = _HOUSING_PRIORITY.get(str(item.get("priority") or "").strip().lower(), DeadlinePriority.LOW)
    status = _HOUSING_STATUS.get(str(item.get("status") or "").strip().lower(), DeadlineStatus.UPCOMING)
    return _build(
        record_id=_required(item, "id"),
        case_id=_optional_text(item, "caseId") or "",
        title=_required(item, "name"),
        description=_optional_text(item, "description"),
        category=_HOUSING_CATEGORY.get(source, DeadlineCategory.MANUAL),
        due_date=parse_timestamp(item.get("deadlineDate")),
        priority=priority,
        status=status,
        source=DeadlineSource.AUTO_CALCULATED,
        source_rule=_HOUSING_RULE.get(source),
        notes=_optional_text(item, "actionRequired"),
    )


def _parse_court(item: Mapping) -> UnifiedDeadline:
    priority = _COURT_SEVERITY.get(_upper(item.get("severity")), DeadlinePriority.LOW)
    completed_at = _optional_timestamp(item.get("completedAt"))
    native_status = _upper(item.get("status"))

    status = _COURT_TERMINAL.get(native_status)
    if status is None and completed_at is not None:
        status = DeadlineStatus.COMPLETED
    if status is None:
        if item.get("isOverdue"):
            status = DeadlineStatus.OVERDUE
        elif native_status == "DUE_SOON":
            status = DeadlineStatus.DUE_SOON
        else:
            status = DeadlineStatus.UPCOMING

    return _build(
        record_id=_required(item, "id"),
        case_id=_optional_text(item, "caseId") or "",
        title=_required(item, "label"),
        description=_optional_text(item, "description"),
        category=DeadlineCategory.COURT,
        due_date=parse_timestamp(item.get("dueDate")),
        priority=priority,
        status=status,
        source=_COURT_SOURCE.get(_upper(item.get("source")), DeadlineSource.AUTO_CALCULATED),
        source_rule=_optional_text(item, "cprRule"),
        completed_at=completed_at,
        notes=_optional_text(item, "notes"),
    )


def _parse_manual(item: Mapping) -> UnifiedDeadline:
    category_raw = _upper(item.get("category"))
    try:
        category = DeadlineCategory(category_raw)
    except ValueError:
        category = DeadlineCategory.MANUAL

    return _build(
        record_id=_required(item, "id"),
        case_id=_optional_text(item, "caseId") or "",
        title=_required(item, "title"),
        description=_optional_text(item, "description"),
        category=category,
        due_date=parse_timestamp(item.get("dueDate")),
        priority=DeadlinePriority.LOW,
        status=_MANUAL_TERMINAL.get(_upper(item.get("status")), DeadlineStatus.UPCOMING),
        source=DeadlineSource.MANUAL,
        completed_at=_optional_timestamp(item.get("completedAt")),
        completed_by=_optional_text(item, "completedBy"),
        notes=_optional_text(item, "notes"),
    )


def _parse_limitation(item: Mapping) -> UnifiedDeadline:
    practice_area = _optional_text(item, "practiceArea")
    return _build(
        record_id=_required(item, "id"),
        case_id=_optional_text(item, "caseId") or "",
        title=LIMITATION_TITLE,
        description=_optional_text(item, "explanation"),
        category=DeadlineCategory.LIMITATION,
        due_date=parse_timestamp(item.get("limitationDate")),
        priority=_LIMITATION_SEVERITY.get(str(item.get("severity") or "").strip().lower(), DeadlinePriority.MEDIUM),
        status=DeadlineStatus.OVERDUE if item.get("isExpired") else DeadlineStatus.UPCOMING,
        source=DeadlineSource.AUTO_CALCULATED,
        source_rule=LIMITATION_RULE,
        notes=f"Practice area: {practice_area}" if practice_area else None,
    )


_PARSERS: dict[str, Callable[[Mapping], UnifiedDeadline]] = {
    HOUSING: _parse_housing,
    COURT: _parse_court,
    MANUAL: _parse_manual,
    LIMITATION: _parse_limitation,
}


def _normalize_items(domain: str, items: Optional[Iterable[Any]]) -> list[UnifiedDeadline]:
    parser = _PARSERS[domain]
    records: list[UnifiedDeadline] = []
    for index, item in enumerate(items or [], start=1):
        try:
            if not isinstance(item, Mapping):
                raise TypeError(f"expected a mapping, got {type(item).__name__}")
            records.append(parser(item))
        except (ValueError, TypeError) as exc:
            logger.warning("Skipping %s candidate %d: %s", domain, index, exc)
    return records


def normalize_housing(items: Optional[Iterable[Any]]) -> list[UnifiedDeadline]:
    """Normalize housing-disrepair deadline candidates."""

    return _normalize_items(HOUSING, items)


def normalize_court(items: Optional[Iterable[Any]]) -> list[UnifiedDeadline]:
    """Normalize court/CPR deadline candidates."""

    return _normalize_items(COURT, items)


def normalize_manual(items: Optional[Iterable[Any]]) -> list[UnifiedDeadline]:
    """Normalize manually created deadline candidates."""

    return _normalize_items(MANUAL, items)


def normalize_limitation(items: Optional[Iterable[Any]]) -> list[UnifiedDeadline]:
    """Normalize limitation-period candidates."""

    return _normalize_items(LIMITATION, items)


def _unpack(candidate: Any) -> tuple[Any, Any]:
    if isinstance(candidate, DomainCandidate):
        return candidate.domain, candidate.payload
    if isinstance(candidate, tuple) and len(candidate) == 2:
        return candidate
    raise TypeError(f"expected a DomainCandidate or (domain, payload) pair, got {type(candidate).__name__}")


def normalize(candidates: Iterable[Any]) -> list[UnifiedDeadline]:
    """Normalize a mixed list of tagged candidates, preserving input order.

    Each candidate is a DomainCandidate or a (domain, payload) pair; anything
    else is logged and skipped. Candidates from an unrecognised domain are
    read with the manual mapping, so they default to the MANUAL category.
    """

    records: list[UnifiedDeadline] = []
    for index, candidate in enumerate(candidates or [], start=1):
        try:
            raw_domain, payload = _unpack(candidate)
        except TypeError as exc:
            logger.warning("Skipping candidate %d: %s", index, exc)
            continue
        domain = str(raw_domain or "").strip().lower()
        if domain not in _PARSERS:
            logger.debug("Unknown deadline domain %r; treating as manual", raw_domain)
            domain = MANUAL
        records.extend(_normalize_items(domain, [payload]))
    return records
