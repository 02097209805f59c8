"""Time-based status and priority classification."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from deadline_engine.config import DEFAULT_CONFIG, EngineConfig
from deadline_engine.schema import (
    TERMINAL_STATUSES,
    DeadlinePriority,
    DeadlineStatus,
    UnifiedDeadline,
    severity_for,
)

_SECONDS_PER_DAY = 86400.0


@dataclass
class Classification:
    status: DeadlineStatus
    priority: DeadlinePriority
    days_remaining: int


def _align(due_date: datetime, now: datetime) -> tuple[datetime, datetime]:
    # Naive values are read in the other operand's zone; naive now counts as UTC.
    if due_date.tzinfo is None and now.tzinfo is not None:
        return due_date.replace(tzinfo=now.tzinfo), now
    if due_date.tzinfo is not None and now.tzinfo is None:
        return due_date, now.replace(tzinfo=timezone.utc)
    return due_date, now


def days_until(due_date: datetime, now: datetime) -> int:
    """Whole days from now to due_date, floored (negative once passed)."""

    if now is None:
        raise ValueError("now is required")
    due, current = _align(due_date, now)
    return math.floor((due - current).total_seconds() / _SECONDS_PER_DAY)


def classify(
    due_date: datetime,
    now: datetime,
    terminal_status: DeadlineStatus | None = None,
    config: EngineConfig | None = None,
) -> Classification:
    """Derive status and priority from the time left before due_date."""

    if now is None:
        raise ValueError("now is required")
    if terminal_status is not None and terminal_status not in TERMINAL_STATUSES:
        raise ValueError(f"{terminal_status} is not a terminal status")

    cfg = config or DEFAULT_CONFIG
    days = days_until(due_date, now)

    if terminal_status is not None:
        return Classification(terminal_status, DeadlinePriority.LOW, days)
    if days < 0:
        return Classification(DeadlineStatus.OVERDUE, DeadlinePriority.CRITICAL, days)
    if days == 0:
        return Classification(DeadlineStatus.DUE_TODAY, DeadlinePriority.CRITICAL, days)
    if days <= cfg.due_soon_days:
        return Classification(DeadlineStatus.DUE_SOON, DeadlinePriority.HIGH, days)
    if days <= cfg.medium_window_days:
        return Classification(DeadlineStatus.UPCOMING, DeadlinePriority.MEDIUM, days)
    return Classification(DeadlineStatus.UPCOMING, DeadlinePriority.LOW, days)


def apply_classification(
    deadline: UnifiedDeadline, now: datetime, config: EngineConfig | None = None
) -> UnifiedDeadline:
    """Return a copy of deadline with status, priority, severity and days_remaining derived for now."""

    terminal = deadline.status if deadline.is_terminal else None
    result = classify(deadline.due_date, now, terminal_status=terminal, config=config)
    return replace(
        deadline,
        status=result.status,
        priority=result.priority,
        severity=severity_for(result.priority),
        days_remaining=result.days_remaining,
    )


def classify_all(
    deadlines: list[UnifiedDeadline], now: datetime, config: EngineConfig | None = None
) -> list[UnifiedDeadline]:
    """Classify every record against the same now, preserving order."""

    if now is None:
        raise ValueError("now is required")
    return [apply_classification(deadline, now, config) for deadline in deadlines]
