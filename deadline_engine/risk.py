"""Deadline risk score for case health."""

from __future__ import annotations

from deadline_engine.config import DEFAULT_CONFIG, EngineConfig
from deadline_engine.schema import DeadlinePriority, DeadlineStatus, UnifiedDeadline

MAX_SCORE = 100
MIN_SCORE = 0


def score(deadlines: list[UnifiedDeadline], config: EngineConfig | None = None, return_components: bool = False):
    """Compute a bounded 0-100 score where lower means more deadline risk.

    An empty list scores 100. Status and CRITICAL-priority deductions are
    applied independently, so an overdue critical record counts against
    both.
    """

    cfg = config or DEFAULT_CONFIG

    overdue = sum(1 for d in deadlines if d.status == DeadlineStatus.OVERDUE)
    due_today = sum(1 for d in deadlines if d.status == DeadlineStatus.DUE_TODAY)
    due_soon = sum(1 for d in deadlines if d.status == DeadlineStatus.DUE_SOON)
    critical = sum(1 for d in deadlines if d.priority == DeadlinePriority.CRITICAL)

    overdue_penalty = overdue * cfg.overdue_deduction
    due_today_penalty = due_today * cfg.due_today_deduction
    due_soon_penalty = due_soon * cfg.due_soon_deduction
    critical_penalty = critical * cfg.critical_deduction

    raw = MAX_SCORE - overdue_penalty - due_today_penalty - due_soon_penalty - critical_penalty
    bounded = max(MIN_SCORE, min(MAX_SCORE, raw))

    if return_components:
        return {
            "score": bounded,
            "raw_score": raw,
            "overdue_penalty": overdue_penalty,
            "due_today_penalty": due_today_penalty,
            "due_soon_penalty": due_soon_penalty,
            "critical_penalty": critical_penalty,
        }

    return bounded


def risk_level(value: int) -> str:
    """Bucket a score for display."""

    if value >= 80:
        return "LOW"
    if value >= 50:
        return "MED"
    return "HIGH"
