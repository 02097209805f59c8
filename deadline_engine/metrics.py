"""Deadline summary counts and portfolio-level risk metrics."""

from __future__ import annotations

from collections import Counter

import numpy as np

from deadline_engine.config import DEFAULT_CONFIG, EngineConfig
from deadline_engine.schema import DeadlinePriority, DeadlineReport, DeadlineStatus, UnifiedDeadline


def summarize(deadlines: list[UnifiedDeadline]) -> dict:
    """Count deadlines by status plus the number of CRITICAL ones."""

    by_status = Counter(deadline.status for deadline in deadlines)
    return {
        "total": len(deadlines),
        "overdue": by_status[DeadlineStatus.OVERDUE],
        "due_today": by_status[DeadlineStatus.DUE_TODAY],
        "due_soon": by_status[DeadlineStatus.DUE_SOON],
        "critical": sum(1 for deadline in deadlines if deadline.priority == DeadlinePriority.CRITICAL),
        "completed": by_status[DeadlineStatus.COMPLETED],
        "cancelled": by_status[DeadlineStatus.CANCELLED],
    }


def portfolio_metrics(reports: list[DeadlineReport], config: EngineConfig | None = None) -> dict:
    """Aggregate risk scores and overdue counts across many case reports."""

    cfg = config or DEFAULT_CONFIG

    if not reports:
        return {
            "cases": 0,
            "mean_risk_score": None,
            "median_risk_score": None,
            "min_risk_score": None,
            "p10_risk_score": None,
            "cases_at_risk": 0,
            "total_overdue": 0,
        }

    scores = np.asarray([report.risk_score for report in reports], dtype=float)
    overdue = np.asarray([report.summary.get("overdue", 0) for report in reports], dtype=int)

    return {
        "cases": int(len(reports)),
        "mean_risk_score": float(np.mean(scores)),
        "median_risk_score": float(np.median(scores)),
        "min_risk_score": int(np.min(scores)),
        "p10_risk_score": float(np.percentile(scores, 10)),
        "cases_at_risk": int(np.sum(scores < cfg.at_risk_threshold)),
        "total_overdue": int(np.sum(overdue)),
    }
