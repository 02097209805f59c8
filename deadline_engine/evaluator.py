"""Compare two evaluations of the same case."""

from __future__ import annotations

from deadline_engine.schema import DeadlineReport, DeadlineStatus, UnifiedDeadline


def _key(deadline: UnifiedDeadline) -> tuple[str, str]:
    # Upstream ids are only unique within one domain.
    return deadline.category.value, deadline.id


def compare(previous: DeadlineReport, current: DeadlineReport) -> dict:
    """Report the score delta and which deadlines became overdue, were resolved or are new."""

    before = {_key(deadline): deadline for deadline in previous.deadlines}
    after = {_key(deadline): deadline for deadline in current.deadlines}

    newly_overdue = [
        deadline.id
        for deadline in current.deadlines
        if deadline.status == DeadlineStatus.OVERDUE
        and (_key(deadline) not in before or before[_key(deadline)].status != DeadlineStatus.OVERDUE)
    ]

    resolved = [
        deadline.id
        for deadline in previous.deadlines
        if not deadline.is_terminal and (_key(deadline) not in after or after[_key(deadline)].is_terminal)
    ]

    new_deadlines = [deadline.id for deadline in current.deadlines if _key(deadline) not in before]

    return {
        "score_delta": current.risk_score - previous.risk_score,
        "newly_overdue": newly_overdue,
        "resolved": resolved,
        "new_deadlines": new_deadlines,
    }
