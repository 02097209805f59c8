"""Recommended next actions derived from ordered deadlines."""

from __future__ import annotations

from deadline_engine.schema import DeadlinePriority, DeadlineStatus, NextStep, StepPriority, UnifiedDeadline


def _days_phrase(days: int | None) -> str:
    if days is None:
        return "soon"
    return f"in {days} day(s)"


def _step_for(deadline: UnifiedDeadline) -> NextStep:
    when = _days_phrase(deadline.days_remaining)

    if deadline.status == DeadlineStatus.OVERDUE:
        return NextStep(f"URGENT: {deadline.title} is OVERDUE", StepPriority.URGENT, deadline.id)
    if deadline.status == DeadlineStatus.DUE_TODAY:
        return NextStep(f"URGENT: {deadline.title} is due TODAY", StepPriority.URGENT, deadline.id)
    if deadline.status == DeadlineStatus.DUE_SOON:
        return NextStep(f"{deadline.title} is due {when}", StepPriority.HIGH, deadline.id)
    if deadline.priority == DeadlinePriority.CRITICAL:
        return NextStep(f"{deadline.title} is due {when} (CRITICAL)", StepPriority.HIGH, deadline.id)
    return NextStep(f"Plan for {deadline.title}: due {when}", StepPriority.MEDIUM, deadline.id)


def synthesize(deadlines: list[UnifiedDeadline]) -> list[NextStep]:
    """One step per open deadline, in the order given; completed and cancelled ones are skipped."""

    return [_step_for(deadline) for deadline in deadlines if not deadline.is_terminal]
