from datetime import datetime

from deadline_engine.next_steps import synthesize
from deadline_engine.schema import (
    DeadlineCategory,
    DeadlinePriority,
    DeadlineSource,
    DeadlineStatus,
    StepPriority,
    UnifiedDeadline,
    severity_for,
)

DUE = datetime.fromisoformat("2025-03-10T09:00:00+00:00")


def make(deadline_id, status, priority, days, title):
    return UnifiedDeadline(
        id=deadline_id,
        case_id="c1",
        title=title,
        category=DeadlineCategory.COURT,
        due_date=DUE,
        priority=priority,
        status=status,
        severity=severity_for(priority),
        source=DeadlineSource.AUTO_CALCULATED,
        days_remaining=days,
    )


def test_one_step_per_open_deadline_in_given_order():
    deadlines = [
        make("a", DeadlineStatus.OVERDUE, DeadlinePriority.CRITICAL, -2, "Serve claim form"),
        make("b", DeadlineStatus.DUE_TODAY, DeadlinePriority.CRITICAL, 0, "File defence"),
        make("c", DeadlineStatus.DUE_SOON, DeadlinePriority.HIGH, 2, "Disclosure"),
        make("d", DeadlineStatus.COMPLETED, DeadlinePriority.LOW, -9, "Acknowledgment of service"),
        make("e", DeadlineStatus.UPCOMING, DeadlinePriority.LOW, 14, "Witness statements"),
    ]
    steps = synthesize(deadlines)

    assert [s.deadline_id for s in steps] == ["a", "b", "c", "e"]
    assert [s.priority for s in steps] == [
        StepPriority.URGENT,
        StepPriority.URGENT,
        StepPriority.HIGH,
        StepPriority.MEDIUM,
    ]
    assert steps[0].action == "URGENT: Serve claim form is OVERDUE"
    assert steps[1].action == "URGENT: File defence is due TODAY"
    assert steps[2].action == "Disclosure is due in 2 day(s)"
    assert steps[3].action == "Plan for Witness statements: due in 14 day(s)"


def test_critical_upcoming_is_high():
    steps = synthesize([make("x", DeadlineStatus.UPCOMING, DeadlinePriority.CRITICAL, 9, "Trial bundle")])
    assert steps[0].priority == StepPriority.HIGH
    assert steps[0].action == "Trial bundle is due in 9 day(s) (CRITICAL)"


def test_cancelled_and_empty():
    assert synthesize([make("x", DeadlineStatus.CANCELLED, DeadlinePriority.LOW, 3, "Hearing")]) == []
    assert synthesize([]) == []


def test_step_serialization():
    step = synthesize([make("a", DeadlineStatus.OVERDUE, DeadlinePriority.CRITICAL, -1, "Appeal")])[0]
    assert step.to_dict() == {"action": "URGENT: Appeal is OVERDUE", "priority": "urgent", "deadline_id": "a"}
