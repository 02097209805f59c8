"""Core data schema for unified deadlines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class DeadlineCategory(str, Enum):
    COURT = "COURT"
    HOUSING = "HOUSING"
    LIMITATION = "LIMITATION"
    MANUAL = "MANUAL"


class DeadlinePriority(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Severity(str, Enum):
    """Four-level severity vocabulary used by risk alerts and exports."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class DeadlineStatus(str, Enum):
    UPCOMING = "UPCOMING"
    DUE_TODAY = "DUE_TODAY"
    DUE_SOON = "DUE_SOON"
    OVERDUE = "OVERDUE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class DeadlineSource(str, Enum):
    AUTO_CALCULATED = "AUTO_CALCULATED"
    MANUAL = "MANUAL"
    COURT_ORDER = "COURT_ORDER"


class StepPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"


TERMINAL_STATUSES = frozenset({DeadlineStatus.COMPLETED, DeadlineStatus.CANCELLED})

PRIORITY_RANK = {
    DeadlinePriority.CRITICAL: 0,
    DeadlinePriority.HIGH: 1,
    DeadlinePriority.MEDIUM: 2,
    DeadlinePriority.LOW: 3,
}


def severity_for(priority: DeadlinePriority) -> Severity:
    """Mirror a priority onto the severity vocabulary."""

    return Severity(priority.value)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class DomainCandidate:
    """Raw deadline candidate tagged with the domain that produced it."""

    domain: str
    payload: Any


@dataclass
class UnifiedDeadline:
    """Normalized deadline record used by all modules."""

    id: str
    case_id: str
    title: str
    category: DeadlineCategory
    due_date: datetime
    priority: DeadlinePriority
    status: DeadlineStatus
    severity: Severity
    source: DeadlineSource
    days_remaining: Optional[int] = None
    description: Optional[str] = None
    source_rule: Optional[str] = None
    completed_at: Optional[datetime] = None
    completed_by: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "case_id": self.case_id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "due_date": _iso(self.due_date),
            "days_remaining": self.days_remaining,
            "priority": self.priority.value,
            "status": self.status.value,
            "severity": self.severity.value,
            "source": self.source.value,
            "source_rule": self.source_rule,
            "completed_at": _iso(self.completed_at),
            "completed_by": self.completed_by,
            "notes": self.notes,
        }


@dataclass
class NextStep:
    """Recommended action tied to one deadline."""

    action: str
    priority: StepPriority
    deadline_id: str

    def to_dict(self) -> dict:
        return {"action": self.action, "priority": self.priority.value, "deadline_id": self.deadline_id}


@dataclass
class DeadlineReport:
    """Result of one evaluation: ordered deadlines, risk score and next steps."""

    evaluated_at: datetime
    deadlines: list[UnifiedDeadline] = field(default_factory=list)
    risk_score: int = 100
    next_steps: list[NextStep] = field(default_factory=list)
    summary: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "evaluated_at": _iso(self.evaluated_at),
            "deadlines": [deadline.to_dict() for deadline in self.deadlines],
            "risk_score": self.risk_score,
            "next_steps": [step.to_dict() for step in self.next_steps],
            "summary": dict(self.summary),
        }
