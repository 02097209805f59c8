"""Merge classified deadlines into one globally ordered sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from deadline_engine.schema import PRIORITY_RANK, DeadlineStatus, UnifiedDeadline


def sort_key(deadline: UnifiedDeadline) -> tuple[int, int, int]:
    """Overdue first, then priority rank, then soonest due."""

    overdue = 0 if deadline.status == DeadlineStatus.OVERDUE else 1
    days = deadline.days_remaining if deadline.days_remaining is not None else 0
    return overdue, PRIORITY_RANK[deadline.priority], days


def merge(lists: Iterable[Optional[list[UnifiedDeadline]]]) -> list[UnifiedDeadline]:
    """Concatenate lists in argument order and stable-sort them; equal keys keep input order."""

    combined: list[UnifiedDeadline] = []
    for deadlines in lists:
        if deadlines:
            combined.extend(deadlines)
    return sorted(combined, key=sort_key)
