from datetime import datetime, timedelta

from deadline_engine.evaluator import compare
from deadline_engine.pipeline import evaluate

NOW = datetime.fromisoformat("2025-03-10T09:00:00+00:00")


def manual(deadline_id, delta, **extra):
    item = {"id": deadline_id, "caseId": "case-1", "title": deadline_id, "dueDate": (NOW + delta).isoformat()}
    item.update(extra)
    return item


def test_compare_reports():
    previous = evaluate(NOW, manual=[manual("a", timedelta(days=1)), manual("b", timedelta(days=10))])
    current = evaluate(
        NOW + timedelta(days=2),
        manual=[
            manual("a", timedelta(days=1)),
            manual("b", timedelta(days=10), status="COMPLETED"),
            manual("c", timedelta(days=20)),
        ],
    )
    assert previous.risk_score == 90
    assert current.risk_score == 55

    result = compare(previous, current)
    assert result["score_delta"] == -35
    assert result["newly_overdue"] == ["a"]
    assert result["resolved"] == ["b"]
    assert result["new_deadlines"] == ["c"]


def test_compare_identical_reports():
    report = evaluate(NOW, manual=[manual("a", timedelta(days=-1))])
    assert compare(report, report) == {
        "score_delta": 0,
        "newly_overdue": [],
        "resolved": [],
        "new_deadlines": [],
    }


def test_same_id_in_different_domains_is_tracked_separately():
    court = {
        "id": "x1",
        "caseId": "case-1",
        "label": "Disclosure",
        "dueDate": (NOW + timedelta(days=1)).isoformat(),
        "severity": "HIGH",
        "status": "PENDING",
    }
    late_manual = manual("x1", timedelta(days=-5))
    previous = evaluate(NOW, court=[court], manual=[late_manual])
    current = evaluate(NOW + timedelta(days=2), court=[court], manual=[late_manual])

    result = compare(previous, current)
    assert result["newly_overdue"] == ["x1"]
    assert result["resolved"] == []
    assert result["new_deadlines"] == []
