from datetime import datetime, timedelta

import pytest

from deadline_engine.metrics import portfolio_metrics, summarize
from deadline_engine.pipeline import evaluate

NOW = datetime.fromisoformat("2025-03-10T09:00:00+00:00")


def manual(deadline_id, delta, **extra):
    item = {"id": deadline_id, "caseId": "case-1", "title": deadline_id, "dueDate": (NOW + delta).isoformat()}
    item.update(extra)
    return item


def test_summarize_counts():
    report = evaluate(
        NOW,
        manual=[
            manual("late", timedelta(days=-1)),
            manual("today", timedelta(hours=5)),
            manual("soon", timedelta(days=2)),
            manual("far", timedelta(days=30)),
            manual("done", timedelta(days=-9), status="COMPLETED"),
        ],
    )
    assert summarize(report.deadlines) == {
        "total": 5,
        "overdue": 1,
        "due_today": 1,
        "due_soon": 1,
        "critical": 2,
        "completed": 1,
        "cancelled": 0,
    }
    assert report.summary == summarize(report.deadlines)


def test_portfolio_metrics():
    reports = [
        evaluate(NOW),
        evaluate(NOW, manual=[manual("late", timedelta(days=-2))]),
        evaluate(NOW, manual=[manual("a", timedelta(hours=1)), manual("b", timedelta(hours=2))]),
    ]
    assert [r.risk_score for r in reports] == [100, 55, 30]

    metrics = portfolio_metrics(reports)
    assert metrics["cases"] == 3
    assert metrics["mean_risk_score"] == pytest.approx(185 / 3)
    assert metrics["median_risk_score"] == 55.0
    assert metrics["min_risk_score"] == 30
    assert metrics["p10_risk_score"] == pytest.approx(35.0)
    assert metrics["cases_at_risk"] == 1
    assert metrics["total_overdue"] == 1


def test_portfolio_metrics_empty():
    metrics = portfolio_metrics([])
    assert metrics["cases"] == 0
    assert metrics["mean_risk_score"] is None
    assert metrics["cases_at_risk"] == 0
