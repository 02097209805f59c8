import json

import pytest

from deadline_engine.adapters.csv_adapter import parse as parse_csv
from deadline_engine.adapters.json_adapter import parse as parse_json


def test_csv_parse_success(tmp_path):
    path = tmp_path / "manual.csv"
    path.write_text(
        "id,case_id,title,due_date,description,category\n"
        "m1,case-1,Client meeting,2025-03-20T10:00:00Z,,manual\n"
        "m2,case-1,Hearing prep,2025-03-22,Bundle index,court\n",
        encoding="utf-8",
    )
    candidates = parse_csv(str(path))
    assert len(candidates) == 2
    assert candidates[0] == {
        "id": "m1",
        "caseId": "case-1",
        "title": "Client meeting",
        "dueDate": "2025-03-20T10:00:00Z",
        "category": "manual",
    }
    assert candidates[1]["description"] == "Bundle index"


def test_csv_missing_required_column(tmp_path):
    path = tmp_path / "manual.csv"
    path.write_text("id,title\nm1,Client meeting\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_csv_empty_file(tmp_path):
    path = tmp_path / "manual.csv"
    path.write_text("", encoding="utf-8")
    assert parse_csv(str(path)) == []


def test_json_parse_success(tmp_path):
    path = tmp_path / "candidates.json"
    payload = {
        "housing": [{"id": "h1", "name": "Repair", "deadlineDate": "2025-03-05"}],
        "manual": [{"id": "m1", "title": "Call", "dueDate": "2025-03-06"}],
        "unrelated": {"ignored": True},
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    sources = parse_json(str(path))
    assert sorted(sources) == ["court", "housing", "limitation", "manual"]
    assert len(sources["housing"]) == 1
    assert sources["court"] == []


def test_json_payload_must_be_object(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps([{"id": "h1"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_domain_must_be_list(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps({"court": {"id": "c1"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_malformed(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_csv_with_byte_order_mark(tmp_path):
    path = tmp_path / "manual.csv"
    path.write_text("id,title,due_date\nm1,Call,2025-03-20\n", encoding="utf-8-sig")
    assert parse_csv(str(path)) == [{"id": "m1", "title": "Call", "dueDate": "2025-03-20"}]
