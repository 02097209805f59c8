"""Streamlit demo UI for deadline-engine."""

from __future__ import annotations

import tempfile
from datetime import datetime, time, timezone
from pathlib import Path
from typing import Any

from deadline_engine.adapters import csv_adapter, json_adapter
from deadline_engine.pipeline import evaluate_sources
from deadline_engine.risk import risk_level, score


def _parse_sources_from_path(file_path: str) -> dict[str, list]:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".json":
        return json_adapter.parse(file_path)
    if suffix == ".csv":
        return {"manual": csv_adapter.parse(file_path)}
    raise ValueError("Unsupported file type. Please use .json or .csv")


def _parse_uploaded(uploaded_file) -> dict[str, list]:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_sources_from_path(temp_path)
    finally:
        Path(temp_path).unlink(missing_ok=True)


def run_engine(sources: dict[str, list], now: datetime, case_id: str | None) -> dict[str, Any]:
    """Run the engine and return a UI-friendly result payload."""

    report = evaluate_sources(now, sources, case_id=case_id or None)
    return {
        "summary": report.summary,
        "risk_score": report.risk_score,
        "risk_level": risk_level(report.risk_score),
        "components": score(report.deadlines, return_components=True),
        "deadlines": [deadline.to_dict() for deadline in report.deadlines],
        "next_steps": [step.to_dict() for step in report.next_steps],
        "candidate_counts": {domain: len(items) for domain, items in sources.items()},
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Deadline Engine Demo", layout="wide")
    st.title("Deadline Engine — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload deadline candidates", type=["json", "csv"])
        use_demo = st.checkbox("Load demo candidates", value=True)
        case_id = st.text_input("Case id", value="case-demo")
        eval_date = st.date_input("Evaluate as of", value=datetime(2025, 3, 10).date())
        eval_hour = st.slider("Hour (UTC)", min_value=0, max_value=23, value=9)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            sources = json_adapter.parse("examples/sample_candidates.json")
            data_source = "demo candidates (examples/sample_candidates.json)"
        elif uploaded is not None:
            sources = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a JSON/CSV file or enable 'Load demo candidates'.")
            return

        now = datetime.combine(eval_date, time(hour=int(eval_hour)), tzinfo=timezone.utc)
        result = run_engine(sources, now, case_id)

        st.success(f"Loaded {sum(result['candidate_counts'].values())} candidates from {data_source}.")

        st.subheader("A) Summary")
        summary = result["summary"]
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Total", summary["total"])
        c2.metric("Overdue", summary["overdue"])
        c3.metric("Due today", summary["due_today"])
        c4.metric("Due soon", summary["due_soon"])
        c5.metric("Critical", summary["critical"])
        st.table([result["candidate_counts"]])

        st.subheader("B) Risk Score")
        r1, r2 = st.columns(2)
        r1.metric("risk_score", result["risk_score"])
        r2.metric("risk_level", result["risk_level"])
        st.table([result["components"]])

        st.subheader("C) Deadlines")
        if result["deadlines"]:
            st.dataframe(result["deadlines"], use_container_width=True)
        else:
            st.write("No deadlines.")

        st.subheader("D) Next Steps")
        if result["next_steps"]:
            st.table(result["next_steps"])
        else:
            st.write("No recommended actions.")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
