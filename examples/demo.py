"""Demo script for deadline-engine."""

import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from deadline_engine.adapters.json_adapter import parse
from deadline_engine.evaluator import compare
from deadline_engine.pipeline import evaluate_sources


def main() -> None:
    sources = parse("examples/sample_candidates.json")
    earlier = evaluate_sources(datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc), sources, case_id="case-demo")
    report = evaluate_sources(datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc), sources, case_id="case-demo")
    print("Risk score:", report.risk_score)
    print("Summary:", report.summary)
    for step in report.next_steps:
        print(f"  [{step.priority.value}] {step.action}")
    print("Since 2025-03-01:", compare(earlier, report))


if __name__ == "__main__":
    main()
