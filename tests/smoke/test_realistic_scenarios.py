from __future__ import annotations

from datetime import datetime, timezone

from studyplan.clock import FixedClock
from studyplan.engine import run_planner
from studyplan.metrics import collect_metrics
from studyplan.normalization import resolve_effective_config
from studyplan.validation import ValidationReport, validate_domain_inputs

CLOCK = FixedClock(datetime(2025, 5, 1, 7, 0, tzinfo=timezone.utc))

_SYLLABUS = [
    ("processes-and-threads", 4, 5),
    ("scheduling-algorithms", 4, 5),
    ("deadlocks", 3, 4),
    ("virtual-memory", 5, 5),
    ("page-replacement", 4, 4),
    ("file-systems", 3, 3),
    ("io-subsystem", 2, 2),
    ("synchronization", 5, 4),
    ("kirchhoff-laws", 2, 5),
    ("thevenin-norton", 3, 4),
    ("ac-phasors", 4, 3),
    ("op-amps", 3, 3),
    ("dfa-nfa", 2, 4),
    ("regular-expressions", 2, 3),
    ("pumping-lemma", 4, 4),
    ("context-free-grammars", 3, 4),
    ("pushdown-automata", 4, 3),
    ("turing-machines", 5, 3),
    ("decidability", 5, 2),
    ("complexity-classes", 3, 2),
]


def _loaded(exam_date: str, **overrides: object) -> dict:
    loaded = {
        "exam_date": exam_date,
        "start_date": "2025-05-01",
        "topics": [{"id": tid, "difficulty_weight": d, "exam_importance": i} for tid, d, i in _SYLLABUS],
    }
    loaded.update(overrides)
    loaded["effective_config"] = resolve_effective_config(loaded, ValidationReport())
    return loaded


def test_two_week_run_up_spreads_two_topics_a_day() -> None:
    loaded = _loaded("2025-05-15")
    assert validate_domain_inputs(loaded).errors == []

    result = run_planner(loaded, clock=CLOCK)
    metrics = collect_metrics(result)

    assert result["plan_summary"]["available_days"] == 14
    assert result["plan_summary"]["topics_per_day"] == 2
    assert metrics["study_days"] == 10
    assert metrics["idle_days"] == 4
    assert result["plan"][0]["topics"] == ["virtual-memory", "processes-and-threads"]
    assert result["countdown"]["tier"] == "safe"
    assert result["warnings"] == []


def test_last_minute_run_up_flags_load_and_pressure() -> None:
    result = run_planner(_loaded("2025-05-02"), clock=CLOCK)

    assert len(result["plan"]) == 1
    assert len(result["plan"][0]["topics"]) == 20
    assert result["countdown"]["tier"] == "critical"
    codes = {item["code"] for item in result["warnings"]}
    assert codes == {"WARN_HIGH_DAILY_LOAD", "WARN_DEADLINE_PRESSURE"}


def test_progress_survives_a_topic_being_added() -> None:
    completed = ["virtual-memory", "deadlocks"]
    before = run_planner(_loaded("2025-05-15", completed_topic_ids=completed), clock=CLOCK)

    loaded = _loaded("2025-05-15", completed_topic_ids=completed)
    loaded["topics"].insert(0, {"id": "memory-mapped-files", "difficulty_weight": 5, "exam_importance": 5})
    after = run_planner(loaded, clock=CLOCK)

    assert before["progress"]["completed_topics"] == after["progress"]["completed_topics"] == 2
    assert after["plan"][0]["topics"] == ["memory-mapped-files", "virtual-memory"]
