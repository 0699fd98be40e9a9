"""Planning engine runner."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from studyplan.clock import SYSTEM_CLOCK, Clock, today
from studyplan.normalization.config_resolver import DEFAULT_CONFIG
from studyplan.reporting.decision_trace import DecisionTraceCollector
from studyplan.reporting.progress import compute_plan_progress
from studyplan.reporting.warnings import build_warnings_and_suggestions
from studyplan.timing import classify_remaining, time_remaining
from studyplan.validation.dates import parse_calendar_date

from .allocator import compute_topics_per_day, derive_available_days, generate_allocation
from .models import Topic, plan_as_dicts
from .scoring import topic_score, urgency_score

logger = logging.getLogger(__name__)


def _extract_topics(payload: dict[str, Any]) -> list[Topic]:
    items = payload.get("topics", [])
    if not isinstance(items, list):
        return []
    return [Topic.from_dict(item) for item in items if isinstance(item, dict)]


def run_planner(payload: dict[str, Any], *, clock: Clock = SYSTEM_CLOCK) -> dict[str, Any]:
    """Build the plan, countdown and warnings for one validated request.

    Expects a payload that already passed ``validate_domain_inputs``: topic
    weights are used as given, never coerced. Raises ``InvalidDateError`` if
    the payload dates were not validated first.
    """
    config = payload.get("effective_config") if isinstance(payload.get("effective_config"), dict) else {}
    config = {**DEFAULT_CONFIG, **config}

    topics = _extract_topics(payload)
    requested_exam = parse_calendar_date(payload.get("exam_date"), field="exam_date")
    raw_start = payload.get("start_date")
    start = today(clock) if raw_start is None else parse_calendar_date(raw_start, field="start_date")

    exam = requested_exam
    if not config["study_on_exam_day"]:
        exam = requested_exam - timedelta(days=1)
        logger.debug("Exam day excluded; planning up to %s", exam)

    trace = DecisionTraceCollector(start_timestamp=clock.now())
    plan = plan_as_dicts(generate_allocation(topics, exam, start, clock=clock, decision_trace=trace))

    cram_fallback = bool(topics) and exam <= start
    if cram_fallback:
        available_days = 1
        per_day = len(topics)
    else:
        available_days = derive_available_days(start, exam)
        per_day = compute_topics_per_day(len(topics), available_days)

    remaining = time_remaining(requested_exam, clock=clock)
    tier = classify_remaining(remaining)
    countdown = {
        **remaining.as_dict(),
        "tier": tier.value,
        "urgency_score": urgency_score(
            remaining.fractional_days,
            steepness=float(config["urgency_steepness"]),
            midpoint=float(config["urgency_midpoint"]),
        ),
    }

    plan_summary = {
        "start_date": start.isoformat(),
        "exam_date": requested_exam.isoformat(),
        "last_study_date": exam.isoformat(),
        "study_on_exam_day": bool(config["study_on_exam_day"]),
        "topic_count": len(topics),
        "available_days": available_days,
        "topics_per_day": per_day,
        "study_days": len(plan),
        "cram_fallback": cram_fallback,
        "scores_by_topic": {topic.id: topic_score(topic) for topic in topics},
    }

    warnings, suggestions = build_warnings_and_suggestions(
        plan=plan,
        plan_summary=plan_summary,
        urgency_tier=tier.value,
        max_topics_per_day=int(config["max_topics_per_day"]),
    )

    result: dict[str, Any] = {
        "plan": plan,
        "plan_summary": plan_summary,
        "countdown": countdown,
        "warnings": warnings,
        "suggestions": suggestions,
        "decision_trace": trace.as_list(),
        "effective_config": config,
    }

    completed = payload.get("completed_topic_ids")
    if isinstance(completed, list):
        result["progress"] = compute_plan_progress(plan, completed)

    return result
