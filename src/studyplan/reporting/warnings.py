"""Warning and suggestion generation for planning output."""

from __future__ import annotations

from typing import Any

_PRESSURE_TIERS = {"urgent", "critical"}


def build_warnings_and_suggestions(
    *,
    plan: list[dict[str, Any]],
    plan_summary: dict[str, Any],
    urgency_tier: str,
    max_topics_per_day: int,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Generate plan warnings and the suggestions that go with them."""
    warnings: list[dict[str, Any]] = []
    suggestions: list[dict[str, Any]] = []

    topic_count = int(plan_summary.get("topic_count", 0))

    if topic_count == 0:
        warnings.append(
            {
                "code": "WARN_EMPTY_PLAN",
                "severity": "info",
                "message": "No topics were supplied, so the plan is empty.",
            }
        )
        return warnings, suggestions

    if plan_summary.get("cram_fallback"):
        warnings.append(
            {
                "code": "WARN_EXAM_NOT_IN_FUTURE",
                "severity": "warning",
                "message": "The exam is today or already past; every topic was placed on the start date.",
                "start_date": plan_summary.get("start_date"),
                "exam_date": plan_summary.get("exam_date"),
            }
        )
        suggestions.append(
            {
                "code": "SUGGEST_REVIEW_EXAM_DATE",
                "message": "Check the exam date, or start from an earlier day to spread the topics out.",
            }
        )

    busiest_day = max((len(item.get("topics", [])) for item in plan), default=0)
    if busiest_day > max_topics_per_day:
        warnings.append(
            {
                "code": "WARN_HIGH_DAILY_LOAD",
                "severity": "warning",
                "message": "At least one day holds more topics than the configured daily maximum.",
                "max_daily_topics": busiest_day,
                "threshold": max_topics_per_day,
            }
        )
        suggestions.append(
            {
                "code": "SUGGEST_START_EARLIER",
                "message": "Start studying earlier or drop low-priority topics to lighten each day.",
            }
        )

    if urgency_tier in _PRESSURE_TIERS:
        warnings.append(
            {
                "code": "WARN_DEADLINE_PRESSURE",
                "severity": "warning",
                "urgency_tier": urgency_tier,
                "message": "The exam is less than two days away.",
            }
        )
        suggestions.append(
            {
                "code": "SUGGEST_FOCUS_TOP_TOPICS",
                "message": "Work through the first topics of each day; they carry the highest scores.",
            }
        )

    unique_suggestions: list[dict[str, Any]] = []
    seen: set[str] = set()
    for item in suggestions:
        code = str(item.get("code", ""))
        if code in seen:
            continue
        seen.add(code)
        unique_suggestions.append(item)

    return warnings, unique_suggestions
