"""Plan shape metrics."""

from __future__ import annotations

from statistics import mean, pstdev
from typing import Any


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def collect_metrics(result: dict[str, Any]) -> dict[str, Any]:
    """Compute load and spread metrics for a runner result, ratios clamped to [0,1]."""
    plan = [item for item in result.get("plan", []) if isinstance(item, dict)]
    summary = result.get("plan_summary", {}) if isinstance(result.get("plan_summary"), dict) else {}
    scores = summary.get("scores_by_topic", {}) if isinstance(summary.get("scores_by_topic"), dict) else {}

    daily_loads = [len(item.get("topics", [])) for item in plan]
    topic_count = sum(daily_loads)
    study_days = len(daily_loads)
    available_days = int(summary.get("available_days", study_days) or 0)

    avg_daily = mean(daily_loads) if daily_loads else 0.0
    cv = (pstdev(daily_loads) / max(1.0, avg_daily)) if daily_loads else 0.0
    balance_score = _clamp01(1.0 - min(1.0, cv))

    total_score = 0
    early_score = 0
    first_half = (study_days + 1) // 2
    for idx, item in enumerate(plan):
        day_score = sum(int(scores.get(tid, 0)) for tid in item.get("topics", []))
        total_score += day_score
        if idx < first_half:
            early_score += day_score
    front_load_ratio = _clamp01(early_score / total_score) if total_score > 0 else 0.0

    return {
        "topic_count": topic_count,
        "study_days": study_days,
        "available_days": available_days,
        "topics_per_day": int(summary.get("topics_per_day", 0) or 0),
        "max_daily_topics": max(daily_loads) if daily_loads else 0,
        "min_daily_topics": min(daily_loads) if daily_loads else 0,
        "idle_days": max(0, available_days - study_days),
        "utilization": _clamp01(study_days / available_days) if available_days > 0 else 0.0,
        "balance_score": balance_score,
        "front_load_ratio": front_load_ratio,
    }
