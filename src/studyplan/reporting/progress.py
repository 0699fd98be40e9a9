"""Completion progress over an allocation plan, keyed by topic id."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any


def _percentage(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)


def compute_plan_progress(plan: list[dict[str, Any]], completed_topic_ids: Iterable[str]) -> dict[str, Any]:
    """Summarize how much of ``plan`` is done.

    Ids that do not appear in the plan are ignored, so stale progress from an
    older plan does not inflate the numbers.
    """
    completed = set(completed_topic_ids)
    by_day: list[dict[str, Any]] = []
    total_topics = 0
    total_completed = 0

    for allocation in plan:
        topic_ids = [str(tid) for tid in allocation.get("topics", [])]
        done = sum(1 for tid in topic_ids if tid in completed)
        total_topics += len(topic_ids)
        total_completed += done
        by_day.append(
            {
                "date": allocation.get("date"),
                "total": len(topic_ids),
                "completed": done,
                "percentage": _percentage(done, len(topic_ids)),
            }
        )

    return {
        "total_topics": total_topics,
        "completed_topics": total_completed,
        "overall_percentage": _percentage(total_completed, total_topics),
        "by_day": by_day,
    }
