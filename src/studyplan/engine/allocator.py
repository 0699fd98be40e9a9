"""Single-pass allocation of prioritized topics over the days before an exam.

Steps:
1) boundary validation of the exam and start dates,
2) cram fallback when the exam is not in the future,
3) stable priority sort by score,
4) greedy fill of equal-size daily buckets.

Rule preserved: the exam day counts as a study day; callers that want it
excluded move the exam date back one day before calling.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Any

from studyplan.clock import SYSTEM_CLOCK, Clock, today
from studyplan.reporting.decision_trace import DecisionTraceCollector
from studyplan.validation.dates import parse_calendar_date

from .models import Allocation, Topic
from .scoring import priority_order, topic_score

logger = logging.getLogger(__name__)


def derive_available_days(start: date, exam: date) -> int:
    """Whole days from ``start`` to ``exam``, never less than one."""
    return max(1, (exam - start).days)


def compute_topics_per_day(topic_count: int, available_days: int) -> int:
    if topic_count <= 0:
        return 0
    return math.ceil(topic_count / max(1, available_days))


def generate_allocation(
    topics: Sequence[Topic],
    exam_date: Any,
    start_date: Any = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
    decision_trace: DecisionTraceCollector | None = None,
) -> list[Allocation]:
    """Distribute topics over the days from ``start_date`` up to ``exam_date``.

    ``start_date`` defaults to today as read from ``clock``. Dates may be
    ``date``/``datetime`` objects or ``YYYY-MM-DD`` strings; anything else
    raises ``InvalidDateError`` before any arithmetic happens.
    """
    exam = parse_calendar_date(exam_date, field="exam_date")
    start = today(clock) if start_date is None else parse_calendar_date(start_date, field="start_date")

    if not topics:
        return []

    if exam <= start:
        logger.info("Exam %s is not after %s; scheduling all %d topics on one day", exam, start, len(topics))
        allocation = Allocation(date=start, topics=tuple(topic.id for topic in topics))
        if decision_trace is not None:
            decision_trace.record(
                day=start.isoformat(),
                topic_ids=list(allocation.topics),
                scores_by_topic={topic.id: topic_score(topic) for topic in topics},
                applied_rules=["RULE_CRAM_FALLBACK"],
                note="Exam is today or past; every topic kept in input order.",
            )
        return [allocation]

    available_days = derive_available_days(start, exam)
    ordered = priority_order(topics)
    per_day = compute_topics_per_day(len(ordered), available_days)
    logger.debug(
        "Allocating %d topics over %d days (%d per day) from %s",
        len(ordered),
        available_days,
        per_day,
        start,
    )

    plan: list[Allocation] = []
    cursor = 0
    for offset in range(available_days):
        if cursor >= len(ordered):
            break
        bucket = ordered[cursor : cursor + per_day]
        cursor += len(bucket)
        day = start + timedelta(days=offset)
        plan.append(Allocation(date=day, topics=tuple(topic.id for topic in bucket)))

        if decision_trace is not None:
            decision_trace.record(
                day=day.isoformat(),
                topic_ids=[topic.id for topic in bucket],
                scores_by_topic={topic.id: topic_score(topic) for topic in bucket},
                applied_rules=["RULE_PRIORITY_ORDER", "RULE_DAILY_BUCKET"],
                note=f"Day {offset + 1} of {available_days}; bucket size {per_day}.",
            )

    return plan
