"""Topic scoring and deterministic priority ordering."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .models import Topic

DEFAULT_URGENCY_CURVE: dict[str, float] = {
    "steepness": 0.15,
    "midpoint": 10.0,
}


def topic_score(topic: Topic) -> int:
    """Return the priority score: difficulty times exam importance."""
    return topic.difficulty_weight * topic.exam_importance


def priority_order(topics: Iterable[Topic]) -> list[Topic]:
    """Return topics sorted by descending score.

    ``sorted`` is stable, so equal scores keep their input order.
    """
    return sorted(topics, key=topic_score, reverse=True)


def urgency_score(
    days_until_deadline: float,
    *,
    steepness: float = DEFAULT_URGENCY_CURVE["steepness"],
    midpoint: float = DEFAULT_URGENCY_CURVE["midpoint"],
) -> float:
    """Sigmoid deadline pressure in [0, 1].

    Formula: 1 / (1 + e^(steepness * (days - midpoint))). A deadline that is
    due or past scores 1.0; ``midpoint`` days out scores exactly 0.5.
    """
    if days_until_deadline <= 0:
        return 1.0
    exponent = steepness * (days_until_deadline - midpoint)
    if exponent > 700:
        return 0.0
    return 1.0 / (1.0 + math.exp(exponent))
