"""Planning engine."""

from .allocator import compute_topics_per_day, derive_available_days, generate_allocation
from .models import Allocation, Topic, plan_as_dicts
from .runner import run_planner
from .scoring import DEFAULT_URGENCY_CURVE, priority_order, topic_score, urgency_score

__all__ = [
    "DEFAULT_URGENCY_CURVE",
    "Allocation",
    "Topic",
    "compute_topics_per_day",
    "derive_available_days",
    "generate_allocation",
    "plan_as_dicts",
    "priority_order",
    "run_planner",
    "topic_score",
    "urgency_score",
]
