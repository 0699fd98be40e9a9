"""Discrete urgency tiers for a deadline."""

from __future__ import annotations

from enum import Enum

from .remaining import TimeRemaining

CRITICAL_BELOW_DAYS = 1
URGENT_BELOW_DAYS = 2
WARNING_BELOW_DAYS = 4


class UrgencyTier(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    URGENT = "urgent"
    CRITICAL = "critical"
    PAST = "past"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {tier: rank for rank, tier in enumerate(UrgencyTier)}


def urgency_tier(days_remaining: float, total_remaining_ms: float) -> UrgencyTier:
    """Classify a deadline.

    Checked in order: total <= 0 is past, then days < 1 critical,
    days < 2 urgent, days < 4 warning, otherwise safe. Comparisons are
    strict, so exactly 1, 2 and 4 days fall into urgent, warning and safe.
    """
    if total_remaining_ms <= 0:
        return UrgencyTier.PAST
    if days_remaining < CRITICAL_BELOW_DAYS:
        return UrgencyTier.CRITICAL
    if days_remaining < URGENT_BELOW_DAYS:
        return UrgencyTier.URGENT
    if days_remaining < WARNING_BELOW_DAYS:
        return UrgencyTier.WARNING
    return UrgencyTier.SAFE


def classify_remaining(remaining: TimeRemaining) -> UrgencyTier:
    return urgency_tier(remaining.days, remaining.total)
