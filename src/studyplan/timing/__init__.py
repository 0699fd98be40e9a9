"""Time-remaining and urgency classification."""

from .remaining import TimeRemaining, time_remaining
from .tiers import UrgencyTier, classify_remaining, urgency_tier

__all__ = ["TimeRemaining", "UrgencyTier", "classify_remaining", "time_remaining", "urgency_tier"]
