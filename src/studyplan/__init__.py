"""Study plan allocation engine and deadline urgency classifier."""

from .clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from .engine import Allocation, Topic, generate_allocation
from .timing import TimeRemaining, UrgencyTier, time_remaining, urgency_tier
from .validation import InvalidDateError

__all__ = [
    "SYSTEM_CLOCK",
    "Allocation",
    "Clock",
    "FixedClock",
    "InvalidDateError",
    "SystemClock",
    "TimeRemaining",
    "Topic",
    "UrgencyTier",
    "generate_allocation",
    "time_remaining",
    "urgency_tier",
]
