"""Time-remaining breakdown for countdown displays."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import timedelta
from typing import Any

from studyplan.clock import SYSTEM_CLOCK, Clock
from studyplan.validation.dates import parse_instant

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR


@dataclass(frozen=True, slots=True)
class TimeRemaining:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    total: int = 0

    @classmethod
    def from_milliseconds(cls, total_ms: int) -> "TimeRemaining":
        if total_ms <= 0:
            return cls()
        days, rest = divmod(total_ms, _MS_PER_DAY)
        hours, rest = divmod(rest, _MS_PER_HOUR)
        minutes, rest = divmod(rest, _MS_PER_MINUTE)
        seconds = rest // _MS_PER_SECOND
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds, total=total_ms)

    @property
    def fractional_days(self) -> float:
        return self.total / _MS_PER_DAY

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def time_remaining(target: Any, *, clock: Clock = SYSTEM_CLOCK) -> TimeRemaining:
    """Return the time left until ``target``, all zeros once it has passed."""
    instant = parse_instant(target, field="target")
    difference = instant - clock.now()
    return TimeRemaining.from_milliseconds(difference // timedelta(milliseconds=1))
