"""Injectable time sources."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current instant as an aware datetime."""


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock pinned to one instant, for tests and reproducible runs."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            object.__setattr__(self, "instant", self.instant.replace(tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self.instant


SYSTEM_CLOCK = SystemClock()


def today(clock: Clock) -> date:
    return clock.now().date()
