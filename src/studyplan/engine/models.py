"""Engine data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

MIN_WEIGHT = 1
MAX_WEIGHT = 5


@dataclass(frozen=True, slots=True)
class Topic:
    """A unit of study material supplied by the topic source."""

    id: str
    difficulty_weight: int
    exam_importance: int

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Topic":
        return cls(
            id=str(payload["id"]),
            difficulty_weight=payload["difficulty_weight"],
            exam_importance=payload["exam_importance"],
        )


@dataclass(frozen=True, slots=True)
class Allocation:
    """One study day and the topic ids assigned to it, in priority order."""

    date: date
    topics: tuple[str, ...]

    def as_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat(), "topics": list(self.topics)}


def plan_as_dicts(plan: list[Allocation]) -> list[dict[str, Any]]:
    return [allocation.as_dict() for allocation in plan]
