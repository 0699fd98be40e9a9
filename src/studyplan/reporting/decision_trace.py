"""Decision trace utilities for allocator runtime events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass(slots=True)
class DecisionTraceCollector:
    """Collect one decision per study day while the allocator runs."""

    start_timestamp: datetime
    _sequence: int = 0
    _items: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.start_timestamp.tzinfo is None:
            self.start_timestamp = self.start_timestamp.replace(tzinfo=timezone.utc)

    def record(
        self,
        *,
        day: str,
        topic_ids: list[str],
        scores_by_topic: dict[str, int],
        applied_rules: list[str],
        note: str = "",
    ) -> None:
        self._sequence += 1
        timestamp = self.start_timestamp + timedelta(milliseconds=self._sequence)
        self._items.append(
            {
                "decision_id": f"d-{self._sequence:06d}",
                "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
                "date": day,
                "topic_ids": list(topic_ids),
                "scores_by_topic": {tid: int(scores_by_topic[tid]) for tid in topic_ids},
                "applied_rules": list(applied_rules),
                "note": note,
            }
        )

    def as_list(self) -> list[dict[str, Any]]:
        """Return trace sorted in deterministic chronological order."""
        return sorted(self._items, key=lambda item: (str(item["timestamp"]), str(item["decision_id"])))
