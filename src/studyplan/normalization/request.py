"""Normalization for incoming request payloads."""

from __future__ import annotations

from typing import Any

_DATE_FIELDS = ("exam_date", "start_date")


def normalize_request(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a normalized copy of input request.

    Date-time strings are truncated to their calendar date; time-of-day is
    not part of the planning contract.
    """
    normalized = dict(payload)
    if "schema_version" not in normalized:
        normalized["schema_version"] = "1.0"
    for field in _DATE_FIELDS:
        value = normalized.get(field)
        if isinstance(value, str):
            normalized[field] = _truncate_time(value.strip())
    return normalized


def _truncate_time(value: str) -> str:
    if len(value) > 10 and value[10] in ("T", " "):
        return value[:10]
    return value
