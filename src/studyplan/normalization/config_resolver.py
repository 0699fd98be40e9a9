"""Resolve effective planner configuration from layered inputs."""

from __future__ import annotations

import math
from typing import Any

from studyplan.validation import ValidationReport

DEFAULT_CONFIG: dict[str, Any] = {
    "study_on_exam_day": True,
    "max_topics_per_day": 6,
    "urgency_steepness": 0.15,
    "urgency_midpoint": 10,
}

_EXPECTED_TYPES: dict[str, tuple[type, ...]] = {
    "study_on_exam_day": (bool,),
    "max_topics_per_day": (int,),
    "urgency_steepness": (int, float),
    "urgency_midpoint": (int, float),
}


def resolve_effective_config(loaded_payload: dict[str, Any], validation_report: ValidationReport) -> dict[str, Any]:
    """Overlay the request ``config`` object on the defaults.

    Unknown keys and badly typed values are reported as errors and the
    default is kept in their place.
    """
    effective = dict(DEFAULT_CONFIG)
    source = loaded_payload.get("config")
    if not isinstance(source, dict):
        return effective

    for key, value in source.items():
        if key not in DEFAULT_CONFIG:
            validation_report.add_error(
                code="INVALID_CONFIG_KEY",
                message=f"Config key {key!r} is not allowed",
                field_path=f"$.config.{key}",
                suggested_fix=f"Use one of: {', '.join(sorted(DEFAULT_CONFIG))}",
            )
            continue
        if not _matches(value, _EXPECTED_TYPES[key]):
            validation_report.add_error(
                code="INVALID_CONFIG_VALUE",
                message=f"Config value for {key!r} has type {type(value).__name__}",
                field_path=f"$.config.{key}",
                extra={"default_value": DEFAULT_CONFIG[key]},
            )
            continue
        if isinstance(value, float) and not math.isfinite(value):
            validation_report.add_error(
                code="INVALID_CONFIG_VALUE",
                message=f"Config value for {key!r} must be a finite number",
                field_path=f"$.config.{key}",
                extra={"default_value": DEFAULT_CONFIG[key]},
            )
            continue
        effective[key] = value

    if effective["max_topics_per_day"] < 1:
        validation_report.add_error(
            code="INVALID_CONFIG_VALUE",
            message="max_topics_per_day must be >= 1",
            field_path="$.config.max_topics_per_day",
        )
        effective["max_topics_per_day"] = DEFAULT_CONFIG["max_topics_per_day"]

    return effective


def _matches(value: Any, expected: tuple[type, ...]) -> bool:
    if isinstance(value, bool):
        return bool in expected
    return isinstance(value, expected)
