"""Validation for plan request payload."""

from __future__ import annotations

from typing import Any

from .errors import ValidationError

_OPTIONAL_STRING_FIELDS = ("start_date", "topics_path")


def validate_plan_request(payload: dict[str, Any]) -> list[ValidationError]:
    """Validate plan_request with basic shape checks."""
    errors: list[ValidationError] = []

    exam_date = payload.get("exam_date")
    if exam_date is None:
        errors.append(
            ValidationError(code="missing_field", message="Missing required field: exam_date", path="$.exam_date")
        )
    elif not isinstance(exam_date, str) or not exam_date.strip():
        errors.append(
            ValidationError(
                code="invalid_type",
                message="Field must be a non-empty date string: exam_date",
                path="$.exam_date",
            )
        )

    for field in _OPTIONAL_STRING_FIELDS:
        value = payload.get(field)
        if value is not None and (not isinstance(value, str) or not value.strip()):
            errors.append(
                ValidationError(
                    code="invalid_type",
                    message=f"Field must be a non-empty string: {field}",
                    path=f"$.{field}",
                )
            )

    has_inline = "topics" in payload
    has_path = "topics_path" in payload
    if not has_inline and not has_path:
        errors.append(
            ValidationError(
                code="missing_field",
                message="One of topics or topics_path is required",
                path="$.topics",
            )
        )
    elif has_inline and has_path:
        errors.append(
            ValidationError(
                code="invalid_type",
                message="Provide either topics or topics_path, not both",
                path="$.topics_path",
            )
        )
    elif has_inline and not isinstance(payload["topics"], list):
        errors.append(
            ValidationError(code="invalid_type", message="Field must be a list: topics", path="$.topics")
        )

    config = payload.get("config")
    if config is not None and not isinstance(config, dict):
        errors.append(
            ValidationError(code="invalid_type", message="Field must be an object: config", path="$.config")
        )

    completed = payload.get("completed_topic_ids")
    if completed is not None and not isinstance(completed, list):
        errors.append(
            ValidationError(
                code="invalid_type",
                message="Field must be a list: completed_topic_ids",
                path="$.completed_topic_ids",
            )
        )

    return errors
