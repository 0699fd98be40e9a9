"""Domain-level validation of topics, dates and progress ids."""

from __future__ import annotations

from datetime import date
from typing import Any

from .dates import parse_calendar_date
from .errors import InvalidDateError, ValidationReport

TOPIC_WEIGHT_RANGE = (1, 5)
_WEIGHT_FIELDS = ("difficulty_weight", "exam_importance")


def validate_domain_inputs(loaded_payload: dict[str, Any], *, reference_day: date | None = None) -> ValidationReport:
    """Validate topics and dates; every issue is collected, none short-circuits.

    ``reference_day`` stands in for a missing start_date when checking whether
    the exam still lies in the future.
    """
    report = ValidationReport()

    exam = _check_date(loaded_payload, "exam_date", report)
    start = _check_date(loaded_payload, "start_date", report) if loaded_payload.get("start_date") is not None else reference_day

    if exam is not None and start is not None and exam <= start:
        report.add_info(
            code="INFO_EXAM_NOT_IN_FUTURE",
            message="exam_date is not after the start date; all topics go on the start date",
            field_path="$.exam_date",
            extra={"exam_date": exam.isoformat(), "start_date": start.isoformat()},
        )

    effective_config = loaded_payload.get("effective_config")
    if isinstance(effective_config, dict) and effective_config.get("study_on_exam_day") is False:
        report.add_info(
            code="INFO_EXAM_DAY_EXCLUDED",
            message="study_on_exam_day is false; the plan ends the day before the exam",
            field_path="$.config.study_on_exam_day",
        )

    topics = loaded_payload.get("topics", [])
    if not isinstance(topics, list):
        report.add_error(
            code="INVALID_TYPE",
            message="topics must be a list of topic objects",
            field_path="$.topics",
        )
        topics = []

    seen_ids: set[str] = set()
    for idx, topic in enumerate(topics):
        path = f"$.topics[{idx}]"
        if not isinstance(topic, dict):
            report.add_error(code="INVALID_TYPE", message="Topic must be an object", field_path=path)
            continue

        topic_id = topic.get("id")
        if not isinstance(topic_id, str) or not topic_id.strip():
            report.add_error(
                code="INVALID_TOPIC_ID",
                message="Topic id must be a non-empty string",
                field_path=f"{path}.id",
            )
        elif topic_id in seen_ids:
            report.add_error(
                code="DUPLICATE_TOPIC_ID",
                message=f"Duplicate topic id: {topic_id}",
                field_path=f"{path}.id",
                suggested_fix="Topic ids must be unique within one planning run.",
            )
        else:
            seen_ids.add(topic_id)

        for weight_field in _WEIGHT_FIELDS:
            _check_weight(topic.get(weight_field), f"{path}.{weight_field}", report)

    completed = loaded_payload.get("completed_topic_ids")
    if isinstance(completed, list):
        for idx, item in enumerate(completed):
            if not isinstance(item, str):
                report.add_error(
                    code="INVALID_TYPE",
                    message="Completed topic ids must be strings",
                    field_path=f"$.completed_topic_ids[{idx}]",
                )

    return report


def _check_date(payload: dict[str, Any], field: str, report: ValidationReport) -> date | None:
    try:
        return parse_calendar_date(payload.get(field), field=field)
    except InvalidDateError as exc:
        report.add_error(
            code="INVALID_DATE_FORMAT",
            message=str(exc),
            field_path=f"$.{field}",
            suggested_fix="Use the YYYY-MM-DD format.",
        )
        return None


def _check_weight(value: Any, path: str, report: ValidationReport) -> None:
    low, high = TOPIC_WEIGHT_RANGE
    if not isinstance(value, int) or isinstance(value, bool):
        report.add_error(
            code="INVALID_TOPIC_WEIGHT",
            message=f"Expected an integer in [{low},{high}], got {type(value).__name__}",
            field_path=path,
        )
    elif not low <= value <= high:
        report.add_error(
            code="INVALID_TOPIC_WEIGHT",
            message=f"Value must be in [{low},{high}]",
            field_path=path,
            extra={"value": value},
        )
