"""Build CLI reports."""

from __future__ import annotations

from typing import Any

from studyplan.clock import SYSTEM_CLOCK, Clock
from studyplan.validation import ValidationError, ValidationReport

SCHEMA_VERSION = "1.0.0"


def build_error_report(errors: list[ValidationError], code: str = "validation_error") -> dict[str, Any]:
    """Return a JSON-serializable error report."""
    return {
        "status": "error",
        "error": {
            "code": code,
            "count": len(errors),
            "details": [
                {"code": err.code, "message": err.message, "path": err.path}
                for err in errors
            ],
        },
    }


def build_error_report_with_validation(
    errors: list[ValidationError],
    validation_report: ValidationReport,
    code: str = "validation_error",
) -> dict[str, Any]:
    payload = build_error_report(errors, code=code)
    payload["validation_report"] = validation_report.as_dict()
    return payload


def build_success_report(
    result: dict[str, Any],
    metrics: dict[str, Any],
    validation_report: ValidationReport,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> dict[str, Any]:
    """Return a JSON-serializable success report."""
    generated_at = clock.now().isoformat().replace("+00:00", "Z")
    plan_id = f"plan-{generated_at.replace(':', '').replace('-', '').replace('T', '-').replace('Z', '')}"
    plan_output = {
        "schema_version": SCHEMA_VERSION,
        "plan_id": plan_id,
        "generated_at": generated_at,
        "plan": result.get("plan", []),
        "plan_summary": result.get("plan_summary", {}),
        "countdown": result.get("countdown", {}),
        "metrics": metrics,
        "warnings": result.get("warnings", []),
        "suggestions": result.get("suggestions", []),
        "decision_trace": result.get("decision_trace", []),
        "effective_config": result.get("effective_config", {}),
        "validation_report": validation_report.as_dict(),
    }
    if "progress" in result:
        plan_output["progress"] = result["progress"]
    return {
        "status": "ok",
        "plan_output": plan_output,
    }
