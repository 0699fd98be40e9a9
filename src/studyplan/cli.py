"""CLI entrypoint for studyplan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from studyplan.clock import SYSTEM_CLOCK, Clock, FixedClock
from studyplan.engine import run_planner, urgency_score
from studyplan.io import read_json, write_json
from studyplan.metrics import collect_metrics
from studyplan.normalization import DEFAULT_CONFIG, normalize_request, resolve_effective_config
from studyplan.reporting import (
    build_error_report,
    build_error_report_with_validation,
    build_success_report,
)
from studyplan.timing import classify_remaining, time_remaining
from studyplan.validation import (
    InvalidDateError,
    ValidationError,
    ValidationReport,
    parse_instant,
    validate_domain_inputs,
    validate_plan_request,
)

logger = logging.getLogger(__name__)


def _resolve_input_path(request_file: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (request_file.parent / path).resolve()


def _load_referenced_topics(request_file: Path, request: dict[str, Any]) -> tuple[dict[str, Any], list[ValidationError]]:
    loaded = dict(request)
    errors: list[ValidationError] = []

    raw_path = request.get("topics_path")
    if raw_path is None:
        return loaded, errors

    resolved = _resolve_input_path(request_file, raw_path)
    try:
        loaded["topics"] = read_json(resolved).get("topics", [])
    except FileNotFoundError:
        errors.append(
            ValidationError(
                code="file_not_found",
                message=f"Referenced file not found: {resolved}",
                path="$.topics_path",
            )
        )
    except OSError as exc:
        logger.error("Cannot read topics file %s: %s", resolved, exc)
        errors.append(
            ValidationError(
                code="file_unreadable",
                message=f"Referenced file cannot be read: {resolved} ({exc.strerror or exc})",
                path="$.topics_path",
            )
        )
    except ValueError as exc:
        errors.append(ValidationError(code="invalid_json", message=str(exc), path="$.topics_path"))

    return loaded, errors


def run_plan_command(request_path: str, output_path: str, *, clock: Clock = SYSTEM_CLOCK) -> int:
    validation_report = ValidationReport()

    try:
        request_payload = read_json(request_path)
    except (OSError, ValueError) as exc:
        logger.error("Cannot read plan request %s: %s", request_path, exc)
        error = build_error_report(
            [ValidationError(code="invalid_request", message=str(exc), path="$.request")],
            code="request_read_error",
        )
        write_json(output_path, error)
        return 2

    request_payload = normalize_request(request_payload)
    errors = validate_plan_request(request_payload)

    if errors:
        logger.error("Plan request rejected with %d shape error(s)", len(errors))
        write_json(output_path, build_error_report(errors))
        return 2

    loaded_request, load_errors = _load_referenced_topics(Path(request_path), request_payload)
    if load_errors:
        write_json(
            output_path,
            build_error_report_with_validation(
                load_errors,
                validation_report=validation_report,
                code="input_load_error",
            ),
        )
        return 2

    loaded_request["effective_config"] = resolve_effective_config(loaded_request, validation_report)
    validation_report.extend(validate_domain_inputs(loaded_request, reference_day=clock.now().date()))

    if validation_report.errors:
        logger.error("Plan inputs failed validation with %d error(s)", len(validation_report.errors))
        write_json(
            output_path,
            build_error_report_with_validation(
                validation_report.as_errors(),
                validation_report=validation_report,
                code="validation_error",
            ),
        )
        return 2

    result = run_planner(loaded_request, clock=clock)
    metrics = collect_metrics(result)
    write_json(output_path, build_success_report(result, metrics, validation_report, clock=clock))
    logger.info("Wrote plan with %d study day(s) to %s", len(result["plan"]), output_path)
    return 0


def run_countdown_command(target: str, *, clock: Clock = SYSTEM_CLOCK) -> int:
    try:
        remaining = time_remaining(target, clock=clock)
    except InvalidDateError as exc:
        logger.error("%s", exc)
        print(json.dumps({"status": "error", "error": {"code": "INVALID_DATE_FORMAT", "message": str(exc)}}))
        return 2

    payload = {
        **remaining.as_dict(),
        "tier": classify_remaining(remaining).value,
        "urgency_score": urgency_score(
            remaining.fractional_days,
            steepness=float(DEFAULT_CONFIG["urgency_steepness"]),
            midpoint=float(DEFAULT_CONFIG["urgency_midpoint"]),
        ),
    }
    print(json.dumps(payload, sort_keys=True))
    return 0


def _clock_from_args(raw_now: str | None) -> Clock:
    if raw_now is None:
        return SYSTEM_CLOCK
    return FixedClock(parse_instant(raw_now, field="now"))


def _add_global_options(parser: argparse.ArgumentParser, *, log_level: Any, now: Any) -> None:
    parser.add_argument("--log-level", default=log_level, help="Logging level (default: WARNING)")
    parser.add_argument(
        "--now",
        default=now,
        help="Pin the current instant (ISO date or date-time), for reproducible runs",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studyplan", description="Study plan allocation CLI")
    _add_global_options(parser, log_level="WARNING", now=None)

    # Accepted after the subcommand too; SUPPRESS keeps a value given before it.
    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, log_level=argparse.SUPPRESS, now=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser(
        "plan", parents=[common], help="Generate a day-by-day plan from plan_request JSON"
    )
    plan_parser.add_argument("--request", required=True, help="Path to plan_request.json")
    plan_parser.add_argument("--output", required=True, help="Path to plan_output.json")

    countdown_parser = subparsers.add_parser(
        "countdown", parents=[common], help="Print time remaining and urgency tier"
    )
    countdown_parser.add_argument("--target", required=True, help="Target date (YYYY-MM-DD or ISO date-time)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        clock = _clock_from_args(args.now)
    except InvalidDateError as exc:
        parser.error(str(exc))

    if args.command == "plan":
        return run_plan_command(args.request, args.output, clock=clock)
    if args.command == "countdown":
        return run_countdown_command(args.target, clock=clock)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
