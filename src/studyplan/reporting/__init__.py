"""Reporting utilities."""

from .decision_trace import DecisionTraceCollector
from .progress import compute_plan_progress
from .reports import build_error_report, build_error_report_with_validation, build_success_report
from .warnings import build_warnings_and_suggestions

__all__ = [
    "DecisionTraceCollector",
    "build_error_report",
    "build_error_report_with_validation",
    "build_success_report",
    "build_warnings_and_suggestions",
    "compute_plan_progress",
]
