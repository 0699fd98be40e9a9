"""Validation helpers."""

from .errors import InvalidDateError
from .errors import ValidationError
from .errors import ValidationReport
from .dates import parse_calendar_date, parse_instant
from .domain_validator import validate_domain_inputs
from .request import validate_plan_request

__all__ = [
    "InvalidDateError",
    "ValidationError",
    "ValidationReport",
    "parse_calendar_date",
    "parse_instant",
    "validate_plan_request",
    "validate_domain_inputs",
]
