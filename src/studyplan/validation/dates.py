"""Boundary parsers for calendar dates and instants."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any

from .errors import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"


def parse_calendar_date(value: Any, *, field: str) -> date:
    """Return the calendar date for ``value`` or raise ``InvalidDateError``.

    Accepts ``date`` objects, ``datetime`` objects (time-of-day dropped) and
    ``YYYY-MM-DD`` strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError:
            raise InvalidDateError(field, value) from None
    raise InvalidDateError(field, value)


def parse_instant(value: Any, *, field: str) -> datetime:
    """Return a timezone-aware instant for ``value``.

    Dates map to midnight UTC and naive datetimes are read as UTC.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        raw = value.strip()
        try:
            if len(raw) == 10:
                return datetime.combine(datetime.strptime(raw, DATE_FORMAT).date(), time.min, tzinfo=timezone.utc)
            return _as_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))
        except ValueError:
            raise InvalidDateError(field, value) from None
    raise InvalidDateError(field, value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
