from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_day(value) -> date:
    """Normalize a date, datetime or ISO string to a calendar day.

    Aware datetimes are converted to local time first so the day matches the
    local calendar.
    """

    if isinstance(value, datetime):
        return _local_day(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Invalid date")

    text = value.strip()
    try:
        return parse_iso_date(text)
    except ValueError:
        pass

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _local_day(datetime.fromisoformat(text))
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


def _local_day(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def validate_month(year, month) -> tuple[int, int]:
    try:
        year_i = int(year)
        month_i = int(month)
    except (TypeError, ValueError):
        raise ValidationError("Month and year must be numbers") from None

    if not 1 <= month_i <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if year_i < 1 or year_i > 9999:
        raise ValidationError("Invalid year")
    return year_i, month_i


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Inclusive first and last day of a calendar month."""
    year, month = validate_month(year, month)
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
