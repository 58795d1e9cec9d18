from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Iterator, Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def require_iso_date(value: Optional[str], field_name: str) -> date:
    """Like parse_iso_date but raises ValidationError naming the field.

    Only the zero-padded form is accepted: ledger dates are keyed by the
    string itself, so "2024-1-5" and "2024-01-05" must not both exist.
    """
    try:
        parsed = parse_iso_date(value or "")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name} '{value}': expected YYYY-MM-DD") from None
    if parsed.isoformat() != value:
        raise ValidationError(f"Invalid {field_name} '{value}': expected YYYY-MM-DD")
    return parsed


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def today_local() -> date:
    """Current calendar date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def weekday_index(value: date) -> int:
    """Weekday as 0-6 where Sunday=0, Monday=1, ..., Saturday=6."""
    return (value.weekday() + 1) % 7


def last_day_of_month(value: date) -> int:
    return calendar.monthrange(value.year, value.month)[1]


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
