from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.constants import DATE_FORMAT, MAX_YEAR, MIN_YEAR, WEEK_SPAN_DAYS
from ..core.exceptions import InvalidRangeError, ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (expected YYYY-MM-DD): {value!r}")


def as_calendar_date(value: date | datetime | str) -> date:
    """Drop any time-of-day component; attendance dates are calendar days."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def week_window(week_start: date) -> tuple[date, date]:
    """Inclusive [week_start, week_start + 6 days]. week_start is used as given."""
    try:
        return week_start, week_start + timedelta(days=WEEK_SPAN_DAYS)
    except OverflowError:
        raise InvalidRangeError(f"Week starting {week_start.isoformat()} runs past the last supported date")


def month_window(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the given month."""
    if not 1 <= int(month) <= 12:
        raise InvalidRangeError(f"Month must be between 1 and 12, got {month}")
    if not MIN_YEAR <= int(year) <= MAX_YEAR:
        raise InvalidRangeError(f"Year out of range: {year}")

    _, last_day = calendar.monthrange(int(year), int(month))
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)
