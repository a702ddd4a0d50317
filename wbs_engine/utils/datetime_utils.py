"""Date and time utilities."""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional, Tuple, Union

from ..exceptions import InvalidDateError

DateLike = Union[date, datetime, str]

DEFAULT_WORKING_DAYS = [0, 1, 2, 3, 4]  # Monday to Friday

REPORTING_PERIODS = ('current_week', 'current_month', 'current_quarter')


def to_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string to a plain date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDateError(value, str(exc)) from exc
    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")


def to_optional_date(value: Optional[DateLike]) -> Optional[date]:
    """Like to_date, but None and empty strings mean 'no date'."""
    if value is None or value == '':
        return None
    return to_date(value)


def check_year_month(year: int, month: int) -> None:
    """Raise InvalidDateError unless (year, month) names a real month."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDateError(year, "year must be an integer")
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidDateError(month, "month must be an integer")
    if not date.min.year <= year <= date.max.year:
        raise InvalidDateError(year, f"year out of range {date.min.year}-{date.max.year}")
    if not 1 <= month <= 12:
        raise InvalidDateError(month, "month must be in 1..12")


def days_in_month(year: int, month: int) -> int:
    """Number of calendar days in the month."""
    check_year_month(year, month)
    return calendar.monthrange(year, month)[1]


def sunday_based_weekday(day: date) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    """Saturday or Sunday."""
    return day.weekday() >= 5


def days_between(start: DateLike, end: DateLike) -> int:
    """Signed whole days from start to end (end - start), rounded up."""
    delta = to_date(end) - to_date(start)
    return math.ceil(delta.total_seconds() / 86400)


def iter_dates(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every date from start to end inclusive."""
    current = to_date(start)
    last = to_date(end)
    while current <= last:
        yield current
        if current == date.max:
            break
        current += timedelta(days=1)


def get_working_days(start_date: DateLike, end_date: DateLike, working_days: List[int]) -> List[date]:
    """Get list of weekday-pattern working days between start and end dates."""
    return [day for day in iter_dates(start_date, end_date) if day.weekday() in working_days]


def is_working_day(day: DateLike, working_days: List[int]) -> bool:
    """Check if a date falls on one of the working weekdays."""
    return to_date(day).weekday() in working_days


def validate_work_date(value: DateLike, today: DateLike) -> date:
    """Return the date if time may be booked on it (today or earlier)."""
    day = to_date(value)
    if day > to_date(today):
        raise InvalidDateError(value, "future dates cannot be used for work entries")
    return day


def period_range(period: str, today: DateLike) -> Tuple[date, date]:
    """Start and end dates of a dashboard reporting period around today.

    Weeks run Sunday to Saturday; quarters are calendar quarters.
    """
    day = to_date(today)
    if period == 'current_week':
        start = day - timedelta(days=sunday_based_weekday(day))
        return start, start + timedelta(days=6)
    if period == 'current_month':
        return day.replace(day=1), day.replace(day=days_in_month(day.year, day.month))
    if period == 'current_quarter':
        first_month = (day.month - 1) // 3 * 3 + 1
        last_month = first_month + 2
        return (
            date(day.year, first_month, 1),
            date(day.year, last_month, days_in_month(day.year, last_month)),
        )
    raise ValueError(f"Unknown period: {period}")
