"""Business-day calendar on top of the holiday calendar."""

from datetime import date
from typing import List, Optional

from .holidays import HOLIDAY_CALENDAR, HolidayCalendar
from ..utils.datetime_utils import (
    DEFAULT_WORKING_DAYS,
    DateLike,
    check_year_month,
    days_in_month,
    is_working_day,
    iter_dates,
    to_date,
)


class BusinessDayCalendar:
    """Working-day decisions: a working weekday that is not a holiday."""

    def __init__(
        self,
        holiday_calendar: Optional[HolidayCalendar] = None,
        working_days: Optional[List[int]] = None,
    ):
        """Initialize with a holiday calendar and the working weekdays (0=Monday)."""
        self.holiday_calendar = holiday_calendar or HOLIDAY_CALENDAR
        self.working_days = list(working_days if working_days is not None else DEFAULT_WORKING_DAYS)

    @classmethod
    def from_config(cls, config: dict) -> 'BusinessDayCalendar':
        calendar_config = config.get('calendar', {})
        return cls(working_days=calendar_config.get('working_days', DEFAULT_WORKING_DAYS))

    def is_business_day(self, day: DateLike) -> bool:
        day = to_date(day)
        if not is_working_day(day, self.working_days):
            return False
        return not self.holiday_calendar.is_holiday(day)

    def business_days_in_month(self, year: int, month: int) -> int:
        """Count business days in the month, checking every date."""
        check_year_month(year, month)
        last = days_in_month(year, month)
        return self.business_days_between(date(year, month, 1), date(year, month, last))

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days from start to end, both inclusive."""
        return sum(1 for day in iter_dates(start, end) if self.is_business_day(day))

    def business_days_list(self, start: DateLike, end: DateLike) -> List[date]:
        """The business days from start to end, both inclusive."""
        return [day for day in iter_dates(start, end) if self.is_business_day(day)]


BUSINESS_DAY_CALENDAR = BusinessDayCalendar()
