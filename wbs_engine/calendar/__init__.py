"""Holiday, business-day and month-grid calendars."""

from .holidays import HOLIDAY_CALENDAR, HolidayCalendar
from .business_days import BUSINESS_DAY_CALENDAR, BusinessDayCalendar
from .grid import CalendarGridBuilder

__all__ = [
    'HOLIDAY_CALENDAR',
    'HolidayCalendar',
    'BUSINESS_DAY_CALENDAR',
    'BusinessDayCalendar',
    'CalendarGridBuilder',
]
