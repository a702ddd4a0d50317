"""WBS Schedule Engine: Japanese business calendar and schedule analytics."""

from .calendar import BUSINESS_DAY_CALENDAR, HOLIDAY_CALENDAR, BusinessDayCalendar, CalendarGridBuilder, HolidayCalendar
from .engine import DelayClassifier, EffortUnitConverter, ScheduleAggregator
from .exceptions import (
    ConfigError,
    InvalidDateError,
    InvalidEffortError,
    InvalidWorkItemError,
    MissingClockError,
    ScheduleEngineError,
)
from .models import DelayStatus, ScheduleReport, WorkItem, WorkStatus

__version__ = "0.1.0"

__all__ = [
    'BUSINESS_DAY_CALENDAR',
    'HOLIDAY_CALENDAR',
    'BusinessDayCalendar',
    'CalendarGridBuilder',
    'HolidayCalendar',
    'DelayClassifier',
    'EffortUnitConverter',
    'ScheduleAggregator',
    'ConfigError',
    'InvalidDateError',
    'InvalidEffortError',
    'InvalidWorkItemError',
    'MissingClockError',
    'ScheduleEngineError',
    'DelayStatus',
    'ScheduleReport',
    'WorkItem',
    'WorkStatus',
]
