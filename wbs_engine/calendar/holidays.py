"""Japanese public holiday calendar."""

import math
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ..models.work_item import FixedHoliday, NthMondayHoliday
from ..utils.datetime_utils import DateLike, check_year_month, iter_dates, sunday_based_weekday, to_date
from ..utils.logging_config import get_logger

logger = get_logger("calendar.holidays")

FIXED_HOLIDAYS: Tuple[FixedHoliday, ...] = (
    FixedHoliday(1, 1, '元日'),
    FixedHoliday(2, 11, '建国記念の日'),
    FixedHoliday(2, 23, '天皇誕生日'),
    FixedHoliday(4, 29, '昭和の日'),
    FixedHoliday(5, 3, '憲法記念日'),
    FixedHoliday(5, 4, 'みどりの日'),
    FixedHoliday(5, 5, 'こどもの日'),
    FixedHoliday(8, 11, '山の日'),
    FixedHoliday(11, 3, '文化の日'),
    FixedHoliday(11, 23, '勤労感謝の日'),
)

HAPPY_MONDAY_HOLIDAYS: Tuple[NthMondayHoliday, ...] = (
    NthMondayHoliday(1, 2, '成人の日'),
    NthMondayHoliday(7, 3, '海の日'),
    NthMondayHoliday(9, 3, '敬老の日'),
    NthMondayHoliday(10, 2, 'スポーツの日'),
)

SPRING_EQUINOX_NAME = '春分の日'
AUTUMN_EQUINOX_NAME = '秋分の日'
SUBSTITUTE_HOLIDAY_NAME = '振替休日'
NATIONAL_HOLIDAY_NAME = '国民の休日'

# (first_year, last_year, base, coefficient, anchor_year)
SPRING_EQUINOX_TABLE: Tuple[Tuple[int, int, float, float, int], ...] = (
    (1851, 1899, 19.8277, 0.2422, 1851),
    (1900, 1979, 21.124, 0.2422, 1900),
    (1980, 2099, 20.8431, 0.242194, 1980),
    (2100, 2150, 21.8510, 0.242194, 2100),
)
AUTUMN_EQUINOX_TABLE: Tuple[Tuple[int, int, float, float, int], ...] = (
    (1851, 1899, 22.7020, 0.2422, 1851),
    (1900, 1979, 23.2488, 0.2422, 1900),
    (1980, 2099, 23.2488, 0.242194, 1980),
    (2100, 2150, 24.2488, 0.242194, 2100),
)
SPRING_EQUINOX_DEFAULT_DAY = 20
AUTUMN_EQUINOX_DEFAULT_DAY = 23


def _equinox_day(year: int, table, default_day: int) -> int:
    for first_year, last_year, base, coefficient, anchor in table:
        if first_year <= year <= last_year:
            elapsed = year - anchor
            return math.floor(base + coefficient * elapsed - math.floor(elapsed / 4))
    return default_day


def spring_equinox_day(year: int) -> int:
    """Day of March on which the spring equinox holiday falls."""
    return _equinox_day(year, SPRING_EQUINOX_TABLE, SPRING_EQUINOX_DEFAULT_DAY)


def autumn_equinox_day(year: int) -> int:
    """Day of September on which the autumn equinox holiday falls."""
    return _equinox_day(year, AUTUMN_EQUINOX_TABLE, AUTUMN_EQUINOX_DEFAULT_DAY)


def nth_monday(year: int, month: int, nth: int) -> int:
    """Day of month of the nth Monday."""
    first_weekday = sunday_based_weekday(date(year, month, 1))
    first_monday = 1 + ((8 - first_weekday) % 7)
    return first_monday + (nth - 1) * 7


class HolidayCalendar:
    """Decides whether a date is a Japanese public holiday.

    Named holidays (fixed, Happy Monday, equinox) are matched directly.
    Substitute and national holidays look one day to each side and only
    consult the named categories there, so evaluation never recurses
    further than one day.
    """

    def is_holiday(self, day: DateLike) -> bool:
        """True for named, substitute and national holidays."""
        return self.holiday_name(day) is not None

    def holiday_name(self, day: DateLike) -> Optional[str]:
        """Label of the holiday on this date, or None."""
        day = to_date(day)

        name = self._named_holiday(day)
        if name is not None:
            return name

        if self._is_substitute_holiday(day):
            return SUBSTITUTE_HOLIDAY_NAME

        if self._is_national_holiday(day):
            return NATIONAL_HOLIDAY_NAME

        return None

    def holidays_in_year(self, year: int) -> List[Tuple[date, str]]:
        """All holidays of the year in date order."""
        check_year_month(year, 1)
        holidays = []
        for day in iter_dates(date(year, 1, 1), date(year, 12, 31)):
            name = self.holiday_name(day)
            if name is not None:
                holidays.append((day, name))
        logger.debug("holidays computed", extra={'year': year, 'count': len(holidays)})
        return holidays

    def _named_holiday(self, day: date) -> Optional[str]:
        for holiday in FIXED_HOLIDAYS:
            if holiday.month == day.month and holiday.day == day.day:
                return holiday.name

        for holiday in HAPPY_MONDAY_HOLIDAYS:
            if holiday.month == day.month and nth_monday(day.year, day.month, holiday.week) == day.day:
                return holiday.name

        if day.month == 3 and day.day == spring_equinox_day(day.year):
            return SPRING_EQUINOX_NAME

        if day.month == 9 and day.day == autumn_equinox_day(day.year):
            return AUTUMN_EQUINOX_NAME

        return None

    def _is_substitute_holiday(self, day: date) -> bool:
        # Monday after a holiday Sunday
        if day.weekday() != 0 or day == date.min:
            return False
        return self._named_holiday(day - timedelta(days=1)) is not None

    def _is_national_holiday(self, day: date) -> bool:
        if day.weekday() >= 5 or self._named_holiday(day) is not None:
            return False
        if day in (date.min, date.max):
            return False
        return (
            self._named_holiday(day - timedelta(days=1)) is not None
            and self._named_holiday(day + timedelta(days=1)) is not None
        )


HOLIDAY_CALENDAR = HolidayCalendar()
