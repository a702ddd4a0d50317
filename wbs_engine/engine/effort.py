"""Effort unit conversion: hours, person-days and person-months."""

import math
from typing import Optional

from ..calendar.business_days import BUSINESS_DAY_CALENDAR, BusinessDayCalendar
from ..exceptions import InvalidEffortError
from ..utils.rounding import round_half_up

HOURS_PER_DAY = 7.5
BUSINESS_DAYS_PER_MONTH_BASELINE = 20


def _check_hours(hours: float) -> float:
    if isinstance(hours, bool) or not isinstance(hours, (int, float)):
        raise InvalidEffortError(hours, "must be a number")
    if not math.isfinite(hours) or hours < 0:
        raise InvalidEffortError(hours, "must be a finite number >= 0")
    return float(hours)


class EffortUnitConverter:
    """Converts effort hours into person-day and person-month units.

    Person-months shown to users divide by a fixed 20-day month. Expected
    hours for a concrete month use that month's real business-day count.
    The two baselines answer different questions and stay separate.
    """

    def __init__(self, business_calendar: Optional[BusinessDayCalendar] = None):
        self.business_calendar = business_calendar or BUSINESS_DAY_CALENDAR

    def hours_to_person_days(self, hours: float) -> float:
        return _check_hours(hours) / HOURS_PER_DAY

    def hours_to_person_months(self, hours: float) -> float:
        return self.hours_to_person_days(hours) / BUSINESS_DAYS_PER_MONTH_BASELINE

    def expected_hours_for_month(self, year: int, month: int) -> float:
        """Full-time hours for the month: business days x hours per day."""
        return self.business_calendar.business_days_in_month(year, month) * HOURS_PER_DAY

    def monthly_progress(self, actual_hours: float, year: int, month: int) -> float:
        """Booked hours as a percentage of the month's expected hours."""
        actual_hours = _check_hours(actual_hours)
        expected = self.expected_hours_for_month(year, month)
        if expected == 0:
            return 0.0
        return actual_hours / expected * 100

    def item_progress(self, estimated_hours: float, actual_hours: float) -> int:
        """Hours-based progress of one item, capped at 100 percent."""
        estimated_hours = _check_hours(estimated_hours)
        actual_hours = _check_hours(actual_hours)
        if estimated_hours == 0:
            return 0
        return round_half_up(min(actual_hours / estimated_hours * 100, 100))

    def format_person_days(self, hours: float) -> str:
        return f"{self.hours_to_person_days(hours):.2f}人日"

    def format_person_months(self, hours: float) -> str:
        return f"{self.hours_to_person_months(hours):.3f}人月"

    def format_hours_and_person_days(self, hours: float) -> str:
        return f"{_check_hours(hours):.1f}h ({self.format_person_days(hours)})"

    def format_hours_and_person_months(self, hours: float) -> str:
        return f"{_check_hours(hours):.1f}h ({self.format_person_months(hours)})"
