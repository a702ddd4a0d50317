"""Month grids and per-day item lookup for calendar views."""

from datetime import date, timedelta
from typing import Iterable, List, Optional

from .business_days import BUSINESS_DAY_CALENDAR, BusinessDayCalendar
from ..exceptions import InvalidDateError
from ..models.report import CalendarCell
from ..models.work_item import WorkItem
from ..utils.datetime_utils import (
    DateLike,
    check_year_month,
    days_in_month,
    iter_dates,
    sunday_based_weekday,
    to_date,
)

GRID_DAYS = 42  # six full weeks


class CalendarGridBuilder:
    """Builds fixed six-row month grids and answers 'what runs on this day'."""

    def __init__(self, business_calendar: Optional[BusinessDayCalendar] = None):
        self.business_calendar = business_calendar or BUSINESS_DAY_CALENDAR

    def build_month_grid(self, year: int, month: int) -> List[CalendarCell]:
        """42 cells starting on the Sunday on or before the 1st."""
        check_year_month(year, month)
        first = date(year, month, 1)
        try:
            start = first - timedelta(days=sunday_based_weekday(first))
            last = start + timedelta(days=GRID_DAYS - 1)
        except OverflowError:
            raise InvalidDateError((year, month), "grid extends past the supported date range") from None
        holidays = self.business_calendar.holiday_calendar

        cells = []
        for day in iter_dates(start, last):
            name = holidays.holiday_name(day)
            cells.append(CalendarCell(
                date=day,
                is_in_target_month=(day.year == year and day.month == month),
                is_holiday=name is not None,
                holiday_name=name,
                is_business_day=self.business_calendar.is_business_day(day),
            ))
        return cells

    def month_dates(self, year: int, month: int) -> List[date]:
        """Every date of the month, first to last."""
        return [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]

    def is_item_active_on_date(self, item: WorkItem, day: DateLike) -> bool:
        """True if the item's planned span covers the date (inclusive)."""
        if item.planned_start_date is None or item.planned_end_date is None:
            return False
        day = to_date(day)
        return item.planned_start_date <= day <= item.planned_end_date

    def items_active_on(
        self,
        items: Iterable[WorkItem],
        day: DateLike,
        project_id: Optional[str] = None,
        assignee_id: Optional[str] = None,
    ) -> List[WorkItem]:
        """Items running on the date, optionally narrowed to a project or assignee."""
        day = to_date(day)
        active = []
        for item in items:
            if project_id is not None and item.project_id != project_id:
                continue
            if assignee_id is not None and item.assignee_id != assignee_id:
                continue
            if self.is_item_active_on_date(item, day):
                active.append(item)
        return active
