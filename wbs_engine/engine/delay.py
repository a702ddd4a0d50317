"""Per-item delay classification."""

from datetime import date
from typing import Callable, Optional

from ..exceptions import InvalidWorkItemError, MissingClockError
from ..models.report import DelayResult, DelayStatus
from ..models.work_item import WorkItem
from ..utils.datetime_utils import DateLike, days_between, to_date
from ..utils.logging_config import get_logger

logger = get_logger("engine.delay")

DEFAULT_WARNING_WINDOW_DAYS = 3


class DelayClassifier:
    """Classifies a work item as delayed, overdue, due soon or on track.

    Completed items compare actual end to planned end; open items compare
    today to planned end. ``on-time`` covers finishing on schedule, finishing
    early (days > 0) and completed items without an actual end date.
    """

    def __init__(
        self,
        config: Optional[dict] = None,
        clock: Optional[Callable[[], DateLike]] = None,
    ):
        """Initialize with configuration and an optional clock for 'today'."""
        self.config = config or {}
        self.warning_window_days = self.config.get('delay', {}).get(
            'warning_window_days', DEFAULT_WARNING_WINDOW_DAYS
        )
        self.clock = clock

    def resolve_today(self, today: Optional[DateLike] = None) -> date:
        if today is not None:
            return to_date(today)
        if self.clock is None:
            raise MissingClockError()
        today = to_date(self.clock())
        logger.debug("no today given, using clock", extra={'today': today})
        return today

    def classify(self, item: WorkItem, today: Optional[DateLike] = None) -> DelayResult:
        """Classify one item against today's date."""
        if not isinstance(item, WorkItem):
            raise InvalidWorkItemError(None, '<item>', f"expected WorkItem, got {type(item).__name__}")

        if item.planned_end_date is None:
            return DelayResult(DelayStatus.UNKNOWN, 0)

        if item.is_completed:
            if item.actual_end_date is None:
                return DelayResult(DelayStatus.ON_TIME, 0)
            diff = days_between(item.planned_end_date, item.actual_end_date)
            if diff > 0:
                return DelayResult(DelayStatus.DELAYED, diff)
            return DelayResult(DelayStatus.ON_TIME, abs(diff))

        diff = days_between(item.planned_end_date, self.resolve_today(today))
        if diff > 0:
            return DelayResult(DelayStatus.OVERDUE, diff)
        if diff >= -self.warning_window_days:
            return DelayResult(DelayStatus.WARNING, abs(diff))
        return DelayResult(DelayStatus.ON_TRACK, abs(diff))

    def is_overdue(self, item: WorkItem, today: Optional[DateLike] = None) -> bool:
        """Late in either sense: finished after plan, or still open past plan."""
        return self.classify(item, today).status in (DelayStatus.DELAYED, DelayStatus.OVERDUE)
