"""Work item and holiday data models."""

import math
from dataclasses import dataclass, fields
from datetime import date
from enum import Enum
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InvalidDateError, InvalidWorkItemError
from ..utils.datetime_utils import to_optional_date


class WorkStatus(str, Enum):
    """Lifecycle status of a WBS entry."""

    NOT_STARTED = 'NOT_STARTED'
    IN_PROGRESS = 'IN_PROGRESS'
    REVIEW_PENDING = 'REVIEW_PENDING'
    REVIEWED = 'REVIEWED'
    COMPLETED = 'COMPLETED'


ACTIVE_STATUSES = frozenset({
    WorkStatus.IN_PROGRESS,
    WorkStatus.REVIEW_PENDING,
    WorkStatus.REVIEWED,
})


@dataclass(frozen=True)
class FixedHoliday:
    """Holiday on the same month/day every year."""

    month: int
    day: int
    name: str


@dataclass(frozen=True)
class NthMondayHoliday:
    """Holiday on the Nth Monday of a month ("Happy Monday")."""

    month: int
    week: int
    name: str


_DATE_FIELDS = (
    'planned_start_date',
    'planned_end_date',
    'actual_start_date',
    'actual_end_date',
)


@dataclass(frozen=True)
class WorkItem:
    """A WBS entry as loaded by the caller.

    Dates are normalized to plain dates on construction; required fields are
    validated so that a malformed record fails here rather than skewing a
    rollup later.
    """

    id: str
    project_id: str
    status: WorkStatus
    name: str = ''
    project_name: Optional[str] = None
    phase_id: Optional[str] = None
    phase_name: Optional[str] = None
    task_phase_id: Optional[str] = None
    task_phase_name: Optional[str] = None
    assignee_id: Optional[str] = None
    assignee_name: Optional[str] = None
    planned_start_date: Optional[date] = None
    planned_end_date: Optional[date] = None
    actual_start_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    estimated_hours: float = 0.0
    actual_hours: float = 0.0

    def __post_init__(self):
        item_id = self.id if isinstance(self.id, str) else None
        for key in ('id', 'project_id'):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidWorkItemError(item_id, key, "must be a non-empty string")

        try:
            status = WorkStatus(self.status)
        except ValueError:
            raise InvalidWorkItemError(
                item_id, 'status', f"unknown status {self.status!r}"
            ) from None
        object.__setattr__(self, 'status', status)

        for key in ('estimated_hours', 'actual_hours'):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidWorkItemError(item_id, key, f"must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise InvalidWorkItemError(item_id, key, f"must be a finite number >= 0, got {value!r}")
            object.__setattr__(self, key, float(value))

        for key in _DATE_FIELDS:
            try:
                object.__setattr__(self, key, to_optional_date(getattr(self, key)))
            except InvalidDateError as exc:
                raise InvalidWorkItemError(item_id, key, exc.reason) from exc

    @property
    def is_completed(self) -> bool:
        return self.status == WorkStatus.COMPLETED

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WorkItem':
        """Build an item from a snake_case mapping; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise InvalidWorkItemError(None, '<record>', "must be a mapping")
        known = {f.name for f in fields(cls)}
        for key in ('id', 'project_id', 'status'):
            if data.get(key) is None:
                raise InvalidWorkItemError(data.get('id'), key, "is required")
        kwargs = {key: value for key, value in data.items() if key in known}
        for key in ('estimated_hours', 'actual_hours'):
            if kwargs.get(key) is None:
                kwargs.pop(key, None)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping with ISO dates, inverse of from_dict."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, WorkStatus):
                value = value.value
            result[f.name] = value
        return result
