"""Data models."""

from .work_item import (
    ACTIVE_STATUSES,
    FixedHoliday,
    NthMondayHoliday,
    WorkItem,
    WorkStatus,
)
from .report import (
    AssigneeWorkloadReport,
    CalendarCell,
    DelayResult,
    DelayStatus,
    PhaseRollup,
    ProjectRollup,
    RollupStatus,
    ScheduleReport,
    WorkloadLevel,
)

__all__ = [
    'ACTIVE_STATUSES',
    'AssigneeWorkloadReport',
    'CalendarCell',
    'DelayResult',
    'DelayStatus',
    'FixedHoliday',
    'NthMondayHoliday',
    'PhaseRollup',
    'ProjectRollup',
    'RollupStatus',
    'ScheduleReport',
    'WorkItem',
    'WorkStatus',
    'WorkloadLevel',
]
