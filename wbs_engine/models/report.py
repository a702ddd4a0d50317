"""Derived report models: delay results, rollups and workload."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from .work_item import WorkItem
from ..utils.rounding import percentage


class DelayStatus(str, Enum):
    """Per-item schedule classification."""

    UNKNOWN = 'unknown'
    ON_TIME = 'on-time'
    DELAYED = 'delayed'
    OVERDUE = 'overdue'
    WARNING = 'warning'
    ON_TRACK = 'on-track'


class RollupStatus(str, Enum):
    """Phase/project delay classification."""

    ON_TIME = 'on-time'
    AHEAD = 'ahead'
    DELAYED = 'delayed'

    @classmethod
    def from_total(cls, total_delay_days: int) -> 'RollupStatus':
        if total_delay_days > 0:
            return cls.DELAYED
        if total_delay_days < 0:
            return cls.AHEAD
        return cls.ON_TIME


class WorkloadLevel(str, Enum):
    """Assignee load bucket by number of active items."""

    LOW = 'LOW'
    NORMAL = 'NORMAL'
    HIGH = 'HIGH'
    OVERLOAD = 'OVERLOAD'


@dataclass(frozen=True)
class DelayResult:
    """Delay classification of one work item."""

    status: DelayStatus
    days: int = 0

    @property
    def is_finished_early(self) -> bool:
        """Completed on-time result that carries a positive day count."""
        return self.status == DelayStatus.ON_TIME and self.days > 0


@dataclass
class PhaseRollup:
    """Items of one project phase with their delay and progress totals."""

    key: str
    name: str
    items: List[WorkItem] = field(default_factory=list)
    total_delay_days: int = 0
    delay_status: RollupStatus = RollupStatus.ON_TIME
    total_count: int = 0
    completed_count: int = 0
    in_progress_count: int = 0
    not_started_count: int = 0
    overdue_count: int = 0
    progress_percentage: int = 0
    estimated_hours: float = 0.0
    actual_hours: float = 0.0
    actual_person_days: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'name': self.name,
            'item_ids': [item.id for item in self.items],
            'total_delay_days': self.total_delay_days,
            'delay_status': self.delay_status.value,
            'total_count': self.total_count,
            'completed_count': self.completed_count,
            'in_progress_count': self.in_progress_count,
            'not_started_count': self.not_started_count,
            'overdue_count': self.overdue_count,
            'progress_percentage': self.progress_percentage,
            'estimated_hours': self.estimated_hours,
            'actual_hours': self.actual_hours,
            'actual_person_days': round(self.actual_person_days, 2),
        }


@dataclass
class ProjectRollup(PhaseRollup):
    """A project with its phase rollups."""

    phases: List[PhaseRollup] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['phases'] = [phase.to_dict() for phase in self.phases]
        return result


@dataclass
class AssigneeWorkloadReport:
    """Workload and efficiency of a single assignee."""

    assignee_id: str
    assignee_name: str
    active_count: int = 0
    completed_count: int = 0
    overdue_count: int = 0
    estimated_hours: float = 0.0
    actual_hours: float = 0.0
    efficiency: float = 0.0
    workload_level: WorkloadLevel = WorkloadLevel.LOW
    actual_person_days: float = 0.0

    @property
    def efficiency_display(self) -> float:
        return round(self.efficiency, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'assignee_id': self.assignee_id,
            'assignee_name': self.assignee_name,
            'active_count': self.active_count,
            'completed_count': self.completed_count,
            'overdue_count': self.overdue_count,
            'estimated_hours': self.estimated_hours,
            'actual_hours': self.actual_hours,
            'efficiency': self.efficiency_display,
            'workload_level': self.workload_level.value,
            'actual_person_days': round(self.actual_person_days, 2),
        }


@dataclass(frozen=True)
class CalendarCell:
    """One day of a month grid, with display-only holiday annotations."""

    date: date
    is_in_target_month: bool
    is_holiday: bool = False
    holiday_name: Optional[str] = None
    is_business_day: bool = False


@dataclass
class ScheduleReport:
    """Result of one aggregation run."""

    as_of: date
    projects: List[ProjectRollup]
    assignees: List[AssigneeWorkloadReport]

    def overall(self) -> Dict[str, int]:
        """Dashboard totals across all projects."""
        total = sum(p.total_count for p in self.projects)
        completed = sum(p.completed_count for p in self.projects)
        return {
            'total_count': total,
            'completed_count': completed,
            'in_progress_count': sum(p.in_progress_count for p in self.projects),
            'overdue_count': sum(p.overdue_count for p in self.projects),
            'progress_percentage': percentage(completed, total),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        return {
            'as_of': self.as_of.isoformat(),
            'overall': self.overall(),
            'projects': [p.to_dict() for p in self.projects],
            'assignees': [a.to_dict() for a in self.assignees],
        }

    def to_human_readable(self) -> str:
        """Generate human-readable report."""
        lines = [
            f"=== WBS Report as of {self.as_of.isoformat()} ===",
            "",
            "Overall:",
        ]

        for key, value in self.overall().items():
            lines.append(f"  {key}: {value}")

        lines.extend([
            "",
            "Projects:",
        ])

        for project in self.projects:
            lines.append(
                f"  {project.name} [{project.key}]: {project.progress_percentage}% done, "
                f"{_describe_delay(project)}, overdue {project.overdue_count}"
            )
            for phase in project.phases:
                lines.append(
                    f"    {phase.name}: {phase.completed_count}/{phase.total_count} done, "
                    f"{_describe_delay(phase)}"
                )

        lines.extend([
            "",
            "Assignees:",
        ])

        for report in self.assignees:
            lines.append(
                f"  {report.assignee_name}: {report.workload_level.value} "
                f"(active {report.active_count}, completed {report.completed_count}, "
                f"overdue {report.overdue_count}, efficiency {report.efficiency_display:.2f})"
            )

        lines.append("=" * 50)

        return "\n".join(lines)


def _describe_delay(rollup: PhaseRollup) -> str:
    if rollup.delay_status == RollupStatus.DELAYED:
        return f"{rollup.total_delay_days} days delayed"
    if rollup.delay_status == RollupStatus.AHEAD:
        return f"{abs(rollup.total_delay_days)} days ahead"
    return "on time"
