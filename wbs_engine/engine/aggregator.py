"""WBS rollups: project/phase delay and progress, assignee workload."""

from typing import Dict, Iterable, List, Optional, Tuple

from .delay import DelayClassifier
from .effort import EffortUnitConverter
from ..exceptions import InvalidWorkItemError
from ..models.report import (
    AssigneeWorkloadReport,
    DelayResult,
    DelayStatus,
    PhaseRollup,
    ProjectRollup,
    RollupStatus,
    ScheduleReport,
    WorkloadLevel,
)
from ..models.work_item import WorkItem, WorkStatus
from ..utils.datetime_utils import DateLike, to_date
from ..utils.logging_config import get_logger
from ..utils.rounding import percentage

logger = get_logger("engine.aggregator")

NO_PHASE_KEY = 'no-phase'
NO_PHASE_NAME = 'フェーズ未設定'
UNNAMED_PHASE_NAME = 'フェーズ名未設定'
UNNAMED_PROJECT_NAME = '未分類'


def resolve_phase(item: WorkItem) -> Tuple[str, str]:
    """Phase key and display name, from whichever association is populated.

    Precedence: own phase id, linked task's phase id, own phase name,
    linked task's phase name, then the shared no-phase bucket.
    """
    if item.phase_id:
        return item.phase_id, item.phase_name or UNNAMED_PHASE_NAME
    if item.task_phase_id:
        return item.task_phase_id, item.task_phase_name or UNNAMED_PHASE_NAME
    if item.phase_name:
        return item.phase_name, item.phase_name
    if item.task_phase_name:
        return item.task_phase_name, item.task_phase_name
    return NO_PHASE_KEY, NO_PHASE_NAME


def phase_group_key(item: WorkItem) -> Tuple[str, str]:
    """Grouping key that keeps phase ids, phase names and the no-phase bucket apart.

    A phase named like another phase's id, or literally "no-phase", still
    gets its own bucket.
    """
    if item.phase_id or item.task_phase_id:
        return 'id', item.phase_id or item.task_phase_id
    if item.phase_name or item.task_phase_name:
        return 'name', item.phase_name or item.task_phase_name
    return '', NO_PHASE_KEY


def delay_contribution(item: WorkItem, result: DelayResult) -> int:
    """Signed days an item adds to its phase total; early finishes count negative."""
    if result.status in (DelayStatus.DELAYED, DelayStatus.OVERDUE):
        return result.days
    if result.is_finished_early and item.is_completed:
        return -result.days
    return 0


def filter_items_in_period(items: Iterable[WorkItem], start: DateLike, end: DateLike) -> List[WorkItem]:
    """Items whose planned start or planned end falls within [start, end]."""
    start = to_date(start)
    end = to_date(end)
    selected = []
    for item in items:
        for day in (item.planned_start_date, item.planned_end_date):
            if day is not None and start <= day <= end:
                selected.append(item)
                break
    return selected


class ScheduleAggregator:
    """Groups work items into project/phase rollups and assignee workloads."""

    def __init__(
        self,
        config: Optional[dict] = None,
        classifier: Optional[DelayClassifier] = None,
        converter: Optional[EffortUnitConverter] = None,
    ):
        """Initialize aggregator with configuration and collaborators."""
        self.config = config or {}
        self.classifier = classifier or DelayClassifier(self.config)
        self.converter = converter or EffortUnitConverter()
        workload_config = self.config.get('workload', {})
        self.normal_max = workload_config.get('normal_max', 3)
        self.high_max = workload_config.get('high_max', 6)

    def aggregate(self, items: Iterable[WorkItem], today: Optional[DateLike] = None) -> ScheduleReport:
        """Build project rollups and assignee reports for the items."""
        items = self._validated(items)
        today = self.classifier.resolve_today(today)
        results = [self.classifier.classify(item, today) for item in items]

        projects = self.rollup_projects(items, results)
        assignees = self.workload_reports(items, results)

        logger.debug(
            "aggregated work items",
            extra={
                'item_count': len(items),
                'project_count': len(projects),
                'assignee_count': len(assignees),
                'as_of': today,
            },
        )
        return ScheduleReport(as_of=today, projects=projects, assignees=assignees)

    def aggregate_workload(
        self,
        items: Iterable[WorkItem],
        today: Optional[DateLike] = None,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> List[AssigneeWorkloadReport]:
        """Assignee workload, limited to a planning period when one is given."""
        items = self._validated(items)
        if start is not None and end is not None:
            items = filter_items_in_period(items, start, end)
        today = self.classifier.resolve_today(today)
        results = [self.classifier.classify(item, today) for item in items]
        return self.workload_reports(items, results)

    def rollup_projects(self, items: List[WorkItem], results: List[DelayResult]) -> List[ProjectRollup]:
        """Project -> phase hierarchy with delay totals and progress."""
        projects: Dict[str, ProjectRollup] = {}
        phases: Dict[str, Dict[Tuple[str, str], PhaseRollup]] = {}
        phase_results: Dict[Tuple[str, Tuple[str, str]], List[DelayResult]] = {}

        for item, result in zip(items, results):
            project = projects.get(item.project_id)
            if project is None:
                project = ProjectRollup(
                    key=item.project_id,
                    name=item.project_name or UNNAMED_PROJECT_NAME,
                )
                projects[item.project_id] = project
                phases[item.project_id] = {}
            project.items.append(item)

            group_key = phase_group_key(item)
            phase = phases[item.project_id].get(group_key)
            if phase is None:
                phase_key, phase_name = resolve_phase(item)
                phase = PhaseRollup(key=phase_key, name=phase_name)
                phases[item.project_id][group_key] = phase
                phase_results[(item.project_id, group_key)] = []
            phase.items.append(item)
            phase_results[(item.project_id, group_key)].append(result)

        for project_id, project in projects.items():
            project_total = 0
            project_results: List[DelayResult] = []
            for group_key, phase in phases[project_id].items():
                rollup_results = phase_results[(project_id, group_key)]
                phase.total_delay_days = sum(
                    delay_contribution(item, result)
                    for item, result in zip(phase.items, rollup_results)
                )
                phase.delay_status = RollupStatus.from_total(phase.total_delay_days)
                self._fill_progress(phase, rollup_results)
                project_total += phase.total_delay_days
                project_results.extend(rollup_results)
                project.phases.append(phase)

            project.total_delay_days = project_total
            project.delay_status = RollupStatus.from_total(project_total)
            self._fill_progress(project, project_results)

        return list(projects.values())

    def workload_reports(self, items: List[WorkItem], results: List[DelayResult]) -> List[AssigneeWorkloadReport]:
        """One report per assignee; unassigned items are skipped."""
        reports: Dict[str, AssigneeWorkloadReport] = {}

        for item, result in zip(items, results):
            if not item.assignee_id:
                continue
            report = reports.get(item.assignee_id)
            if report is None:
                report = AssigneeWorkloadReport(
                    assignee_id=item.assignee_id,
                    assignee_name=item.assignee_name or item.assignee_id,
                )
                reports[item.assignee_id] = report
            elif report.assignee_name == report.assignee_id and item.assignee_name:
                report.assignee_name = item.assignee_name

            if item.is_active:
                report.active_count += 1
            if item.is_completed:
                report.completed_count += 1
            if result.status in (DelayStatus.DELAYED, DelayStatus.OVERDUE):
                report.overdue_count += 1
            report.estimated_hours += item.estimated_hours
            report.actual_hours += item.actual_hours

        for report in reports.values():
            report.efficiency = (
                report.actual_hours / report.estimated_hours if report.estimated_hours > 0 else 0.0
            )
            report.workload_level = self.workload_level(report.active_count)
            report.actual_person_days = self.converter.hours_to_person_days(report.actual_hours)

        return list(reports.values())

    def workload_level(self, active_count: int) -> WorkloadLevel:
        if active_count == 0:
            return WorkloadLevel.LOW
        if active_count <= self.normal_max:
            return WorkloadLevel.NORMAL
        if active_count <= self.high_max:
            return WorkloadLevel.HIGH
        return WorkloadLevel.OVERLOAD

    def progress_percentage(self, completed_count: int, total_count: int) -> int:
        return percentage(completed_count, total_count)

    def _fill_progress(
        self,
        rollup: PhaseRollup,
        results: List[DelayResult],
    ) -> None:
        items = rollup.items
        rollup.total_count = len(items)
        rollup.completed_count = sum(1 for item in items if item.status == WorkStatus.COMPLETED)
        rollup.in_progress_count = sum(1 for item in items if item.status == WorkStatus.IN_PROGRESS)
        rollup.not_started_count = sum(1 for item in items if item.status == WorkStatus.NOT_STARTED)
        rollup.overdue_count = sum(1 for result in results if result.status == DelayStatus.OVERDUE)
        rollup.progress_percentage = self.progress_percentage(rollup.completed_count, rollup.total_count)
        rollup.estimated_hours = sum(item.estimated_hours for item in items)
        rollup.actual_hours = sum(item.actual_hours for item in items)
        rollup.actual_person_days = self.converter.hours_to_person_days(rollup.actual_hours)

    def _validated(self, items: Iterable[WorkItem]) -> List[WorkItem]:
        items = list(items)
        for index, item in enumerate(items):
            if not isinstance(item, WorkItem):
                raise InvalidWorkItemError(
                    None, f'items[{index}]', f"expected WorkItem, got {type(item).__name__}"
                )
        return items
