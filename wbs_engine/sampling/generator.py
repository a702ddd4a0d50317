"""Sample WBS generator for demos and the CLI."""

import random
from datetime import date, timedelta
from typing import List, Optional

from ..calendar.business_days import BUSINESS_DAY_CALENDAR, BusinessDayCalendar
from ..engine.effort import HOURS_PER_DAY
from ..models.work_item import WorkItem, WorkStatus
from ..utils.datetime_utils import DateLike, to_date


class WorkItemGenerator:
    """Generates deterministic WBS item sets around a reference date."""

    def __init__(
        self,
        seed: int = 42,
        config: Optional[dict] = None,
        business_calendar: Optional[BusinessDayCalendar] = None,
    ):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.sampling_config = self.config.get('sampling', {})
        self.business_calendar = business_calendar or BUSINESS_DAY_CALENDAR

    def generate_items(
        self,
        today: DateLike,
        count: Optional[int] = None,
        project_count: Optional[int] = None,
        assignee_count: Optional[int] = None,
    ) -> List[WorkItem]:
        """Generate items spread over projects, phases and assignees."""
        today = to_date(today)
        count = count or self.sampling_config.get('item_count', 30)
        project_count = project_count or self.sampling_config.get('project_count', 2)
        assignee_count = assignee_count or self.sampling_config.get('assignee_count', 4)
        phases = ['要件定義', '設計', '実装', 'テスト']
        items = []

        for i in range(count):
            project_index = self.random.randrange(project_count)
            phase_index = self.random.randrange(len(phases))

            # Vary item sizes (some small, some large)
            if self.random.random() < 0.3:
                estimated_hours = float(self.random.randint(2, 8))
            elif self.random.random() < 0.7:
                estimated_hours = float(self.random.randint(8, 40))
            else:
                estimated_hours = float(self.random.randint(40, 120))

            planned_start = today + timedelta(days=self.random.randint(-30, 20))
            duration_days = max(1, int(estimated_hours / HOURS_PER_DAY))
            planned_end = self._add_business_days(planned_start, duration_days)

            status = self._pick_status(planned_start, planned_end, today)
            actual_start = planned_start if status != WorkStatus.NOT_STARTED else None
            actual_end = None
            actual_hours = 0.0
            if status == WorkStatus.COMPLETED:
                actual_end = planned_end + timedelta(days=self.random.randint(-3, 5))
                actual_hours = round(estimated_hours * self.random.uniform(0.7, 1.5), 1)
            elif actual_start is not None:
                actual_hours = round(estimated_hours * self.random.uniform(0.1, 0.9), 1)

            assignee_id = None
            assignee_name = None
            if self.random.random() < 0.9:
                assignee_index = self.random.randrange(assignee_count)
                assignee_id = f"user_{assignee_index:02d}"
                assignee_name = f"User {assignee_index}"

            items.append(WorkItem(
                id=f"wbs_{i:03d}",
                name=f"Work item {i}",
                project_id=f"project_{project_index:02d}",
                project_name=f"Project {project_index}",
                phase_id=f"project_{project_index:02d}_phase_{phase_index}",
                phase_name=phases[phase_index],
                assignee_id=assignee_id,
                assignee_name=assignee_name,
                status=status,
                planned_start_date=planned_start,
                planned_end_date=planned_end,
                actual_start_date=actual_start,
                actual_end_date=actual_end,
                estimated_hours=estimated_hours,
                actual_hours=actual_hours,
            ))

        return items

    def _pick_status(self, planned_start: date, planned_end: date, today: date) -> WorkStatus:
        if planned_start > today:
            return WorkStatus.NOT_STARTED if self.random.random() < 0.9 else WorkStatus.IN_PROGRESS
        if planned_end < today and self.random.random() < 0.7:
            return WorkStatus.COMPLETED
        return self.random.choice([
            WorkStatus.IN_PROGRESS,
            WorkStatus.REVIEW_PENDING,
            WorkStatus.REVIEWED,
            WorkStatus.NOT_STARTED,
        ])

    def _add_business_days(self, start: date, days: int) -> date:
        current = start
        remaining = days
        while remaining > 0:
            current += timedelta(days=1)
            if self.business_calendar.is_business_day(current):
                remaining -= 1
        return current
