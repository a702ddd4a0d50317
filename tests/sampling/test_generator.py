"""
tests/sampling/test_generator.py

Covers:
  - Deterministic output per seed
  - Counts taken from arguments or the sampling config
  - Generated items are valid and schedule-consistent
"""

from datetime import date

from wbs_engine.calendar.business_days import BUSINESS_DAY_CALENDAR
from wbs_engine.models.work_item import WorkStatus
from wbs_engine.sampling.generator import WorkItemGenerator


TODAY = date(2024, 3, 20)


class TestWorkItemGenerator:

    def test_same_seed_same_items(self):
        first = WorkItemGenerator(seed=7).generate_items(TODAY, count=10)
        second = WorkItemGenerator(seed=7).generate_items(TODAY, count=10)
        assert first == second

    def test_different_seed_differs(self):
        first = WorkItemGenerator(seed=1).generate_items(TODAY, count=10)
        second = WorkItemGenerator(seed=2).generate_items(TODAY, count=10)
        assert first != second

    def test_counts_from_config(self):
        config = {'sampling': {'item_count': 8, 'project_count': 1, 'assignee_count': 2}}
        items = WorkItemGenerator(config=config).generate_items(TODAY)
        assert len(items) == 8
        assert {item.project_id for item in items} == {'project_00'}
        assert {item.assignee_id for item in items} <= {None, 'user_00', 'user_01'}

    def test_items_are_consistent(self):
        items = WorkItemGenerator().generate_items(TODAY, count=40)
        assert len({item.id for item in items}) == 40
        for item in items:
            assert item.planned_start_date < item.planned_end_date
            assert BUSINESS_DAY_CALENDAR.is_business_day(item.planned_end_date)
            if item.status == WorkStatus.NOT_STARTED:
                assert item.actual_start_date is None
                assert item.actual_hours == 0.0
            if item.status == WorkStatus.COMPLETED:
                assert item.actual_end_date is not None
            else:
                assert item.actual_end_date is None
