"""
tests/models/test_work_item.py

Covers:
  - Date normalization on construction
  - Required-field and hour validation
  - from_dict / to_dict
  - Report model helpers
"""

from datetime import date, datetime

import pytest

from wbs_engine.exceptions import InvalidWorkItemError
from wbs_engine.models.report import DelayResult, DelayStatus, PhaseRollup, ProjectRollup, RollupStatus
from wbs_engine.models.work_item import WorkItem, WorkStatus


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_dates_are_normalized(self, make_item):
        item = make_item(
            planned_start_date='2024-03-01',
            planned_end_date=datetime(2024, 3, 10, 18, 0),
            actual_start_date=date(2024, 3, 2),
            actual_end_date='',
        )
        assert item.planned_start_date == date(2024, 3, 1)
        assert item.planned_end_date == date(2024, 3, 10)
        assert item.actual_start_date == date(2024, 3, 2)
        assert item.actual_end_date is None

    def test_status_from_string(self, make_item):
        assert make_item(status='IN_PROGRESS').status is WorkStatus.IN_PROGRESS

    def test_hours_become_floats(self, make_item):
        item = make_item(estimated_hours=8, actual_hours=0)
        assert item.estimated_hours == 8.0
        assert isinstance(item.estimated_hours, float)

    def test_active_and_completed(self, make_item):
        assert make_item(status=WorkStatus.REVIEWED).is_active
        assert not make_item(status=WorkStatus.NOT_STARTED).is_active
        assert make_item(status=WorkStatus.COMPLETED).is_completed

    @pytest.mark.parametrize("overrides, field", [
        ({'id': ''}, 'id'),
        ({'id': 12}, 'id'),
        ({'project_id': '  '}, 'project_id'),
        ({'status': 'DONE'}, 'status'),
        ({'estimated_hours': -1}, 'estimated_hours'),
        ({'actual_hours': '3'}, 'actual_hours'),
        ({'actual_hours': float('nan')}, 'actual_hours'),
        ({'estimated_hours': float('inf')}, 'estimated_hours'),
        ({'actual_hours': float('-inf')}, 'actual_hours'),
        ({'estimated_hours': True}, 'estimated_hours'),
        ({'planned_end_date': '2024-02-30'}, 'planned_end_date'),
        ({'actual_start_date': 20240301}, 'actual_start_date'),
    ])
    def test_invalid_fields(self, make_item, overrides, field):
        with pytest.raises(InvalidWorkItemError) as exc_info:
            make_item(**overrides)
        assert exc_info.value.field == field
        assert exc_info.value.code == 'INVALID_WORK_ITEM'

    def test_frozen(self, make_item):
        item = make_item()
        with pytest.raises(AttributeError):
            item.status = WorkStatus.COMPLETED


# ── Mapping conversion ────────────────────────────────────────────────────────

class TestFromDict:

    def test_minimal(self):
        item = WorkItem.from_dict({'id': 'w1', 'project_id': 'p1', 'status': 'NOT_STARTED'})
        assert item.id == 'w1'
        assert item.estimated_hours == 0.0
        assert item.assignee_id is None

    def test_unknown_keys_are_ignored(self):
        item = WorkItem.from_dict({
            'id': 'w1', 'project_id': 'p1', 'status': 'COMPLETED', 'color': 'red',
        })
        assert item.is_completed

    def test_null_hours_mean_zero(self):
        item = WorkItem.from_dict({
            'id': 'w1', 'project_id': 'p1', 'status': 'COMPLETED',
            'estimated_hours': None, 'actual_hours': None,
        })
        assert item.actual_hours == 0.0

    @pytest.mark.parametrize("missing", ['id', 'project_id', 'status'])
    def test_required_keys(self, missing):
        record = {'id': 'w1', 'project_id': 'p1', 'status': 'COMPLETED'}
        del record[missing]
        with pytest.raises(InvalidWorkItemError) as exc_info:
            WorkItem.from_dict(record)
        assert exc_info.value.field == missing

    def test_not_a_mapping(self):
        with pytest.raises(InvalidWorkItemError):
            WorkItem.from_dict(['w1'])

    def test_to_dict_reverses_from_dict(self, make_item):
        item = make_item(
            status=WorkStatus.IN_PROGRESS,
            phase_name='設計',
            planned_start_date='2024-03-01',
            planned_end_date='2024-03-10',
            estimated_hours=16,
        )
        data = item.to_dict()
        assert data['status'] == 'IN_PROGRESS'
        assert data['planned_end_date'] == '2024-03-10'
        assert WorkItem.from_dict(data) == item


# ── Report models ─────────────────────────────────────────────────────────────

class TestReportModels:

    @pytest.mark.parametrize("total, status", [
        (5, RollupStatus.DELAYED),
        (0, RollupStatus.ON_TIME),
        (-2, RollupStatus.AHEAD),
    ])
    def test_rollup_status(self, total, status):
        assert RollupStatus.from_total(total) == status

    def test_finished_early(self):
        assert DelayResult(DelayStatus.ON_TIME, 2).is_finished_early
        assert not DelayResult(DelayStatus.ON_TIME, 0).is_finished_early
        assert not DelayResult(DelayStatus.ON_TRACK, 5).is_finished_early

    def test_project_to_dict_nests_phases(self, make_item):
        phase = PhaseRollup(key='p1', name='設計', items=[make_item(id='w1')])
        project = ProjectRollup(key='project_a', name='Project A', phases=[phase])
        data = project.to_dict()
        assert data['phases'][0]['item_ids'] == ['w1']
        assert data['delay_status'] == 'on-time'
