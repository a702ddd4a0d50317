"""
tests/engine/test_delay.py

Covers:
  - Completed items: late, early, on schedule, no actual end
  - Open items: overdue, warning window edges, on track
  - Items without a planned end
  - Injected clock and the missing-clock error
  - Configurable warning window
"""

import logging
from datetime import date

import pytest

from wbs_engine.engine.delay import DelayClassifier
from wbs_engine.exceptions import InvalidWorkItemError, MissingClockError
from wbs_engine.models.report import DelayResult, DelayStatus
from wbs_engine.models.work_item import WorkStatus


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def classifier():
    return DelayClassifier()


TODAY = date(2024, 3, 20)


# ── Completed items ───────────────────────────────────────────────────────────

class TestCompleted:

    def test_finished_late(self, classifier, make_item):
        item = make_item(status=WorkStatus.COMPLETED,
                         planned_end_date='2024-03-10', actual_end_date='2024-03-15')
        assert classifier.classify(item, TODAY) == DelayResult(DelayStatus.DELAYED, 5)

    def test_finished_early(self, classifier, make_item):
        item = make_item(status=WorkStatus.COMPLETED,
                         planned_end_date='2024-03-10', actual_end_date='2024-03-07')
        result = classifier.classify(item, TODAY)
        assert result == DelayResult(DelayStatus.ON_TIME, 3)
        assert result.is_finished_early

    def test_finished_on_the_day(self, classifier, make_item):
        item = make_item(status=WorkStatus.COMPLETED,
                         planned_end_date='2024-03-10', actual_end_date='2024-03-10')
        result = classifier.classify(item, TODAY)
        assert result == DelayResult(DelayStatus.ON_TIME, 0)
        assert not result.is_finished_early

    def test_no_actual_end(self, classifier, make_item):
        item = make_item(status=WorkStatus.COMPLETED, planned_end_date='2024-03-10')
        assert classifier.classify(item, TODAY) == DelayResult(DelayStatus.ON_TIME, 0)

    def test_completed_ignores_today(self, make_item):
        item = make_item(status=WorkStatus.COMPLETED,
                         planned_end_date='2024-03-10', actual_end_date='2024-03-15')
        # No clock needed once the item is done
        assert DelayClassifier().classify(item).status == DelayStatus.DELAYED


# ── Open items ────────────────────────────────────────────────────────────────

class TestOpen:

    def test_overdue(self, classifier, make_item):
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-01')
        assert classifier.classify(item, date(2024, 3, 20)) == DelayResult(DelayStatus.OVERDUE, 19)

    def test_due_soon(self, classifier, make_item):
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        assert classifier.classify(item, date(2024, 3, 8)) == DelayResult(DelayStatus.WARNING, 2)

    @pytest.mark.parametrize("today, expected", [
        ('2024-03-11', DelayResult(DelayStatus.OVERDUE, 1)),
        ('2024-03-10', DelayResult(DelayStatus.WARNING, 0)),
        ('2024-03-07', DelayResult(DelayStatus.WARNING, 3)),
        ('2024-03-06', DelayResult(DelayStatus.ON_TRACK, 4)),
    ])
    def test_window_edges(self, classifier, make_item, today, expected):
        item = make_item(status=WorkStatus.REVIEW_PENDING, planned_end_date='2024-03-10')
        assert classifier.classify(item, today) == expected

    def test_not_started_is_classified_too(self, classifier, make_item):
        item = make_item(status=WorkStatus.NOT_STARTED, planned_end_date='2024-03-01')
        assert classifier.classify(item, TODAY).status == DelayStatus.OVERDUE

    def test_is_overdue(self, classifier, make_item):
        late_open = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-01')
        late_done = make_item(status=WorkStatus.COMPLETED,
                              planned_end_date='2024-03-01', actual_end_date='2024-03-02')
        on_track = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-04-30')
        assert classifier.is_overdue(late_open, TODAY)
        assert classifier.is_overdue(late_done, TODAY)
        assert not classifier.is_overdue(on_track, TODAY)

    def test_custom_warning_window(self, make_item):
        classifier = DelayClassifier({'delay': {'warning_window_days': 7}})
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        assert classifier.classify(item, '2024-03-04').status == DelayStatus.WARNING


# ── Edge cases ────────────────────────────────────────────────────────────────

class TestEdgeCases:

    @pytest.mark.parametrize("status", list(WorkStatus))
    def test_no_planned_end_is_unknown(self, classifier, make_item, status):
        item = make_item(status=status, actual_end_date='2024-03-15')
        assert classifier.classify(item, TODAY) == DelayResult(DelayStatus.UNKNOWN, 0)

    def test_idempotent(self, classifier, make_item):
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        assert classifier.classify(item, TODAY) == classifier.classify(item, TODAY)

    def test_clock_supplies_today(self, make_item):
        classifier = DelayClassifier(clock=lambda: date(2024, 3, 8))
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        assert classifier.classify(item) == DelayResult(DelayStatus.WARNING, 2)

    def test_explicit_today_wins_over_clock(self, make_item):
        classifier = DelayClassifier(clock=lambda: date(2024, 3, 8))
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        assert classifier.classify(item, '2024-03-20').status == DelayStatus.OVERDUE

    def test_clock_fallback_is_logged(self, make_item, caplog):
        classifier = DelayClassifier(clock=lambda: date(2024, 3, 8))
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        with caplog.at_level(logging.DEBUG, logger='wbs_engine.engine.delay'):
            classifier.classify(item)
        records = [r for r in caplog.records if r.name == 'wbs_engine.engine.delay']
        assert len(records) == 1
        assert records[0].today == date(2024, 3, 8)

    def test_explicit_today_is_not_logged(self, make_item, caplog):
        classifier = DelayClassifier(clock=lambda: date(2024, 3, 8))
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        with caplog.at_level(logging.DEBUG, logger='wbs_engine.engine.delay'):
            classifier.classify(item, TODAY)
        assert not [r for r in caplog.records if r.name == 'wbs_engine.engine.delay']

    def test_missing_clock(self, classifier, make_item):
        item = make_item(status=WorkStatus.IN_PROGRESS, planned_end_date='2024-03-10')
        with pytest.raises(MissingClockError) as exc_info:
            classifier.classify(item)
        assert exc_info.value.code == 'MISSING_CLOCK'

    def test_rejects_non_items(self, classifier):
        with pytest.raises(InvalidWorkItemError):
            classifier.classify({'id': 'x'}, TODAY)
