"""Shared fixtures for the WBS engine tests."""

import pytest

from wbs_engine.models.work_item import WorkItem, WorkStatus
from wbs_engine.utils.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Each test starts with an unconfigured wbs_engine logger."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def make_item():
    """Factory for work items with sensible defaults."""
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        fields = {
            'id': f"item_{counter['n']:03d}",
            'project_id': 'project_a',
            'project_name': 'Project A',
            'status': WorkStatus.NOT_STARTED,
        }
        fields.update(overrides)
        return WorkItem(**fields)

    return _make
