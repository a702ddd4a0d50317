"""Delay classification, effort conversion and WBS aggregation."""

from .aggregator import ScheduleAggregator, filter_items_in_period, phase_group_key, resolve_phase
from .delay import DelayClassifier
from .effort import BUSINESS_DAYS_PER_MONTH_BASELINE, HOURS_PER_DAY, EffortUnitConverter

__all__ = [
    'BUSINESS_DAYS_PER_MONTH_BASELINE',
    'HOURS_PER_DAY',
    'DelayClassifier',
    'EffortUnitConverter',
    'ScheduleAggregator',
    'filter_items_in_period',
    'phase_group_key',
    'resolve_phase',
]
