"""Utility functions."""

from .config import load_config, get_default_config, merge_config, resolve_config
from .datetime_utils import get_working_days, is_working_day, to_date, days_between
from .logging_config import get_logger, configure_logging
from .rounding import percentage, round_half_up

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'resolve_config',
    'get_working_days',
    'is_working_day',
    'to_date',
    'days_between',
    'get_logger',
    'configure_logging',
    'percentage',
    'round_half_up',
]
