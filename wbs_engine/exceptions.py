"""Typed exceptions for the WBS engine.

Every error carries a machine-readable ``code`` plus the structured fields
that caused it, so callers catch by type instead of matching messages.

    ScheduleEngineError (base)
    +-- InvalidDateError
    +-- InvalidWorkItemError
    +-- InvalidEffortError
    +-- MissingClockError
    +-- ConfigError
"""

from typing import Any, Optional


class ScheduleEngineError(Exception):
    """Base class for all engine errors."""

    code: str = "ENGINE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDateError(ScheduleEngineError):
    """A calendar date (or year/month pair) could not be interpreted."""

    code: str = "INVALID_DATE"

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")


class InvalidWorkItemError(ScheduleEngineError):
    """A work item is missing a required field or carries a malformed one."""

    code: str = "INVALID_WORK_ITEM"

    def __init__(self, item_id: Optional[str], field: str, reason: str):
        self.item_id = item_id
        self.field = field
        self.reason = reason
        super().__init__(f"Work item {item_id!r}: field '{field}' {reason}")


class InvalidEffortError(ScheduleEngineError):
    """An effort figure (hours) is negative, non-finite or not a number."""

    code: str = "INVALID_EFFORT"

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid hours {value!r}: {reason}")


class MissingClockError(ScheduleEngineError):
    """Delay classification needs today's date but none was supplied."""

    code: str = "MISSING_CLOCK"

    def __init__(self):
        super().__init__("No 'today' given and no clock configured")


class ConfigError(ScheduleEngineError):
    """Configuration file could not be loaded."""

    code: str = "CONFIG_ERROR"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Config {path}: {reason}")
