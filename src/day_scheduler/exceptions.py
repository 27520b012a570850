"""Custom exceptions for the day_scheduler package."""

from __future__ import annotations

from datetime import datetime


class SchedulerError(Exception):
    """Base exception for all scheduler errors."""


class InvalidRangeError(SchedulerError, ValueError):
    """Raised when a time range does not end strictly after it starts."""

    def __init__(self, start: datetime | int, end: datetime | int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: end ({end}) must be after start ({start})")


class BlockIndexError(SchedulerError, IndexError):
    """Raised when a time block is looked up by a position outside the schedule."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Block index {index} out of range for schedule of {count} blocks")


class MalformedStorageError(SchedulerError):
    """Raised when persisted diary text cannot be parsed."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"Malformed diary data under key '{key}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreError(SchedulerError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class DiaryStorageWarning(UserWarning):
    """Emitted when stored diary data is skipped instead of loaded."""
