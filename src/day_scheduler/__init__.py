"""day_scheduler — hour-by-hour day planner model.

A day is split into one-hour time blocks, each carrying a note.  Blocks
are judged past, present or future against an injectable clock, and the
diary of days is saved to a key-value store under a single key.
"""

from day_scheduler._internal.clock import Clock, FixedClock, SystemClock
from day_scheduler.diary import Diary
from day_scheduler.exceptions import (
    BlockIndexError,
    DiaryStorageWarning,
    InvalidRangeError,
    MalformedStorageError,
    SchedulerError,
    StoreError,
)
from day_scheduler.schedule import Schedule
from day_scheduler.timeblock import TimeBlock, TimeStatus
from day_scheduler.view import DayView, render_day

__all__ = [
    "BlockIndexError",
    "Clock",
    "DayView",
    "Diary",
    "DiaryStorageWarning",
    "FixedClock",
    "InvalidRangeError",
    "MalformedStorageError",
    "Schedule",
    "SchedulerError",
    "StoreError",
    "SystemClock",
    "TimeBlock",
    "TimeStatus",
    "render_day",
]
