"""Read-only projection of a day for whatever draws it on screen."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from day_scheduler.diary import Diary
    from day_scheduler.schedule import Schedule
    from day_scheduler.timeblock import TimeStatus


def format_hour_label(instant: datetime) -> str:
    """``9:00 AM`` style label for a block's start."""
    hour = instant.hour % 12 or 12
    suffix = "AM" if instant.hour < 12 else "PM"
    return f"{hour}:{instant.minute:02d} {suffix}"


def format_heading(instant: datetime) -> str:
    """``Monday, 1 January, 2024`` style heading for a day."""
    return f"{instant:%A}, {instant.day} {instant:%B}, {instant.year}"


@dataclass(frozen=True)
class BlockView:
    index: int
    label: str
    start_time: datetime
    end_time: datetime
    note: str
    status: TimeStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "label": self.label,
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat(),
            "note": self.note,
            "status": str(self.status),
        }


@dataclass(frozen=True)
class DayView:
    """Everything needed to draw one day.

    Attributes:
        heading: Human-readable date of the schedule.
        day:     Calendar day shown.
        blocks:  Blocks in order, with statuses computed at render time.
    """

    heading: str
    day: date
    blocks: tuple[BlockView, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "heading": self.heading,
            "day": self.day.isoformat(),
            "blocks": [b.to_dict() for b in self.blocks],
        }


def render_schedule(schedule: Schedule, now: datetime) -> DayView:
    blocks = tuple(
        BlockView(
            index=i,
            label=format_hour_label(block.start_time),
            start_time=block.start_time,
            end_time=block.end_time,
            note=block.note,
            status=block.status(now),
        )
        for i, block in enumerate(schedule)
    )
    return DayView(heading=format_heading(schedule.start_time), day=schedule.day, blocks=blocks)


def render_day(diary: Diary) -> DayView:
    """View of the diary's current day, judged against the diary's clock."""
    return render_schedule(diary.current_schedule(), diary.clock.now())
