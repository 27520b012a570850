"""TimeBlock — one hour-long slot of a schedule and its temporal status."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TimeStatus(StrEnum):
    """Position of a block relative to the current instant."""

    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


@dataclass
class TimeBlock:
    """A single slot with a user-entered note.

    Attributes:
        start_time: First second covered by the block.
        end_time:   Last second covered by the block (inclusive).  One
                    second before the next block's ``start_time``.
        note:       Free text entered by the user, empty by default.
    """

    start_time: datetime
    end_time: datetime
    note: str = ""

    def status(self, now: datetime) -> TimeStatus:
        if now < self.start_time:
            return TimeStatus.FUTURE
        if now > self.end_time:
            return TimeStatus.PAST
        return TimeStatus.PRESENT

    def contains(self, instant: datetime) -> bool:
        return self.start_time <= instant <= self.end_time

    def update_note(self, text: str) -> None:
        self.note = text
