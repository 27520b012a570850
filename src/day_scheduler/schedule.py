"""Schedule — one day's working window split into hour-long time blocks."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, timedelta

from day_scheduler.exceptions import BlockIndexError, InvalidRangeError
from day_scheduler.schema import ScheduleRecord, TimeBlockRecord
from day_scheduler.timeblock import TimeBlock

BLOCK_LENGTH = timedelta(hours=1)
# A block ends one second before the next one starts so that a boundary
# instant never matches two blocks.
BLOCK_SPAN = BLOCK_LENGTH - timedelta(seconds=1)


def partition(start_time: datetime, end_time: datetime) -> list[TimeBlock]:
    """Split ``[start_time, end_time)`` into consecutive one-hour blocks.

    A trailing stretch shorter than an hour is dropped, not truncated.
    """
    blocks: list[TimeBlock] = []
    block_start = start_time
    block_end = block_start + BLOCK_SPAN
    while block_end < end_time:
        blocks.append(TimeBlock(block_start, block_end))
        block_start += BLOCK_LENGTH
        block_end = block_start + BLOCK_SPAN
    return blocks


class Schedule:
    """An ordered run of contiguous time blocks covering one working window.

    Parameters:
        start_time:  Start of the window.
        end_time:    End of the window (exclusive).  Must be after *start_time*.
        time_blocks: Blocks to adopt as-is.  When omitted the window is
                     partitioned into fresh, empty blocks.

    Raises:
        InvalidRangeError: If *end_time* is not after *start_time*.
    """

    def __init__(
        self,
        start_time: datetime,
        end_time: datetime,
        time_blocks: list[TimeBlock] | None = None,
    ) -> None:
        if end_time <= start_time:
            raise InvalidRangeError(start_time, end_time)
        self.start_time = start_time
        self.end_time = end_time
        if time_blocks is None:
            self.time_blocks = partition(start_time, end_time)
        else:
            self.time_blocks = list(time_blocks)

    def __repr__(self) -> str:
        return (
            f"Schedule(start_time={self.start_time.isoformat()}, "
            f"end_time={self.end_time.isoformat()}, blocks={len(self.time_blocks)})"
        )

    def __iter__(self) -> Iterator[TimeBlock]:
        return iter(self.time_blocks)

    def __len__(self) -> int:
        return len(self.time_blocks)

    @property
    def day(self) -> date:
        """Calendar day this schedule belongs to."""
        return self.start_time.date()

    def rebuild(self) -> None:
        """Discard every block, notes included, and partition the window again."""
        if self.end_time <= self.start_time:
            raise InvalidRangeError(self.start_time, self.end_time)
        self.time_blocks = partition(self.start_time, self.end_time)

    # ── lookup ───────────────────────────────────────────────

    def block_count(self) -> int:
        return len(self.time_blocks)

    def block_at(self, index: int) -> TimeBlock:
        """Return the block at *index*.

        Raises:
            BlockIndexError: If *index* is outside ``[0, block_count())``.
        """
        if not 0 <= index < len(self.time_blocks):
            raise BlockIndexError(index, len(self.time_blocks))
        return self.time_blocks[index]

    def find_block_containing(self, instant: datetime) -> TimeBlock | None:
        """Return the block covering *instant*, or ``None``.

        Instants outside ``[start_time, end_time]`` are never found.
        """
        if instant < self.start_time or instant > self.end_time:
            return None
        for block in self.time_blocks:
            if block.contains(instant):
                return block
        return None

    # ── serialization ────────────────────────────────────────

    def to_serializable(self) -> ScheduleRecord:
        return ScheduleRecord(
            start_time=self.start_time,
            end_time=self.end_time,
            time_blocks=[
                TimeBlockRecord(
                    start_time=block.start_time,
                    end_time=block.end_time,
                    event_entry=block.note,
                )
                for block in self.time_blocks
            ],
        )

    def from_serializable(self, record: ScheduleRecord) -> None:
        """Replace bounds and blocks with the record's fields verbatim.

        No partitioning happens here: blocks come back exactly as stored.
        """
        self.start_time = record.start_time
        self.end_time = record.end_time
        self.time_blocks = [
            TimeBlock(block.start_time, block.end_time, block.event_entry)
            for block in record.time_blocks
        ]

    @classmethod
    def from_record(cls, record: ScheduleRecord) -> Schedule:
        """Build a new schedule from a stored record.

        Raises:
            InvalidRangeError: If the record's window is empty or inverted.
        """
        schedule = cls(record.start_time, record.end_time, time_blocks=[])
        schedule.from_serializable(record)
        return schedule
