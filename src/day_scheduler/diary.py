"""Diary — the collection of per-day schedules and its persistence."""

from __future__ import annotations

import warnings
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

from pydantic import ValidationError

from day_scheduler._internal.clock import Clock, SystemClock
from day_scheduler.exceptions import (
    DiaryStorageWarning,
    InvalidRangeError,
    MalformedStorageError,
)
from day_scheduler.schedule import Schedule
from day_scheduler.schema import DiaryRecord
from day_scheduler.stores.memory import InMemoryStore

if TYPE_CHECKING:
    from day_scheduler.stores.base import Store
    from day_scheduler.timeblock import TimeBlock

DEFAULT_STORAGE_KEY = "diary"


def _as_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


class Diary:
    """Holds one schedule per calendar day plus the day currently shown.

    Schedules are created lazily the first time a day is asked for and the
    whole collection is written to the store under a single key.

    Parameters:
        store:         Persistence backend.  Defaults to :class:`InMemoryStore`.
        clock:         Source of "now".  Defaults to :class:`SystemClock`.
        starting_hour: Hour of day at which new schedules begin.
        ending_hour:   Hour of day at which new schedules end (exclusive).
        storage_key:   Key the diary is stored under.

    Raises:
        InvalidRangeError: Unless ``0 <= starting_hour < ending_hour <= 24``.
    """

    def __init__(
        self,
        store: Store | None = None,
        *,
        clock: Clock | None = None,
        starting_hour: int = 9,
        ending_hour: int = 18,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        if not 0 <= starting_hour < ending_hour <= 24:
            raise InvalidRangeError(starting_hour, ending_hour)
        self._store: Store = store or InMemoryStore()
        self._clock: Clock = clock or SystemClock()
        self.starting_hour = starting_hour
        self.ending_hour = ending_hour
        self.storage_key = storage_key
        self.current_date: datetime = self._clock.now()
        self.schedules: list[Schedule] = []

    @property
    def store(self) -> Store:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    # ── schedules ────────────────────────────────────────────

    def schedule_for_date(self, when: date | datetime) -> Schedule:
        """Return the schedule for *when*'s calendar day, creating it if missing."""
        day = _as_day(when)
        for schedule in self.schedules:
            if schedule.day == day:
                return schedule
        return self._create_schedule(day)

    def _create_schedule(self, day: date) -> Schedule:
        midnight = datetime.combine(day, time())
        schedule = Schedule(
            midnight + timedelta(hours=self.starting_hour),
            midnight + timedelta(hours=self.ending_hour),
        )
        self.schedules.append(schedule)
        return schedule

    def current_schedule(self) -> Schedule:
        return self.schedule_for_date(self.current_date)

    # ── navigation ───────────────────────────────────────────

    def go_to_date(self, when: date | datetime) -> Schedule:
        if isinstance(when, datetime):
            self.current_date = when
        else:
            self.current_date = datetime.combine(when, self.current_date.time())
        return self.current_schedule()

    def go_to_previous_day(self) -> Schedule:
        return self.go_to_date(self.current_date - timedelta(days=1))

    def go_to_next_day(self) -> Schedule:
        return self.go_to_date(self.current_date + timedelta(days=1))

    def go_to_today(self) -> Schedule:
        return self.go_to_date(self._clock.now())

    # ── editing ──────────────────────────────────────────────

    async def update_note(self, index: int, text: str) -> TimeBlock:
        """Set the note of block *index* on the current day and save the diary.

        Raises:
            BlockIndexError: If *index* is not a block of the current schedule.
        """
        block = self.current_schedule().block_at(index)
        block.update_note(text)
        await self.persist()
        return block

    # ── serialization ────────────────────────────────────────

    def to_record(self) -> DiaryRecord:
        return DiaryRecord(schedules=[s.to_serializable() for s in self.schedules])

    def load_record(self, record: DiaryRecord) -> None:
        """Replace every schedule with those in *record*.

        Only the first schedule seen for a given day is kept.

        Raises:
            InvalidRangeError: If a stored schedule has an empty or inverted window.
        """
        schedules: list[Schedule] = []
        seen: set[date] = set()
        for schedule_record in record.schedules:
            schedule = Schedule.from_record(schedule_record)
            if schedule.day in seen:
                warnings.warn(
                    f"Ignoring duplicate stored schedule for {schedule.day.isoformat()}",
                    DiaryStorageWarning,
                    stacklevel=2,
                )
                continue
            seen.add(schedule.day)
            schedules.append(schedule)
        self.schedules = schedules

    def _parse(self, text: str) -> DiaryRecord:
        try:
            return DiaryRecord.model_validate_json(text)
        except ValidationError as e:
            raise MalformedStorageError(self.storage_key, str(e)) from e

    # ── persistence ──────────────────────────────────────────

    async def persist(self) -> None:
        """Write every schedule to the store, overwriting the previous value."""
        await self._store.set(self.storage_key, self.to_record().model_dump_json(by_alias=True))

    async def restore(self, *, strict: bool = False) -> bool:
        """Load the schedules saved under :attr:`storage_key`.

        A missing key leaves the diary untouched.  Unreadable data is
        reported as a :class:`DiaryStorageWarning` and treated like a
        missing key, unless *strict* is set.  ``current_date`` is reset to
        now either way.

        Returns:
            ``True`` if stored schedules replaced the current ones.

        Raises:
            MalformedStorageError: With *strict*, if the stored text is unreadable.
        """
        self.current_date = self._clock.now()
        text = await self._store.get(self.storage_key)
        if text is None:
            return False

        try:
            record = self._parse(text)
            try:
                self.load_record(record)
            except InvalidRangeError as e:
                raise MalformedStorageError(self.storage_key, str(e)) from e
        except MalformedStorageError as e:
            if strict:
                raise
            warnings.warn(str(e), DiaryStorageWarning, stacklevel=2)
            return False
        return True

    async def clear_storage(self) -> None:
        """Remove the saved diary from the store.  In-memory schedules are kept."""
        await self._store.delete(self.storage_key)
