"""Stored record shapes for diaries, schedules and time blocks.

The camelCase aliases are the persisted wire format; Python code uses the
snake_case field names.  Both are accepted on input.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TimeBlockRecord(_Record):
    """Serialized :class:`~day_scheduler.timeblock.TimeBlock`."""

    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    event_entry: str = Field(default="", alias="eventEntry")

    @field_validator("start_time", "end_time")
    @classmethod
    def _local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)

    @field_validator("event_entry", mode="before")
    @classmethod
    def _missing_entry(cls, value: object) -> object:
        return "" if value is None else value


class ScheduleRecord(_Record):
    """Serialized :class:`~day_scheduler.schedule.Schedule`."""

    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    time_blocks: list[TimeBlockRecord] = Field(default_factory=list, alias="timeBlocks")

    @field_validator("start_time", "end_time")
    @classmethod
    def _local_time(cls, value: datetime) -> datetime:
        return to_local_naive(value)


class DiaryRecord(_Record):
    """Everything persisted under the diary's storage key."""

    schedules: list[ScheduleRecord] = Field(default_factory=list)
