# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract between a front end
and the Python runner.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from day_scheduler.config import DiaryConfig
from day_scheduler.schema import to_local_naive


class RunnerInput(BaseModel):
    """Complete request read from stdin.

    Attributes:
        action: What to do ("view", "update_note" or "clear")
        day: Day to operate on; defaults to today
        index: Block position for "update_note"
        note: New note text for "update_note"
        now: Instant to treat as the current time; defaults to the host clock
        config: Diary and store configuration
    """

    action: Literal["view", "update_note", "clear"] = "view"
    day: date | None = None
    index: int | None = None
    note: str = ""
    now: datetime | None = None
    config: DiaryConfig = Field(default_factory=DiaryConfig)

    @field_validator("now")
    @classmethod
    def _local_time(cls, value: datetime | None) -> datetime | None:
        return None if value is None else to_local_naive(value)


class RunnerOutput(BaseModel):
    """Complete response written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the action completed
        result: Rendered day view (on success)
        error: Error message (on failure)
        error_type: Error class name (on failure)
        warnings: Diagnostics raised while loading the diary
    """

    success: bool
    result: Any = None
    error: str = ""
    error_type: str = ""
    warnings: list[str] = Field(default_factory=list)
