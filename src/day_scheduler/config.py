"""Diary configuration and store construction."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from day_scheduler.exceptions import StoreError
from day_scheduler.stores import InMemoryStore, SQLiteStore, Store


class StoreConfig(BaseModel):
    """Store configuration.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: Literal["memory", "sqlite"] = "memory"
    path: str = ""


class DiaryConfig(BaseModel):
    """Settings for a diary session.

    Attributes:
        starting_hour: Hour of day new schedules start at
        ending_hour: Hour of day new schedules end at (exclusive)
        storage_key: Key the diary is saved under
        store: Where the diary is saved
    """

    starting_hour: int = Field(default=9, ge=0, le=23)
    ending_hour: int = Field(default=18, ge=1, le=24)
    storage_key: str = Field(default="diary", min_length=1)
    store: StoreConfig = Field(default_factory=StoreConfig)

    @model_validator(mode="after")
    def _check_hours(self) -> DiaryConfig:
        if self.ending_hour <= self.starting_hour:
            raise ValueError(
                f"ending_hour ({self.ending_hour}) must be after "
                f"starting_hour ({self.starting_hour})"
            )
        return self


def create_store(config: StoreConfig) -> Store:
    """Create a store from configuration.

    Raises:
        StoreError: If a SQLite store is requested without a path.
    """
    if config.type == "sqlite":
        if not config.path:
            raise StoreError("create", "SQLite store requires 'path' configuration")
        return SQLiteStore(config.path)
    return InMemoryStore()
