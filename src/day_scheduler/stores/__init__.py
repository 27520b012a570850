"""Storage backends for diary persistence."""

from day_scheduler.stores.base import Store
from day_scheduler.stores.memory import InMemoryStore
from day_scheduler.stores.sqlite import SQLiteStore

__all__ = ["InMemoryStore", "SQLiteStore", "Store"]
