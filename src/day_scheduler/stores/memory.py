"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from day_scheduler.stores.base import Store


class InMemoryStore(Store):
    """In-memory store backed by a dict.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def exists(self, key: str) -> bool:
        return key in self._data
