"""Store protocol — key-value persistence for serialized diaries."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Store(ABC):
    """Abstract base for all storage backends.

    The store holds opaque text blobs addressed by a single key.  A diary
    keeps its whole state under one fixed key and overwrites it on every
    save; the store does not interpret what it holds.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored text, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return ``True`` if the key holds a value."""
        ...
