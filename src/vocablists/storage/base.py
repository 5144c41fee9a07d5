"""Abstract key-value store interface the settings, list and selection stores are built on."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for flat, synchronous, string-keyed and string-valued stores."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. No-op if not present."""
        ...

    def list_keys(self) -> set[str]:
        """Return every key currently in the store."""
        ...


class KeyValueStoreBase(ABC):
    """Abstract base class for store implementations. Each instance carries its own re-entrant lock."""

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key. No-op if not present."""
        ...

    @abstractmethod
    def list_keys(self) -> set[str]:
        """Return every key currently in the store."""
        ...

    def close(self) -> None:
        """Release backend resources. Default: nothing to release."""
