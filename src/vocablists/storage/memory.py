"""In-memory implementation of the KeyValueStore interface."""

from __future__ import annotations

from collections.abc import Mapping

from vocablists.storage.base import KeyValueStoreBase


class MemoryStore(KeyValueStoreBase):
    """Dict-backed store. Contents are lost when the instance goes away."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"store values must be str, got {type(value).__name__}")
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def list_keys(self) -> set[str]:
        return set(self._data)

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw key/value contents (for inspection and tests)."""
        return dict(self._data)
