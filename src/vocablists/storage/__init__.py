"""Key-value store abstraction (SQLite and in-memory backends, abstract interface)."""

from vocablists.storage.base import KeyValueStore, KeyValueStoreBase
from vocablists.storage.memory import MemoryStore
from vocablists.storage.sqlite import SQLiteStore

__all__ = [
    "KeyValueStore",
    "KeyValueStoreBase",
    "MemoryStore",
    "SQLiteStore",
]
