"""Key layout shared by the stores: namespaced keys, list categories, JSON encoding, per-store locks."""

from __future__ import annotations

import json
import threading
import weakref
from enum import Enum
from typing import Any

# Persisted layout; changing these breaks existing stores.
SETTINGS_PREFIX = "settings."
CUSTOM_LISTS_PREFIX = "custom_lists."
SELECTED_LISTS_PREFIX = "selected_lists."


class ListCategory(str, Enum):
    """Which catalog a selected list name refers to."""

    BUILTIN = "builtin"
    CUSTOM = "custom"


def setting_key(name: str) -> str:
    return SETTINGS_PREFIX + name


def custom_list_key(name: str) -> str:
    return CUSTOM_LISTS_PREFIX + name


def custom_list_name(key: str) -> str | None:
    """Return the list name stored under key, or None if key is outside the custom-list namespace."""
    if not key.startswith(CUSTOM_LISTS_PREFIX):
        return None
    return key[len(CUSTOM_LISTS_PREFIX):]


def selection_key(category: ListCategory | str) -> str:
    """Key of the selection set for category. Raises ValueError for unknown categories."""
    return SELECTED_LISTS_PREFIX + ListCategory(category).value


def encode_json(value: Any) -> str:
    """Compact JSON (no whitespace, unicode kept as-is) as written by the original browser client."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def decode_json(text: str) -> Any:
    return json.loads(text)


def to_stored_string(value: Any) -> str:
    """String form of a scalar for the store: booleans as 'true'/'false', everything else via str()."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


_locks: "weakref.WeakKeyDictionary[object, threading.RLock]" = weakref.WeakKeyDictionary()
_locks_guard = threading.Lock()


def lock_for(store: object) -> threading.RLock:
    """
    Return the in-process lock for a store instance.

    Stores that expose a `lock` attribute (KeyValueStoreBase does) use it; other
    objects get one lock per instance for as long as the instance is alive.
    """
    own = getattr(store, "lock", None)
    if own is not None:
        return own
    with _locks_guard:
        lock = _locks.get(store)
        if lock is None:
            lock = threading.RLock()
            _locks[store] = lock
        return lock
