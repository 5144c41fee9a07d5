"""Which built-in and custom lists are selected for practice."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from vocablists.catalog import BuiltInCatalog
from vocablists.lists import ListStore
from vocablists.namespace import ListCategory, decode_json, encode_json, lock_for, selection_key
from vocablists.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class SelectionStore:
    """
    Selected list names per category, stored as JSON arrays under selected_lists.<category>.

    Order is most-recently-selected last. Names of lists that no longer exist are
    dropped when read through get_selected_builtin_list_names /
    get_selected_custom_list_names; get_selected_list_names returns what is stored.
    """

    def __init__(
        self,
        store: KeyValueStore,
        catalog: BuiltInCatalog,
        list_store: ListStore | None = None,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._lists = list_store if list_store is not None else ListStore(store)
        self._lock = lock_for(store)

    def get_selected_list_names(self, category: ListCategory | str) -> list[str]:
        """Stored selection for category; [] if nothing was ever selected."""
        stored = self._store.get(selection_key(category))
        if stored is None:
            return []
        return decode_json(stored)

    def set_list_selected(self, category: ListCategory | str, list_name: str, is_selected: bool) -> None:
        """Select (moving to the end) or deselect list_name. Existence of the list is not checked."""
        key = selection_key(category)
        with self._lock:
            if self._store.get(key) is None:
                self._store.set(key, "[]")
            selected = [name for name in self.get_selected_list_names(category) if name != list_name]
            if is_selected:
                selected.append(list_name)
            self._store.set(key, encode_json(selected))
        logger.debug(
            "%s list %r %s", ListCategory(category).value, list_name, "selected" if is_selected else "deselected"
        )

    def set_builtin_list_selected(self, list_name: str, is_selected: bool) -> None:
        self.set_list_selected(ListCategory.BUILTIN, list_name, is_selected)

    def set_custom_list_selected(self, list_name: str, is_selected: bool) -> None:
        self.set_list_selected(ListCategory.CUSTOM, list_name, is_selected)

    def _prune(self, category: ListCategory, available: Iterable[str]) -> list[str]:
        available = set(available)
        with self._lock:
            dead = [name for name in self.get_selected_list_names(category) if name not in available]
            for name in dead:
                self.set_list_selected(category, name, False)
            if dead:
                logger.info("Dropped %d missing %s list(s) from selection: %s", len(dead), category.value, ", ".join(dead))
            return self.get_selected_list_names(category)

    def get_selected_builtin_list_names(self) -> list[str]:
        """Selected built-in lists still in the catalog; stale names are removed from the store."""
        return self._prune(ListCategory.BUILTIN, self._catalog.list_names())

    def get_selected_custom_list_names(self) -> list[str]:
        """Selected custom lists that still exist; stale names are removed from the store."""
        return self._prune(ListCategory.CUSTOM, self._lists.get_custom_list_names())
