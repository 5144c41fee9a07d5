"""Custom word lists: CRUD over named, ordered lists of lowercase words, plus JSON import/export."""

from __future__ import annotations

import json
import logging
from typing import Any

from vocablists.errors import (
    IndexOutOfBoundsError,
    InvalidImportDataError,
    ListAlreadyExistsError,
    ListNotFoundError,
)
from vocablists.namespace import (
    custom_list_key,
    custom_list_name,
    decode_json,
    encode_json,
    lock_for,
)
from vocablists.storage.base import KeyValueStore
from vocablists.validation import AcceptAllValidator, WordValidator

logger = logging.getLogger(__name__)


def normalize_word(word: str) -> str:
    """Words are stored and compared lowercase."""
    return word.lower()


def _is_storable_text(value: Any) -> bool:
    """True for a str that encodes as UTF-8; JSON escapes can produce lone surrogates that stores reject."""
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _parse_import_data(data: str) -> dict[str, Any] | None:
    """Return the decoded payload if it is {"name": str, "words": [str, ...]}, else None."""
    try:
        parsed = json.loads(data)
    except (json.JSONDecodeError, TypeError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    name_ok = _is_storable_text(parsed.get("name"))
    words = parsed.get("words")
    words_ok = isinstance(words, list) and all(_is_storable_text(w) for w in words)
    if not name_ok or not words_ok:
        return None
    return parsed


class ListStore:
    """
    Custom lists stored as JSON arrays under custom_lists.<name>.

    Existence of the key is the only record of a list; nothing is cached between
    calls. The validator is used only by get_custom_list_valid_words.
    """

    def __init__(self, store: KeyValueStore, validator: WordValidator | None = None) -> None:
        self._store = store
        self._validator = validator if validator is not None else AcceptAllValidator()
        self._lock = lock_for(store)

    def _read(self, name: str) -> list[str]:
        stored = self._store.get(custom_list_key(name))
        if stored is None:
            raise ListNotFoundError(name)
        return decode_json(stored)

    def _write(self, name: str, words: list[str]) -> None:
        self._store.set(custom_list_key(name), encode_json(words))

    def _exists(self, name: str) -> bool:
        return self._store.get(custom_list_key(name)) is not None

    def get_custom_list_names(self) -> list[str]:
        """Names of all custom lists, sorted."""
        names = (custom_list_name(key) for key in self._store.list_keys())
        return sorted(name for name in names if name is not None)

    def get_custom_list(self, name: str) -> list[str]:
        return self._read(name)

    def get_custom_list_valid_words(self, name: str) -> list[str]:
        """Words of the list that the validator accepts, in list order."""
        return [w for w in self._read(name) if self._validator.is_valid_word(w)]

    def create_custom_list(self, name: str) -> None:
        with self._lock:
            if self._exists(name):
                raise ListAlreadyExistsError(name)
            self._write(name, [])
        logger.debug("Created custom list %r", name)

    def rename_custom_list(self, old_name: str, new_name: str) -> None:
        """
        Move a list to a new name (copy, then delete the old key).

        Serialized against other callers in this process; another process sharing
        the store can still see the list under both names or neither in between.
        """
        with self._lock:
            contents = self._store.get(custom_list_key(old_name))
            if contents is None:
                raise ListNotFoundError(old_name)
            if self._exists(new_name):
                raise ListAlreadyExistsError(new_name)
            self._store.set(custom_list_key(new_name), contents)
            self._store.delete(custom_list_key(old_name))
        logger.debug("Renamed custom list %r -> %r", old_name, new_name)

    def delete_custom_list(self, name: str) -> None:
        with self._lock:
            if not self._exists(name):
                raise ListNotFoundError(name)
            self._store.delete(custom_list_key(name))
        logger.debug("Deleted custom list %r", name)

    def add_custom_word(self, list_name: str, word: str) -> None:
        """Append word (lowercased). Adding a word already in the list does nothing."""
        with self._lock:
            words = self._read(list_name)
            word = normalize_word(word)
            if word in words:
                return
            words.append(word)
            self._write(list_name, words)
        logger.debug("Added %r to %r", word, list_name)

    def edit_custom_word(self, list_name: str, index: int, new_value: str) -> None:
        """Replace the word at index with new_value (lowercased). Duplicates are not checked."""
        with self._lock:
            words = self._read(list_name)
            self._check_index(list_name, index, len(words))
            words[index] = normalize_word(new_value)
            self._write(list_name, words)
        logger.debug("Edited %r[%d]", list_name, index)

    def delete_custom_word(self, list_name: str, index: int) -> None:
        with self._lock:
            words = self._read(list_name)
            self._check_index(list_name, index, len(words))
            del words[index]
            self._write(list_name, words)
        logger.debug("Deleted %r[%d]", list_name, index)

    @staticmethod
    def _check_index(list_name: str, index: int, length: int) -> None:
        # Negative indexes are rejected rather than counted from the end.
        if index < 0 or index >= length:
            raise IndexOutOfBoundsError(list_name, index, length)

    def export_list_to_json(self, list_name: str) -> str:
        """Return the list as JSON: {"name": ..., "words": [...]}."""
        words = self._read(list_name)
        return encode_json({"name": list_name, "words": words})

    def import_list_from_json(self, data: str) -> str:
        """
        Create a list from exported JSON and return its name.

        Words go through add_custom_word, so they are lowercased and de-duplicated.
        Raises InvalidImportDataError for anything but {"name": str, "words": [str, ...]},
        and ListAlreadyExistsError if the name is taken.
        """
        parsed = _parse_import_data(data)
        if parsed is None:
            raise InvalidImportDataError("JSON data is invalid")
        name: str = parsed["name"]
        with self._lock:
            self.create_custom_list(name)
            for word in parsed["words"]:
                self.add_custom_word(name, word)
        logger.info("Imported list %r (%d words in payload)", name, len(parsed["words"]))
        return name
