"""Unit tests for ListStore (existence, normalization, index checks, rename, import/export)."""

from __future__ import annotations

import json
import threading

import pytest

from vocablists.errors import (
    IndexOutOfBoundsError,
    InvalidImportDataError,
    ListAlreadyExistsError,
    ListNotFoundError,
    VocabListsError,
)
from vocablists.lists import ListStore
from vocablists.storage import MemoryStore
from vocablists.validation import PatternWordValidator


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def lists(store: MemoryStore) -> ListStore:
    return ListStore(store, PatternWordValidator("^[a-z]+$"))


def _make(lists: ListStore, name: str, *words: str) -> None:
    lists.create_custom_list(name)
    for w in words:
        lists.add_custom_word(name, w)


def test_create_then_get_is_empty(lists: ListStore, store: MemoryStore) -> None:
    lists.create_custom_list("x")
    assert lists.get_custom_list("x") == []
    assert store.get("custom_lists.x") == "[]"


def test_create_twice_raises(lists: ListStore) -> None:
    lists.create_custom_list("x")
    with pytest.raises(ListAlreadyExistsError):
        lists.create_custom_list("x")


def test_names_are_case_sensitive(lists: ListStore) -> None:
    lists.create_custom_list("Animals")
    lists.create_custom_list("animals")
    assert lists.get_custom_list_names() == ["Animals", "animals"]


def test_get_missing_list_raises(lists: ListStore) -> None:
    with pytest.raises(ListNotFoundError):
        lists.get_custom_list("nope")
    with pytest.raises(ListNotFoundError):
        lists.get_custom_list_valid_words("nope")


def test_list_names_sorted_and_only_custom_namespace(lists: ListStore, store: MemoryStore) -> None:
    for name in ("zoo", "apple", "mango"):
        lists.create_custom_list(name)
    store.set("settings.wordsPerSession", "5")
    store.set("selected_lists.custom", '["zoo"]')
    assert lists.get_custom_list_names() == ["apple", "mango", "zoo"]


def test_add_normalizes_and_dedups(lists: ListStore, store: MemoryStore) -> None:
    lists.create_custom_list("x")
    lists.add_custom_word("x", "Cat")
    lists.add_custom_word("x", "cat")
    lists.add_custom_word("x", "DOG")
    assert lists.get_custom_list("x") == ["cat", "dog"]
    assert json.loads(store.get("custom_lists.x")) == ["cat", "dog"]


def test_add_to_missing_list_raises(lists: ListStore, store: MemoryStore) -> None:
    with pytest.raises(ListNotFoundError):
        lists.add_custom_word("x", "cat")
    assert store.list_keys() == set()


def test_edit_word_normalizes_and_allows_duplicates(lists: ListStore) -> None:
    _make(lists, "x", "cat", "dog")
    lists.edit_custom_word("x", 1, "CAT")
    assert lists.get_custom_list("x") == ["cat", "cat"]


@pytest.mark.parametrize("index", [2, 5, -1])
def test_edit_word_out_of_bounds(lists: ListStore, index: int) -> None:
    _make(lists, "x", "cat", "dog")
    with pytest.raises(IndexOutOfBoundsError) as exc:
        lists.edit_custom_word("x", index, "v")
    assert exc.value.length == 2
    assert lists.get_custom_list("x") == ["cat", "dog"]


def test_edit_word_missing_list(lists: ListStore) -> None:
    with pytest.raises(ListNotFoundError):
        lists.edit_custom_word("x", 0, "v")


def test_delete_word(lists: ListStore) -> None:
    _make(lists, "x", "a", "b", "c")
    lists.delete_custom_word("x", 1)
    assert lists.get_custom_list("x") == ["a", "c"]


@pytest.mark.parametrize("index", [3, -1])
def test_delete_word_out_of_bounds(lists: ListStore, index: int) -> None:
    _make(lists, "x", "a", "b", "c")
    with pytest.raises(IndexOutOfBoundsError):
        lists.delete_custom_word("x", index)
    assert lists.get_custom_list("x") == ["a", "b", "c"]


def test_index_error_is_catchable_as_index_error(lists: ListStore) -> None:
    lists.create_custom_list("x")
    with pytest.raises(IndexError):
        lists.delete_custom_word("x", 0)


def test_valid_words_filtered_in_order(lists: ListStore) -> None:
    _make(lists, "x", "cat", "c4t", "dog", "two words")
    assert lists.get_custom_list("x") == ["cat", "c4t", "dog", "two words"]
    assert lists.get_custom_list_valid_words("x") == ["cat", "dog"]


def test_default_validator_accepts_everything(store: MemoryStore) -> None:
    lists = ListStore(store)
    _make(lists, "x", "c4t")
    assert lists.get_custom_list_valid_words("x") == ["c4t"]


def test_rename(lists: ListStore, store: MemoryStore) -> None:
    _make(lists, "a", "one", "two")
    lists.rename_custom_list("a", "b")
    with pytest.raises(ListNotFoundError):
        lists.get_custom_list("a")
    assert lists.get_custom_list("b") == ["one", "two"]
    assert "custom_lists.a" not in store.list_keys()


def test_rename_missing_source(lists: ListStore) -> None:
    with pytest.raises(ListNotFoundError):
        lists.rename_custom_list("a", "b")


def test_rename_onto_existing_keeps_both(lists: ListStore) -> None:
    _make(lists, "a", "one")
    _make(lists, "b", "two")
    with pytest.raises(ListAlreadyExistsError):
        lists.rename_custom_list("a", "b")
    assert lists.get_custom_list("a") == ["one"]
    assert lists.get_custom_list("b") == ["two"]


def test_concurrent_renames_in_process_move_list_once(store: MemoryStore) -> None:
    lists = ListStore(store)
    _make(lists, "a", "one")
    errors: list[Exception] = []

    def rename(target: str) -> None:
        try:
            ListStore(store).rename_custom_list("a", target)
        except VocabListsError as e:
            errors.append(e)

    threads = [threading.Thread(target=rename, args=(f"t{i}",)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(errors) == 7
    assert all(isinstance(e, ListNotFoundError) for e in errors)
    assert len(lists.get_custom_list_names()) == 1


def test_delete_list(lists: ListStore) -> None:
    lists.create_custom_list("x")
    lists.delete_custom_list("x")
    assert lists.get_custom_list_names() == []
    with pytest.raises(ListNotFoundError):
        lists.delete_custom_list("x")


def test_export_format(lists: ListStore) -> None:
    _make(lists, "fruit", "Apple", "pear")
    data = json.loads(lists.export_list_to_json("fruit"))
    assert data == {"name": "fruit", "words": ["apple", "pear"]}


def test_export_missing_list(lists: ListStore) -> None:
    with pytest.raises(ListNotFoundError):
        lists.export_list_to_json("fruit")


def test_export_import_round_trip_under_new_name(lists: ListStore) -> None:
    _make(lists, "fruit", "apple", "pear")
    exported = json.loads(lists.export_list_to_json("fruit"))
    exported["name"] = "fruit copy"
    assert lists.import_list_from_json(json.dumps(exported)) == "fruit copy"
    assert lists.get_custom_list("fruit copy") == lists.get_custom_list("fruit")


def test_import_normalizes_and_dedups(lists: ListStore) -> None:
    lists.import_list_from_json('{"name": "Mixed", "words": ["Cat", "CAT", "dog"]}')
    assert lists.get_custom_list("Mixed") == ["cat", "dog"]


def test_import_existing_name_raises(lists: ListStore) -> None:
    _make(lists, "fruit", "apple")
    with pytest.raises(ListAlreadyExistsError):
        lists.import_list_from_json('{"name": "fruit", "words": ["kiwi"]}')
    assert lists.get_custom_list("fruit") == ["apple"]


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        "null",
        "[]",
        '"fruit"',
        '{"words": []}',
        '{"name": 3, "words": []}',
        '{"name": "x"}',
        '{"name": "x", "words": "apple"}',
        '{"name": "x", "words": ["apple", 2]}',
        '{"name": "x", "words": [null]}',
        "[" * 200000,
        '{"name": "x", "words": ' + "[" * 200000 + "]" * 200000 + "}",
        '{"name": "\\ud800", "words": []}',
        '{"name": "x", "words": ["ok", "\\udfff"]}',
    ],
)
def test_import_invalid_payload(lists: ListStore, store: MemoryStore, payload: str) -> None:
    with pytest.raises(InvalidImportDataError):
        lists.import_list_from_json(payload)
    assert store.list_keys() == set()


def test_stored_format_is_compact_json(lists: ListStore, store: MemoryStore) -> None:
    _make(lists, "x", "über", "cat")
    assert store.get("custom_lists.x") == '["über","cat"]'
