"""Add, edit or delete words in a custom list."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import NoReturn

from vocablists.app import open_stores
from vocablists.errors import VocabListsError


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _parse_index(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        _fail(f"INDEX must be an integer, got {raw!r}.")


def run(args: Namespace) -> None:
    """Run the words command: add WORD..., edit INDEX VALUE, delete INDEX."""
    action = args.action
    list_name = args.list_name
    values: list[str] = list(args.values)

    if action == "edit" and len(values) != 2:
        _fail("words edit takes INDEX VALUE.")
    if action == "delete" and len(values) != 1:
        _fail("words delete takes INDEX.")

    with open_stores(args) as stores:
        lists = stores.lists
        try:
            if action == "add":
                before = len(lists.get_custom_list(list_name))
                for word in values:
                    lists.add_custom_word(list_name, word)
                added = len(lists.get_custom_list(list_name)) - before
                print(f"Added {added} word(s) to {list_name!r} ({len(values) - added} already present).")
            elif action == "edit":
                index = _parse_index(values[0])
                lists.edit_custom_word(list_name, index, values[1])
                print(f"Set {list_name}[{index}] = {values[1].lower()!r}.")
            elif action == "delete":
                index = _parse_index(values[0])
                lists.delete_custom_word(list_name, index)
                print(f"Deleted {list_name}[{index}].")
        except VocabListsError as e:
            _fail(str(e))
