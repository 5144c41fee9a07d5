"""List, show, create, rename or delete custom word lists."""

from __future__ import annotations

import sys
from argparse import Namespace

from vocablists.app import open_stores
from vocablists.errors import VocabListsError

# action -> number of names it takes
_ARITY = {"list": 0, "show": 1, "create": 1, "delete": 1, "rename": 2}


def run(args: Namespace) -> None:
    """Run the lists command."""
    action = getattr(args, "action", "list") or "list"
    names: list[str] = list(getattr(args, "names", None) or [])
    valid_only = getattr(args, "valid", False)

    expected = _ARITY[action]
    if len(names) != expected:
        usage = {0: "no names", 1: "one NAME", 2: "OLD NEW"}[expected]
        print(f"Error: lists {action} takes {usage}.", file=sys.stderr)
        sys.exit(1)

    with open_stores(args) as stores:
        lists = stores.lists
        try:
            if action == "list":
                list_names = lists.get_custom_list_names()
                if not list_names:
                    print("No custom lists.")
                for name in list_names:
                    words = lists.get_custom_list_valid_words(name) if valid_only else lists.get_custom_list(name)
                    print(f"{name}\t{len(words)}")
            elif action == "show":
                name = names[0]
                words = lists.get_custom_list_valid_words(name) if valid_only else lists.get_custom_list(name)
                for index, word in enumerate(words):
                    print(f"{index}\t{word}")
            elif action == "create":
                lists.create_custom_list(names[0])
                print(f"Created list {names[0]!r}.")
            elif action == "rename":
                lists.rename_custom_list(names[0], names[1])
                print(f"Renamed list {names[0]!r} to {names[1]!r}.")
            elif action == "delete":
                lists.delete_custom_list(names[0])
                print(f"Deleted list {names[0]!r}.")
        except VocabListsError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
