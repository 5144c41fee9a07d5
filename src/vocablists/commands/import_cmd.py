"""Import a custom list from exported JSON (file or stdin)."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from vocablists.app import open_stores
from vocablists.errors import VocabListsError


def run(args: Namespace) -> None:
    """Run the import command."""
    source: str = args.file
    if source == "-":
        data = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            print(f"Error: file not found: {path.as_posix()}", file=sys.stderr)
            sys.exit(1)
        try:
            data = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            print(f"Error: file is not UTF-8 text: {path.as_posix()}", file=sys.stderr)
            sys.exit(1)

    with open_stores(args) as stores:
        try:
            name = stores.lists.import_list_from_json(data)
        except VocabListsError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        count = len(stores.lists.get_custom_list(name))
    print(f"Imported list {name!r} ({count} words).")
