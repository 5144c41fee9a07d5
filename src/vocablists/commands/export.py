"""Export a custom list as JSON ({"name": ..., "words": [...]})."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from vocablists.app import open_stores
from vocablists.errors import VocabListsError


def run(args: Namespace) -> None:
    """Run the export command."""
    list_name: str = args.list_name
    output: Path | None = getattr(args, "output", None)

    with open_stores(args) as stores:
        try:
            data = stores.lists.export_list_to_json(list_name)
        except VocabListsError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    if output is None:
        sys.stdout.write(data + "\n")
        return
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(data, encoding="utf-8")
    print(f"Exported {list_name!r} to {output.as_posix()}")
