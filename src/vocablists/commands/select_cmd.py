"""Select or deselect lists for practice, or show the current selections."""

from __future__ import annotations

import sys
from argparse import Namespace

from vocablists.app import open_stores
from vocablists.namespace import ListCategory


def _print_selection(label: str, names: list[str]) -> None:
    print(f"{label}:")
    if not names:
        print("  (none)")
    for name in names:
        print(f"  {name}")


def run(args: Namespace) -> None:
    """Run the select command. Selections are pruned of missing lists whenever they are shown."""
    names: list[str] = list(getattr(args, "names", None) or [])
    category = ListCategory.BUILTIN if getattr(args, "builtin", False) else ListCategory.CUSTOM
    off = getattr(args, "off", False)
    show = getattr(args, "show", False) or not names

    with open_stores(args) as stores:
        if names:
            if category is ListCategory.CUSTOM and not off:
                existing = set(stores.lists.get_custom_list_names())
                missing = [n for n in names if n not in existing]
            elif category is ListCategory.BUILTIN and not off:
                existing = stores.catalog.list_names()
                missing = [n for n in names if n not in existing]
            else:
                missing = []
            if missing:
                print(f"Error: no {category.value} list named: {', '.join(missing)}", file=sys.stderr)
                sys.exit(1)
            for name in names:
                stores.selection.set_list_selected(category, name, not off)
            verb = "Deselected" if off else "Selected"
            print(f"{verb} {len(names)} {category.value} list(s).")
        if show:
            _print_selection("builtin", stores.selection.get_selected_builtin_list_names())
            _print_selection("custom", stores.selection.get_selected_custom_list_names())
