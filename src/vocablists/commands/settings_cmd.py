"""Show or change practice settings (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from typing import Any

from vocablists.app import open_stores
from vocablists.errors import VocabListsError
from vocablists.settings import get_definition, parse_stored_bool, validate_setting


def _format_value(value: Any) -> str:
    if value is None:
        return "(unreadable)"
    return json.dumps(value)


def _coerce(name: str, raw: str) -> Any:
    """Turn a NAME=VALUE string into the value type the setting's default has (booleans as true/false)."""
    setting = get_definition(name)
    if isinstance(setting.default, bool):
        parsed = parse_stored_bool(raw.strip().lower())
        return raw if parsed is None else parsed
    return raw.strip()


def run(args: Namespace) -> None:
    """Run the settings command: --show (default), --get NAME, --set NAME=VALUE, --check."""
    get_name = getattr(args, "get_name", None)
    set_pair = getattr(args, "set_pair", None)
    check = getattr(args, "check", False)
    show = getattr(args, "show", False) or not (get_name or set_pair or check)

    if set_pair is not None and "=" not in set_pair:
        print("Error: --set requires NAME=VALUE (e.g. wordsPerSession=10).", file=sys.stderr)
        sys.exit(1)

    with open_stores(args) as stores:
        try:
            if set_pair:
                name, _, raw = set_pair.partition("=")
                name = name.strip()
                value = _coerce(name, raw)
                stores.settings.set_setting(name, value)
                print(f"Set {name} = {_format_value(stores.settings.get_setting(name))}")
            if get_name:
                print(_format_value(stores.settings.get_setting(get_name)))
            if show:
                for name, value in stores.settings.get_all_settings().items():
                    print(f"{name}: {_format_value(value)}")
            if check:
                problems: list[str] = []
                for name, value in stores.settings.get_all_settings().items():
                    problems.extend(validate_setting(name, value))
                if problems:
                    for p in problems:
                        print(p)
                    sys.exit(1)
                print("All settings OK.")
        except VocabListsError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
