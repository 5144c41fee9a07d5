"""Show or edit configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from vocablists.config import global_config_path, load_config, save_config


def _set_nested_key(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a nested key (e.g. 'store.path') in data; create intermediate dicts if needed."""
    parts = key_path.split(".")
    current: dict[str, Any] = data
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def _parse_set_value(value_str: str) -> Any:
    """Parse KEY=VALUE value: try JSON (number, bool, null, quoted string), else use as string."""
    value_str = value_str.strip()
    try:
        return json.loads(value_str)
    except json.JSONDecodeError:
        return value_str


def _load_target_config(target_path: Path) -> dict[str, Any]:
    """Load raw config from target path; return {} if missing or invalid."""
    if not target_path.is_file():
        return {}
    try:
        data = json.loads(target_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def run(args: Namespace) -> None:
    """Run the config command: show merged settings or set a value in the config file."""
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)
    config_path = getattr(args, "config", None)

    if not show and not set_key:
        print("Error: specify --show or --set KEY=VALUE.", file=sys.stderr)
        sys.exit(1)

    if set_key:
        if "=" not in set_key:
            print("Error: --set requires KEY=VALUE (e.g. store.path=~/words.db).", file=sys.stderr)
            sys.exit(1)
        key_str, _, value_str = set_key.partition("=")
        key_str = key_str.strip()
        if not key_str:
            print("Error: empty key in KEY=VALUE.", file=sys.stderr)
            sys.exit(1)
        value = _parse_set_value(value_str)

        # --config names the file to edit; otherwise the global config
        target_path = Path(config_path) if config_path else global_config_path()
        existing = _load_target_config(target_path)
        _set_nested_key(existing, key_str, value)
        save_config(target_path, existing)
        print(f"Set {key_str} = {json.dumps(value)} in {target_path.as_posix()}.")

    if show:
        config = load_config(Path(config_path) if config_path else None)
        source_note = "defaults + global"
        if config_path:
            source_note += f" + {Path(config_path).as_posix()}"
        print(f"# Config: {source_note}")
        print(json.dumps(config, indent=2))
