"""Wire the stores together from configuration (used by the CLI commands and the MCP server)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from vocablists.catalog import BuiltInCatalog, load_catalog
from vocablists.config import load_config, open_store
from vocablists.lists import ListStore
from vocablists.selection import SelectionStore
from vocablists.settings import SettingsStore
from vocablists.storage import KeyValueStoreBase
from vocablists.validation import PatternWordValidator


@dataclass
class Stores:
    """One backend plus the three component stores sharing it."""

    backend: KeyValueStoreBase
    catalog: BuiltInCatalog
    settings: SettingsStore
    lists: ListStore
    selection: SelectionStore

    def close(self) -> None:
        self.backend.close()

    def __enter__(self) -> Stores:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def build_stores(config: dict[str, Any], backend: KeyValueStoreBase | None = None) -> Stores:
    """Create Stores from merged config; backend overrides config['store'] when given."""
    if backend is None:
        backend = open_store(config)
    catalog = load_catalog((config.get("builtin_lists") or {}).get("path"))
    pattern = (config.get("validation") or {}).get("word_pattern") or "^[a-z]+$"
    lists = ListStore(backend, PatternWordValidator(pattern))
    return Stores(
        backend=backend,
        catalog=catalog,
        settings=SettingsStore(backend),
        lists=lists,
        selection=SelectionStore(backend, catalog, lists),
    )


def config_from_args(args: Any) -> dict[str, Any]:
    """Merged config honoring the global --config and --store flags on parsed CLI args."""
    config_path = getattr(args, "config", None)
    config = load_config(Path(config_path) if config_path else None)
    store = getattr(args, "store", None)
    if store:
        config.setdefault("store", {})
        config["store"]["backend"] = "sqlite"
        config["store"]["path"] = str(store)
    return config


def open_stores(args: Any) -> Stores:
    return build_stores(config_from_args(args))
