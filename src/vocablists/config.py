"""Configuration: default paths, constants, and config loading (defaults + global + explicit file)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from vocablists.storage import KeyValueStoreBase, MemoryStore, SQLiteStore

# Directory under the user's home holding config and the default store
VOCABLISTS_DIR = ".vocablists"
STORE_DB = "store.db"
CONFIG_FILENAME = "config.json"

STORE_BACKENDS = ("sqlite", "memory")


def _global_config_dir() -> Path:
    return Path.home() / VOCABLISTS_DIR


def global_config_path() -> Path:
    """Path to global config file (~/.vocablists/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "store": {
            "backend": "sqlite",
            "path": str(_global_config_dir() / STORE_DB),
        },
        "builtin_lists": {
            "path": None,
        },
        "validation": {
            "word_pattern": "^[a-z]+$",
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from path; return None if file missing, invalid, or not an object."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.vocablists/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.vocablists/config.json) + explicit file.

    config_path (e.g. from --config) is applied last when given and readable.
    """
    merged = load_global_config()
    if config_path is not None:
        data = _load_json(Path(config_path).expanduser())
        if data is not None:
            _deep_merge(merged, data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write config as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def store_path(config: dict[str, Any]) -> Path:
    """Resolved path of the SQLite store from config."""
    store_cfg = config.get("store") or {}
    raw = store_cfg.get("path") or str(_global_config_dir() / STORE_DB)
    return Path(raw).expanduser().resolve()


def open_store(config: dict[str, Any]) -> KeyValueStoreBase:
    """Create the store backend named by config['store']['backend']. Raises ValueError for unknown backends."""
    backend = ((config.get("store") or {}).get("backend") or "sqlite").lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "sqlite":
        return SQLiteStore(store_path(config))
    raise ValueError(
        f"Unknown store backend {backend!r}; expected one of {', '.join(STORE_BACKENDS)}"
    )
