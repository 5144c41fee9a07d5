"""Create the store file (SQLite backend) with its schema and metadata."""

from __future__ import annotations

import sys
from argparse import Namespace

from vocablists.app import config_from_args
from vocablists.config import open_store, store_path
from vocablists.storage import SQLiteStore


def run(args: Namespace) -> None:
    """Run the init command: open (and thereby create) the configured store."""
    config = config_from_args(args)
    try:
        backend = open_store(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(backend, SQLiteStore):
        print("Store backend is in-memory; nothing to initialize.")
        return
    path = store_path(config)
    existed = path.is_file()
    with backend:
        pass
    if existed:
        print(f"Store already initialized at {path.as_posix()}")
    else:
        print(f"Initialized store at {path.as_posix()}")
