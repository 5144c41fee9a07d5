"""SQLite implementation of the KeyValueStore interface."""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from vocablists.storage.base import KeyValueStoreBase

logger = logging.getLogger(__name__)

# Schema version in metadata: 1 = kv + metadata tables
SCHEMA_VERSION_CURRENT = "1"

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""


class SQLiteStore(KeyValueStoreBase):
    """Store backend using a single SQLite file (one row per key)."""

    def __init__(self, db_path: Path | str) -> None:
        super().__init__()
        self._db_path = Path(db_path).expanduser()
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        # Same-process threads share one connection; self.lock serializes multi-key operations.
        self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._ensure_schema()
        return self._conn

    def _ensure_schema(self) -> None:
        conn = self._conn
        if conn is None:
            return
        conn.executescript(_SCHEMA_SQL)
        conn.commit()
        # Set initial metadata if missing (new DB)
        cur = conn.execute("SELECT value FROM metadata WHERE key = ?", ("created_at",))
        if cur.fetchone() is None:
            now = datetime.now(timezone.utc).isoformat()
            conn.execute(
                "INSERT OR REPLACE INTO metadata (key, value) VALUES (?, ?), (?, ?)",
                ("created_at", now, "schema_version", SCHEMA_VERSION_CURRENT),
            )
            conn.commit()
            logger.debug("Created store at %s", self._db_path.as_posix())

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> SQLiteStore:
        self._connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def get(self, key: str) -> str | None:
        conn = self._connect()
        row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        return row["value"]

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"store values must be str, got {type(value).__name__}")
        conn = self._connect()
        conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, value),
        )
        conn.commit()

    def delete(self, key: str) -> None:
        conn = self._connect()
        conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        conn.commit()

    def list_keys(self) -> set[str]:
        conn = self._connect()
        return {row["key"] for row in conn.execute("SELECT key FROM kv")}

    def get_metadata(self, key: str) -> str | None:
        """Return metadata value for key, or None."""
        conn = self._connect()
        row = conn.execute("SELECT value FROM metadata WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None
