# src/storage/key_value_store.py

"""Synchronous string key-value stores backing inventory persistence."""

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

from src.config.settings import Settings

logger = logging.getLogger("inventory_tracker.storage")

_SCHEMA = """\
CREATE TABLE IF NOT EXISTS storage (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class StorageUnavailableError(Exception):
    """The underlying store rejected a read or write."""


class KeyValueStore(Protocol):
    """Minimal synchronous string store, shaped like browser localStorage."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*; raise StorageUnavailableError on failure."""
        ...


def _size_of(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class MemoryKeyValueStore:
    """Dict-backed store with optional quota and availability switches."""

    def __init__(
        self,
        quota_bytes: int | None = None,
        available: bool = True,
    ) -> None:
        self._data: dict[str, str] = {}
        self.quota_bytes = quota_bytes
        self.available = available

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when absent."""
        if not self.available:
            raise StorageUnavailableError("Storage is disabled")
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value, enforcing the quota over all keys."""
        if not self.available:
            raise StorageUnavailableError("Storage is disabled")
        if self.quota_bytes is not None:
            used = sum(
                _size_of(k, v) for k, v in self._data.items() if k != key
            )
            if used + _size_of(key, value) > self.quota_bytes:
                raise StorageUnavailableError(
                    f"Quota of {self.quota_bytes} bytes exceeded"
                )
        self._data[key] = value


class SqliteKeyValueStore:
    """SQLite-backed store holding one row per key."""

    def __init__(
        self,
        db_path: Path | None = None,
        quota_bytes: int | None = None,
    ) -> None:
        path = db_path or Settings.STORAGE_PATH
        self.quota_bytes = quota_bytes
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(path))
            self._conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise StorageUnavailableError(
                f"Cannot open storage at {path}: {exc}"
            ) from exc
        logger.debug("SqliteKeyValueStore opened at %s", path)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when absent."""
        try:
            row = self._conn.execute(
                "SELECT value FROM storage WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageUnavailableError(str(exc)) from exc
        return None if row is None else str(row[0])

    def set(self, key: str, value: str) -> None:
        """Insert or replace a value, enforcing the optional quota."""
        try:
            if self.quota_bytes is not None:
                row = self._conn.execute(
                    "SELECT COALESCE(SUM(LENGTH(CAST(key AS BLOB))"
                    " + LENGTH(CAST(value AS BLOB))), 0)"
                    " FROM storage WHERE key != ?",
                    (key,),
                ).fetchone()
                if int(row[0]) + _size_of(key, value) > self.quota_bytes:
                    raise StorageUnavailableError(
                        f"Quota of {self.quota_bytes} bytes exceeded"
                    )
            with self._conn:
                self._conn.execute(
                    "INSERT INTO storage (key, value) VALUES (?, ?)"
                    " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise StorageUnavailableError(str(exc)) from exc
