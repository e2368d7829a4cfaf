# -*- coding: utf-8 -*-
"""
Transient Cache - SQLite-backed key/value store with expiry.

Provides the TransientCache class used to keep the remote theme
catalog between runs so that the catalog endpoint is called at most
once per expiry window.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-02-06
"""

# Standard library
import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any, Callable, Optional, Union

logger = logging.getLogger(__name__)


_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS transients (
    name TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    expires_at REAL NOT NULL,
    stored_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""

_SCHEMA_VERSION_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER NOT NULL
);
"""

_CURRENT_SCHEMA_VERSION = 1


class TransientCache:
    """SQLite-backed cache of JSON values with a per-key time to live.

    Parameters
    ----------
    db_path : Union[str, Path]
        Path to the SQLite database file, usually from
        ``resolve_cache_path``. Pass ``":memory:"`` for a process-local
        cache.
    clock : Callable[[], float]
        Returns the current time in seconds since the epoch.
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        clock: Callable[[], float] = time.time,
    ) -> None:
        if str(db_path) == ':memory:':
            self._db_path = None
            self._conn = sqlite3.connect(':memory:', check_same_thread=False)
        else:
            self._db_path = Path(db_path)
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(
                str(self._db_path), check_same_thread=False
            )
        self._conn.row_factory = sqlite3.Row
        self._clock = clock
        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        self._conn.executescript(_SCHEMA_SQL)
        self._conn.executescript(_SCHEMA_VERSION_SQL)
        self._conn.commit()

        row = self._conn.execute(
            "SELECT version FROM schema_version"
        ).fetchone()
        if row is None:
            self._conn.execute(
                "INSERT INTO schema_version (version) VALUES (?)",
                (_CURRENT_SCHEMA_VERSION,),
            )
            self._conn.commit()

    @property
    def schema_version(self) -> int:
        """Current schema version."""
        row = self._conn.execute(
            "SELECT version FROM schema_version"
        ).fetchone()
        return row['version'] if row else 0

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> 'TransientCache':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under ``key``.

        Parameters
        ----------
        key : str

        Returns
        -------
        Optional[Any]
            The decoded value, or None if missing, expired or unreadable.
        """
        row = self._conn.execute(
            "SELECT value, expires_at FROM transients WHERE name = ?",
            (key,),
        ).fetchone()
        if row is None:
            return None

        if row['expires_at'] <= self._clock():
            logger.debug("Transient '%s' expired", key)
            self.delete(key)
            return None

        try:
            return json.loads(row['value'])
        except json.JSONDecodeError as e:
            logger.warning("Discarding unreadable transient '%s': %s", key, e)
            self.delete(key)
            return None

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``.

        Parameters
        ----------
        key : str
        value : Any
            JSON-serializable value.
        ttl_seconds : float
            Time to live. Must be positive.
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds!r}")

        self._conn.execute(
            """INSERT OR REPLACE INTO transients
            (name, value, expires_at, stored_at)
            VALUES (?, ?, ?, datetime('now'))""",
            (key, json.dumps(value), self._clock() + ttl_seconds),
        )
        self._conn.commit()

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if a value was removed."""
        cursor = self._conn.execute(
            "DELETE FROM transients WHERE name = ?", (key,),
        )
        self._conn.commit()
        return cursor.rowcount > 0

    def purge_expired(self) -> int:
        """Delete every expired transient.

        Returns
        -------
        int
            Number of rows removed.
        """
        cursor = self._conn.execute(
            "DELETE FROM transients WHERE expires_at <= ?", (self._clock(),),
        )
        self._conn.commit()
        return cursor.rowcount
