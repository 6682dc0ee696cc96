# File: src/services/storage.py
"""
Key/value persistence port and its implementations.
Values are opaque strings (JSON text written by the snapshot service).
"""

import sqlite3
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from src.core.config_manager import Config
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class KeyValueStore(ABC):
    """Port for independently keyed string entries."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, overwriting any previous one."""


class MemoryKeyValueStore(KeyValueStore):
    """Process-local store, used in tests and as a throwaway backend."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """
    Stores entries in a single SQLite table.

    A connection is opened per operation so the store can be used from the
    background writer thread.
    """

    TABLE = "PlannerState"

    def __init__(self, db_path: Path = Config.DB_FILE):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._get_db_connection() as conn:
            conn.execute(
                f"CREATE TABLE IF NOT EXISTS {self.TABLE} "
                "(key TEXT PRIMARY KEY, value TEXT)"
            )
        conn.close()
        logger.debug(f"Key/value store ready at {self.db_path}")

    def _get_db_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def get_item(self, key: str) -> Optional[str]:
        conn = self._get_db_connection()
        try:
            cursor = conn.execute(f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,))
            row = cursor.fetchone()
        finally:
            conn.close()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_db_connection()
        try:
            with conn:
                conn.execute(
                    f"INSERT OR REPLACE INTO {self.TABLE} (key, value) VALUES (?, ?)",
                    (key, value),
                )
        finally:
            conn.close()
