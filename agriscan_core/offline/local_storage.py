# =============================================================================
# agriscan_core/offline/local_storage.py
# Device-Local Key/Value Storage
# =============================================================================
"""
LocalStorage - SQLite-backed key/value store for data kept on the device.

Features:
- String values, with JSON helpers for collections
- Last write wins; no merge, no versioning
- Thread-local connections
- Namespaces, so each device (browser session) sees only its own keys
"""

from __future__ import annotations
import json
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, List, Optional
import logging

logger = logging.getLogger(__name__)

# Keys used by the app
LOCAL_DISEASES_KEY = "localDiseases"
RECENT_TRANSLATIONS_KEY = "recentTranslations"


class LocalStorage:
    """
    Persistent key/value storage on the local device.

    Usage:
        storage = LocalStorage(Path("local_data/agriscan.db"))
        storage.set_json("recentTranslations", [{"english": "rice", "filipino": "bigas"}])
        storage.get_json("recentTranslations", default=[])

        device = storage.scoped("3f2a9c")   # same file, keys prefixed "3f2a9c:"
    """

    SCHEMA = """
        CREATE TABLE IF NOT EXISTS local_storage (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at TEXT DEFAULT CURRENT_TIMESTAMP
        )
    """

    def __init__(self, db_path: Path, namespace: str = ""):
        """
        Args:
            db_path: Path to the SQLite file (created on first use)
            namespace: Key prefix isolating one device; "" sees every row
        """
        self.db_path = Path(db_path)
        self.namespace = namespace
        self._prefix = f"{namespace}:" if namespace else ""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._local = threading.local()
        self._initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Get thread-local database connection."""
        if getattr(self._local, "connection", None) is None:
            conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self._local.connection = conn
        if not self._initialized:
            self._local.connection.execute(self.SCHEMA)
            self._local.connection.commit()
            self._initialized = True
            logger.info(f"Local storage ready at: {self.db_path}")
        return self._local.connection

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # =========================================================================
    # STRING API (mirrors window.localStorage)
    # =========================================================================

    def scoped(self, namespace: str) -> LocalStorage:
        """A view of the same file holding only ``namespace``'s keys."""
        return LocalStorage(self.db_path, namespace=f"{self._prefix}{namespace}")

    def get_item(self, key: str) -> Optional[str]:
        row = self._get_connection().execute(
            "SELECT value FROM local_storage WHERE key = ?", (self._prefix + key,)
        ).fetchone()
        return row["value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with self.transaction() as conn:
            conn.execute(
                """
                INSERT INTO local_storage (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (self._prefix + key, value, datetime.now().isoformat()),
            )
        logger.debug(f"Stored {len(value)} chars under '{self._prefix}{key}'")

    def remove_item(self, key: str) -> None:
        with self.transaction() as conn:
            conn.execute("DELETE FROM local_storage WHERE key = ?", (self._prefix + key,))

    def keys(self) -> List[str]:
        rows = self._get_connection().execute(
            "SELECT key FROM local_storage WHERE substr(key, 1, ?) = ? ORDER BY key",
            (len(self._prefix), self._prefix),
        ).fetchall()
        return [row["key"][len(self._prefix):] for row in rows]

    def clear(self) -> None:
        """Remove every key in this namespace."""
        with self.transaction() as conn:
            conn.execute(
                "DELETE FROM local_storage WHERE substr(key, 1, ?) = ?",
                (len(self._prefix), self._prefix),
            )

    # =========================================================================
    # JSON HELPERS
    # =========================================================================

    def get_json(self, key: str, default: Any = None) -> Any:
        """
        Read a JSON value. A corrupt value is logged and treated as missing.
        """
        raw = self.get_item(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error decoding local value '{key}': {e}")
            return default

    def set_json(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value, ensure_ascii=False))

    def close(self) -> None:
        conn = getattr(self._local, "connection", None)
        if conn is not None:
            conn.close()
            self._local.connection = None


_local_storage: Optional[LocalStorage] = None
_storage_lock = threading.Lock()


def get_local_storage() -> LocalStorage:
    """Shared LocalStorage at the configured path."""
    global _local_storage
    if _local_storage is None:
        with _storage_lock:
            if _local_storage is None:
                from agriscan_core.config import get_config

                _local_storage = LocalStorage(get_config().storage_path)
    return _local_storage
