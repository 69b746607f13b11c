# =============================================================================
# agriscan_core/offline/local_first_store.py
# Local-First Collection Writes
# =============================================================================
"""
LocalFirstStore - applies edits to an in-memory collection first, then either
"sends" them (online) or mirrors the whole collection to local storage
(offline).

There is no transport behind the online branch: the change is logged and
recorded in ``sync_log``. Local-only changes are not re-sent when the
connection comes back, and nothing is merged; the last local write wins.

Once a device copy exists, ``load`` prefers it over the bundled collection,
so online mutations rewrite it too. Without a device copy, online mutations
leave storage alone.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
import logging

from agriscan_core.offline.local_storage import LocalStorage
from agriscan_core.offline.network_monitor import NetworkMonitor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SyncOutcome(Enum):
    """Where a mutation ended up."""
    SENT = "sent"              # online: logged as sent to server
    STORED_LOCALLY = "stored"  # offline: collection written to local storage


@dataclass
class SyncRecord:
    """One mutation and what happened to it."""
    operation: str              # ADD, UPDATE, DELETE
    record_id: Optional[str]
    outcome: SyncOutcome
    payload: Optional[Dict[str, Any]] = None
    created_at: datetime = field(default_factory=datetime.now)


class LocalFirstStore(Generic[T]):
    """
    In-memory collection with local-first persistence.

    Args:
        storage: Device storage used while offline
        monitor: Source of the current connectivity
        key: Storage key for the serialized collection
        serialize: Item -> JSON-compatible dict
        deserialize: JSON dict -> item
        id_of: Item -> identifier
    """

    def __init__(
        self,
        storage: LocalStorage,
        monitor: NetworkMonitor,
        key: str,
        serialize: Callable[[T], Dict[str, Any]],
        deserialize: Callable[[Dict[str, Any]], T],
        id_of: Callable[[T], str],
    ):
        self.storage = storage
        self.monitor = monitor
        self.key = key
        self._serialize = serialize
        self._deserialize = deserialize
        self._id_of = id_of
        self._items: List[T] = []
        self.sync_log: List[SyncRecord] = []

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, default: List[T]) -> List[T]:
        """
        Use the locally stored collection when one exists, else ``default``.
        """
        stored = self.storage.get_json(self.key)
        if isinstance(stored, list):
            self._items = [self._deserialize(item) for item in stored]
            logger.info(f"Loaded {len(self._items)} items from local '{self.key}'")
        else:
            self._items = list(default)
        return self.items

    @property
    def items(self) -> List[T]:
        return list(self._items)

    @property
    def has_local_copy(self) -> bool:
        return self.storage.get_item(self.key) is not None

    def get(self, record_id: str) -> Optional[T]:
        return next((item for item in self._items if self._id_of(item) == record_id), None)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add(self, item: T) -> SyncRecord:
        self._items.append(item)
        return self._persist("ADD", self._id_of(item), item)

    def update(self, record_id: str, item: T) -> SyncRecord:
        """Replace the item with ``record_id``; unknown ids change nothing."""
        self._items = [item if self._id_of(existing) == record_id else existing
                       for existing in self._items]
        return self._persist("UPDATE", record_id, item)

    def delete(self, record_id: str) -> SyncRecord:
        self._items = [item for item in self._items if self._id_of(item) != record_id]
        return self._persist("DELETE", record_id, None)

    def _persist(self, operation: str, record_id: Optional[str], item: Optional[T]) -> SyncRecord:
        payload = copy.deepcopy(self._serialize(item)) if item is not None else None

        if self.monitor.is_online:
            logger.info(f"Sent to server: {operation} {self.key}/{record_id}")
            if self.has_local_copy:
                self._write_local_copy()
                logger.debug(f"Refreshed local '{self.key}' after online {operation}")
            outcome = SyncOutcome.SENT
        else:
            self._write_local_copy()
            logger.info(
                f"Offline: saved {len(self._items)} items to local '{self.key}' "
                f"after {operation} {record_id}"
            )
            outcome = SyncOutcome.STORED_LOCALLY

        record = SyncRecord(operation=operation, record_id=record_id,
                            outcome=outcome, payload=payload)
        self.sync_log.append(record)
        return record

    def _write_local_copy(self) -> None:
        self.storage.set_json(self.key, [self._serialize(i) for i in self._items])

    def clear_local_copy(self) -> None:
        self.storage.remove_item(self.key)
