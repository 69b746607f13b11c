# =============================================================================
# agriscan_core/offline/__init__.py
# Offline-First Architecture for AgriScan
# =============================================================================
"""
Offline-First Architecture Module

Everything a farmer needs in the field (scanner, translator, disease and
vendor content) works without a connection. Actions that must reach someone
else are gated on connectivity, and edits made offline are kept on the
device.

Architecture:
------------
    NetworkMonitor ──► resolve_capabilities()  (what can run right now)
          │
          ▼
    LocalFirstStore ──► LocalStorage (SQLite on the device)
          │
          └──► "sent to server" log entry while online

Usage:
------
from agriscan_core.offline import get_network_monitor, resolve_capabilities

monitor = get_network_monitor()
caps = resolve_capabilities(monitor.is_online)
if caps.can_report_diseases:
    ...
"""

from agriscan_core.offline.network_monitor import (
    NetworkMonitor,
    NetworkStatus,
    get_network_monitor,
    reset_network_monitor,
)

from agriscan_core.offline.capabilities import (
    Capabilities,
    ConnectionQuality,
    resolve_capabilities,
    execute_with_network_check,
)

from agriscan_core.offline.local_storage import (
    LocalStorage,
    get_local_storage,
    LOCAL_DISEASES_KEY,
    RECENT_TRANSLATIONS_KEY,
)

from agriscan_core.offline.local_first_store import (
    LocalFirstStore,
    SyncOutcome,
    SyncRecord,
)

__all__ = [
    # Network status
    "NetworkMonitor",
    "NetworkStatus",
    "get_network_monitor",
    "reset_network_monitor",
    # Capabilities
    "Capabilities",
    "ConnectionQuality",
    "resolve_capabilities",
    "execute_with_network_check",
    # Local storage
    "LocalStorage",
    "get_local_storage",
    "LOCAL_DISEASES_KEY",
    "RECENT_TRANSLATIONS_KEY",
    # Local-first writes
    "LocalFirstStore",
    "SyncOutcome",
    "SyncRecord",
]
