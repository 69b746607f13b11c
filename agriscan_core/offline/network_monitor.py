# =============================================================================
# agriscan_core/offline/network_monitor.py
# Network Status Detection and Observer Registration
# =============================================================================
"""
NetworkMonitor - Tracks online/offline transitions for the current session.

Features:
- Connectivity events applied from the platform (browser toggle, probes)
- Sticky ``was_offline`` flag for the life of the session
- Explicit observer registration with a teardown callable
- Optional background probe thread
"""

from __future__ import annotations
import socket
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_PROBE_HOSTS: Tuple[Tuple[str, int], ...] = (
    ("8.8.8.8", 53),        # Google DNS
    ("1.1.1.1", 53),        # Cloudflare DNS
    ("208.67.222.222", 53), # OpenDNS
)


@dataclass(frozen=True)
class NetworkStatus:
    """Snapshot of the connectivity state handed to observers and pages."""
    is_online: bool = True
    was_offline: bool = False

    @property
    def is_offline(self) -> bool:
        return not self.is_online

    def to_dict(self) -> dict:
        return {
            "isOnline": self.is_online,
            "isOffline": self.is_offline,
            "wasOffline": self.was_offline,
        }


Observer = Callable[[NetworkStatus], None]


class NetworkMonitor:
    """
    Observes connectivity transitions.

    ``is_online`` reflects the last connectivity event. ``was_offline``
    becomes True on the first offline event and never resets.

    Usage:
        monitor = get_network_monitor()
        unsubscribe = monitor.subscribe(lambda status: print(status))
        monitor.handle_offline()
        unsubscribe()
    """

    CHECK_INTERVAL_ONLINE = 30      # Seconds between probes when online
    CHECK_INTERVAL_OFFLINE = 10     # Seconds between probes when offline
    CONNECTION_TIMEOUT = 3          # Timeout for a single probe
    IDLE_TIMEOUT = 300              # Probe thread exits after this long without a heartbeat

    def __init__(
        self,
        initial_online: bool = True,
        probe_hosts: Optional[Sequence[Tuple[str, int]]] = None,
        probe_timeout: Optional[float] = None,
    ):
        self._is_online = initial_online
        self._was_offline = not initial_online
        self._observers: List[Observer] = []
        self._lock = threading.RLock()
        self._probe_hosts = tuple(probe_hosts or DEFAULT_PROBE_HOSTS)
        self._probe_timeout = probe_timeout or self.CONNECTION_TIMEOUT
        self._monitor_thread: Optional[threading.Thread] = None
        self._stop_monitoring = threading.Event()
        self._last_heartbeat = time.monotonic()
        self.last_check: Optional[datetime] = None
        self.last_online: Optional[datetime] = datetime.now() if initial_online else None

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def status(self) -> NetworkStatus:
        with self._lock:
            return NetworkStatus(is_online=self._is_online, was_offline=self._was_offline)

    @property
    def is_online(self) -> bool:
        return self._is_online

    @property
    def is_offline(self) -> bool:
        return not self._is_online

    @property
    def was_offline(self) -> bool:
        return self._was_offline

    # =========================================================================
    # CONNECTIVITY EVENTS
    # =========================================================================

    def handle_online(self) -> NetworkStatus:
        """Apply an 'online' event."""
        with self._lock:
            changed = not self._is_online
            self._is_online = True
            self.last_online = datetime.now()
            status = self.status
        if changed:
            logger.info("Connection status changed: offline -> online")
            self._notify(status)
        return status

    def handle_offline(self) -> NetworkStatus:
        """Apply an 'offline' event. Marks the session as having been offline."""
        with self._lock:
            changed = self._is_online
            self._is_online = False
            self._was_offline = True
            status = self.status
        if changed:
            logger.info("Connection status changed: online -> offline")
            self._notify(status)
        return status

    def set_online(self, online: bool) -> NetworkStatus:
        return self.handle_online() if online else self.handle_offline()

    def force_offline(self) -> NetworkStatus:
        """Force offline mode (user preference or testing)."""
        logger.info("Forced offline mode")
        return self.handle_offline()

    # =========================================================================
    # PROBING
    # =========================================================================

    def _probe(self) -> bool:
        """Try a TCP connect to each probe host; any success means online."""
        for host, port in self._probe_hosts:
            try:
                with socket.create_connection((host, port), timeout=self._probe_timeout):
                    return True
            except OSError:
                continue
        return False

    def check_connection(self) -> NetworkStatus:
        """Probe connectivity now and apply the result as an event."""
        self.last_check = datetime.now()
        return self.set_online(self._probe())

    @property
    def is_monitoring(self) -> bool:
        return self._monitor_thread is not None and self._monitor_thread.is_alive()

    def heartbeat(self) -> None:
        """Mark the owning session as still active."""
        self._last_heartbeat = time.monotonic()

    def start_monitoring(
        self,
        interval_online: Optional[float] = None,
        interval_offline: Optional[float] = None,
        idle_timeout: Optional[float] = None,
    ) -> None:
        """
        Start background connectivity probing, or keep it alive.

        Each call counts as a heartbeat. The probe thread ends by itself once
        ``idle_timeout`` seconds pass without one, so a session that is gone
        stops probing.
        """
        self.heartbeat()
        if self.is_monitoring:
            return

        online_wait = interval_online or self.CHECK_INTERVAL_ONLINE
        offline_wait = interval_offline or self.CHECK_INTERVAL_OFFLINE
        idle_limit = idle_timeout or self.IDLE_TIMEOUT

        def _loop() -> None:
            while not self._stop_monitoring.is_set():
                wait = online_wait if self.is_online else offline_wait
                if self._stop_monitoring.wait(timeout=wait):
                    break
                if time.monotonic() - self._last_heartbeat > idle_limit:
                    logger.info("Network monitoring idle, stopping probe thread")
                    break
                try:
                    self.check_connection()
                except Exception as e:
                    logger.error(f"Error in connection check: {e}")

        self._stop_monitoring.clear()
        self._monitor_thread = threading.Thread(
            target=_loop,
            daemon=True,
            name="NetworkMonitor",
        )
        self._monitor_thread.start()
        logger.debug("Network monitoring started")

    def stop_monitoring(self) -> None:
        """Stop background probing."""
        self._stop_monitoring.set()
        if self._monitor_thread:
            self._monitor_thread.join(timeout=5)
            self._monitor_thread = None
        logger.debug("Network monitoring stopped")

    # =========================================================================
    # OBSERVERS
    # =========================================================================

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register an observer for connectivity changes.

        Returns:
            A callable that removes the observer again
        """
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

        def _unsubscribe() -> None:
            self.unsubscribe(observer)

        return _unsubscribe

    def unsubscribe(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _notify(self, status: NetworkStatus) -> None:
        with self._lock:
            observers: Iterable[Observer] = list(self._observers)
        for observer in observers:
            try:
                observer(status)
            except Exception as e:
                logger.error(f"Error in network observer: {e}")

    def get_status_display(self) -> dict:
        """Status information for UI display."""
        return {
            **self.status.to_dict(),
            "lastCheck": self.last_check.isoformat() if self.last_check else None,
            "lastOnline": self.last_online.isoformat() if self.last_online else None,
            "observers": self.observer_count,
        }


# Process-wide accessor
_network_monitor: Optional[NetworkMonitor] = None
_monitor_lock = threading.Lock()


def get_network_monitor() -> NetworkMonitor:
    """
    Get the shared NetworkMonitor, built from the app configuration.

    Returns:
        NetworkMonitor singleton
    """
    global _network_monitor
    if _network_monitor is None:
        with _monitor_lock:
            if _network_monitor is None:
                from agriscan_core.config import get_config

                config = get_config()
                _network_monitor = NetworkMonitor(
                    initial_online=not config.force_offline,
                    probe_hosts=config.probe_hosts,
                    probe_timeout=config.probe_timeout,
                )
    return _network_monitor


def reset_network_monitor() -> None:
    """Drop the shared monitor (tests and app restarts)."""
    global _network_monitor
    with _monitor_lock:
        if _network_monitor is not None:
            _network_monitor.stop_monitoring()
        _network_monitor = None
