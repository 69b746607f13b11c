# =============================================================================
# agriscan_core/offline/capabilities.py
# Feature Availability by Connectivity
# =============================================================================
"""
Which features work without a connection.

Everything that reads bundled content or runs on the device stays available
offline; anything that has to reach another party (reports, database sync,
maps, e-mail) follows the current connectivity.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Callable, Dict, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_OFFLINE_MESSAGE = "This action requires an internet connection."


@dataclass(frozen=True)
class Capabilities:
    """Capability flags for one connectivity state."""
    can_scan_images: bool = True
    can_translate: bool = True
    can_view_diseases: bool = True
    can_view_vendors: bool = True
    can_make_phone_calls: bool = True
    can_report_diseases: bool = True
    can_update_database: bool = True
    can_access_maps: bool = True
    can_send_emails: bool = True

    def to_dict(self) -> Dict[str, bool]:
        """Flags keyed by their camelCase names (canScanImages, ...)."""
        out = {}
        for name, value in asdict(self).items():
            head, *rest = name.split("_")
            out[head + "".join(part.title() for part in rest)] = value
        return out


def resolve_capabilities(is_online: bool) -> Capabilities:
    """Map the current connectivity to the fixed capability table."""
    return Capabilities(
        can_scan_images=True,       # classifier runs locally
        can_translate=True,         # bundled dictionary
        can_view_diseases=True,     # bundled content
        can_view_vendors=True,      # bundled content
        can_make_phone_calls=True,  # tel: links need no data connection
        can_report_diseases=is_online,
        can_update_database=is_online,
        can_access_maps=is_online,
        can_send_emails=is_online,
    )


def execute_with_network_check(
    action: Callable[[], T],
    is_online: bool,
    requires_network: bool = False,
    offline_message: str = DEFAULT_OFFLINE_MESSAGE,
    on_offline: Optional[Callable[[], None]] = None,
) -> Optional[T]:
    """
    Run ``action`` unless it needs the network and we are offline.

    Args:
        action: Zero-argument callable to run
        is_online: Current connectivity
        requires_network: Whether the action needs a connection
        offline_message: Logged when blocked and no ``on_offline`` is given
        on_offline: Called instead of ``action`` when blocked

    Returns:
        The action's result, or None when blocked
    """
    if requires_network and not is_online:
        if on_offline is not None:
            on_offline()
        else:
            logger.warning(offline_message)
        return None

    try:
        return action()
    except Exception as e:
        logger.error(f"Network action failed: {e}")
        raise


@dataclass(frozen=True)
class ConnectionQuality:
    """Connection quality derived from a Network Information 'effectiveType'."""
    connection_type: str = "unknown"
    effective_type: str = "unknown"

    QUALITY_BY_TYPE = {
        "4g": "excellent",
        "3g": "good",
        "2g": "fair",
        "slow-2g": "poor",
    }

    @property
    def quality(self) -> str:
        return self.QUALITY_BY_TYPE.get(self.effective_type, "unknown")

    @property
    def should_optimize_for_slow_connection(self) -> bool:
        return self.effective_type in ("2g", "slow-2g")
