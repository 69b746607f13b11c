# =============================================================================
# agriscan_core/logging/__init__.py
# Centralized Logging Configuration
# =============================================================================

from .config import (
    setup_logging,
    get_logger,
    LogContext,
    parse_log_level,
    bind_device,
    current_device,
    DeviceFilter,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LogContext",
    "parse_log_level",
    "bind_device",
    "current_device",
    "DeviceFilter",
]
