# =============================================================================
# agriscan_core/errors/__init__.py
# Centralized Error Handling for AgriScan
# =============================================================================

from .exceptions import (
    AgriScanError,
    ImageValidationError,
    DataLoadError,
    FormValidationError,
    OfflineActionError,
    ConfigurationError,
)

from .handlers import (
    handle_error,
    safe_execute,
    ErrorContext,
    error_boundary,
)

__all__ = [
    # Exceptions
    "AgriScanError",
    "ImageValidationError",
    "DataLoadError",
    "FormValidationError",
    "OfflineActionError",
    "ConfigurationError",
    # Handlers
    "handle_error",
    "safe_execute",
    "ErrorContext",
    "error_boundary",
]
