# =============================================================================
# agriscan_core/errors/exceptions.py
# Exception Hierarchy for AgriScan
# =============================================================================

from typing import Optional, Dict, Any


class AgriScanError(Exception):
    """
    Base exception for all AgriScan errors.

    Subclasses set ``code`` and, where it makes sense, ``default_message``.
    Keyword context passed to the constructor (``filename=``, ``field=``,
    ...) is merged into ``details``; ``None`` values are dropped.

    Attributes:
        message: Human-readable error description, safe to show to farmers
        code: Machine-readable error code (e.g., "SCAN_001")
        details: Additional context as a dictionary
        recoverable: Whether the view can carry on after showing the error
    """

    code = "AGRI_000"
    default_message = "Something went wrong."
    recoverable = True

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **context: Any,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = dict(details or {})
        self.details.update({k: v for k, v in context.items() if v is not None})

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.details:
            base += f" | Details: {self.details}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Flat form for log records"""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


class ImageValidationError(AgriScanError):
    """Uploaded image has the wrong type or size. Context: filename, mime_type, size."""
    code = "SCAN_001"
    default_message = "Invalid image."


class DataLoadError(AgriScanError):
    """A bundled content document is missing or malformed. Context: source."""
    code = "DATA_001"
    default_message = "Failed to load data."


class FormValidationError(AgriScanError):
    """A submitted form is incomplete or inconsistent. Context: field."""
    code = "FORM_001"
    default_message = "Please fill in all required fields."


class OfflineActionError(AgriScanError):
    """A network-only action was attempted offline. Context: action."""
    code = "NET_001"
    default_message = "This action requires an internet connection."


class ConfigurationError(AgriScanError):
    """Settings are invalid; the app cannot run. Context: config_key, expected_type."""
    code = "CONFIG_001"
    default_message = "Invalid configuration."
    recoverable = False
