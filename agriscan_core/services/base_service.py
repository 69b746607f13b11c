# =============================================================================
# agriscan_core/services/base_service.py
# Service Base Class and Result Container
# =============================================================================

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Callable

from agriscan_core.logging import get_logger, LogContext
from agriscan_core.errors import AgriScanError

UNEXPECTED_ERROR = "UNKNOWN"

ProgressCallback = Callable[[int, str], None]


@dataclass
class ServiceResult:
    """
    Outcome of a service call.

    Pages branch on the result's truthiness and show ``error`` inline.
    ``metadata`` carries the failing error's details.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, data: Any = None) -> ServiceResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, error_code: str = UNEXPECTED_ERROR,
             metadata: Optional[Dict[str, Any]] = None) -> ServiceResult:
        return cls(success=False, error=error, error_code=error_code,
                   metadata=dict(metadata or {}))

    @classmethod
    def from_error(cls, error: AgriScanError) -> ServiceResult:
        return cls.fail(error.message, error.code, error.details)


class BaseService(ABC):
    """
    Shared plumbing for the AgriScan services: a per-class logger, an
    optional progress callback for long-running work, and ``safe_execute``.

    Usage:
        class ScannerService(BaseService):
            def analyze(self, image) -> ServiceResult:
                return self.safe_execute("Analyzing image", self._classify, image)
    """

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self._progress_callback: Optional[ProgressCallback] = None

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        """``callback(percentage, message)``, e.g. wired to ``st.progress``."""
        self._progress_callback = callback

    def _update_progress(self, percentage: int, message: str = "") -> None:
        if self._progress_callback:
            self._progress_callback(percentage, message)

    def safe_execute(self, operation: str, func: Callable[..., Any],
                     *args, **kwargs) -> ServiceResult:
        """
        Run ``func`` and wrap its return value in a ServiceResult.

        AgriScanError is an expected rejection (bad upload, missing field,
        offline) and is logged as a warning. Any other exception is logged
        with its traceback and reported as UNKNOWN.
        """
        with LogContext(self.logger, operation):
            try:
                return ServiceResult.ok(func(*args, **kwargs))
            except AgriScanError as e:
                self.logger.warning(f"{operation} rejected: {e}")
                return ServiceResult.from_error(e)
            except Exception as e:
                self.logger.error(f"{operation} failed: {e}", exc_info=True)
                return ServiceResult.fail(str(e))
