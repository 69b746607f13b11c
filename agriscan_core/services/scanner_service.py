# =============================================================================
# agriscan_core/services/scanner_service.py
# Scanner: validation + analysis with progress reporting
# =============================================================================

from __future__ import annotations
import time
from typing import Callable, Optional, Tuple

import numpy as np

from .base_service import BaseService, ServiceResult
from agriscan_core.classification import (
    ImageUpload,
    ImageAnalysisResult,
    analyze_image,
    validate_image,
    MAX_IMAGE_BYTES,
)

SEVERITY_STYLES = {
    "High": "🔴",
    "Medium": "🟡",
    "Low": "🟢",
}


class ScannerService(BaseService):
    """
    Runs the disease scanner for the scanner page.

    Usage:
        service = ScannerService()
        service.set_progress_callback(lambda pct, msg: bar.progress(pct, text=msg))
        result = service.scan(upload)
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        sleep: Callable[[float], None] = time.sleep,
        delay_range: Tuple[float, float] = (2.0, 4.0),
        max_bytes: int = MAX_IMAGE_BYTES,
    ):
        super().__init__()
        self._rng = rng
        self._sleep = sleep
        self._delay_range = delay_range
        self._max_bytes = max_bytes

    def check(self, upload: ImageUpload) -> ServiceResult:
        """Pre-check an upload before it is accepted."""
        return self.safe_execute(
            f"Validating {upload.name}",
            validate_image, upload, max_bytes=self._max_bytes,
        )

    def scan(self, upload: ImageUpload) -> ImageAnalysisResult:
        """
        Analyze an upload. Failures are reported inside the result and never
        raised; unexpected errors become "Failed to analyze image".
        """
        self._update_progress(5, "Preparing image...")
        try:
            result = analyze_image(
                upload,
                rng=self._rng,
                sleep=self._sleep,
                delay_range=self._delay_range,
                max_bytes=self._max_bytes,
            )
        except Exception as e:
            self.logger.error(f"Analysis failed: {e}", exc_info=True)
            result = ImageAnalysisResult(
                success=False,
                error="Failed to analyze image. Please try again.",
            )
        self._update_progress(100, "Analysis complete" if result.success else "Analysis failed")
        return result

    @staticmethod
    def severity_icon(severity: str) -> str:
        return SEVERITY_STYLES.get(severity, "⚪")
