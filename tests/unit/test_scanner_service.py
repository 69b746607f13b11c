# =============================================================================
# tests/unit/test_scanner_service.py
# Unit Tests for ScannerService
# =============================================================================

import pytest

from agriscan_core.classification import ImageUpload
from agriscan_core.services import ScannerService


def _upload(name="blast.jpg", mime_type="image/jpeg", size=1024):
    return ImageUpload(name=name, mime_type=mime_type, size=size)


class TestScannerService:

    def test_check_valid(self):
        assert ScannerService().check(_upload()).success

    def test_check_invalid(self):
        result = ScannerService().check(_upload(mime_type="image/gif"))
        assert not result.success
        assert result.error_code == "SCAN_001"
        assert result.metadata["mime_type"] == "image/gif"

    def test_scan_reports_progress(self, scripted_rng, no_sleep):
        progress = []
        service = ScannerService(rng=scripted_rng(randoms=[0.5, 0.5, 0.1]), sleep=no_sleep)
        service.set_progress_callback(lambda pct, msg: progress.append(pct))

        result = service.scan(_upload())

        assert result.success
        assert result.top.disease_id == "d1"
        assert progress == [5, 100]

    def test_scan_unexpected_error_is_contained(self, no_sleep):
        class BrokenRng:
            def random(self):
                raise RuntimeError("entropy exhausted")

        result = ScannerService(rng=BrokenRng(), sleep=no_sleep).scan(_upload())

        assert not result.success
        assert result.error == "Failed to analyze image. Please try again."

    @pytest.mark.parametrize("severity,icon", [("High", "🔴"), ("Medium", "🟡"),
                                               ("Low", "🟢"), ("Other", "⚪")])
    def test_severity_icon(self, severity, icon):
        assert ScannerService.severity_icon(severity) == icon
