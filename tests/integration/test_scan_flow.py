# =============================================================================
# tests/integration/test_scan_flow.py
# Integration Tests: scan -> details -> vendors with bundled content
# =============================================================================

import numpy as np
import pytest

from agriscan_core.classification import ImageUpload
from agriscan_core.data import find_disease, load_diseases, load_vendors
from agriscan_core.services import ScannerService, VendorService


@pytest.fixture(scope="module")
def bundled_diseases():
    return load_diseases()


class TestScanToDetails:

    @pytest.mark.parametrize("filename", ["blast.jpg", "blight.jpg", "spot.jpg",
                                          "sheath.jpg", "tungro.jpg", "IMG_2024.jpg"])
    def test_every_result_links_to_a_disease(self, bundled_diseases, filename, no_sleep):
        scanner = ScannerService(rng=np.random.default_rng(7), sleep=no_sleep)
        result = scanner.scan(ImageUpload(name=filename, mime_type="image/jpeg", size=2048))

        assert result.success
        for detection in result.results:
            disease = find_disease(bundled_diseases, detection.disease_id)
            assert disease.name == detection.disease_name
            assert disease.severity == detection.severity

    def test_seeded_scans_are_reproducible(self, no_sleep):
        upload = ImageUpload(name="field.png", mime_type="image/png", size=4096)
        first = ScannerService(rng=np.random.default_rng(11), sleep=no_sleep).scan(upload)
        second = ScannerService(rng=np.random.default_rng(11), sleep=no_sleep).scan(upload)
        assert [r.to_dict() for r in first.results] == [r.to_dict() for r in second.results]

    def test_vendors_for_detected_disease(self, no_sleep):
        scanner = ScannerService(rng=np.random.default_rng(3), sleep=no_sleep)
        top = scanner.scan(ImageUpload(name="blast.jpg", mime_type="image/jpeg", size=10)).top

        vendors = VendorService(load_vendors()).filter(top.disease_name)

        assert vendors
        assert all(top.disease_name in v.specialties for v in vendors)
