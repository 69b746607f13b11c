# =============================================================================
# tests/unit/test_report_service.py
# Unit Tests for ReportService
# =============================================================================

import pytest

from agriscan_core.classification import ImageUpload
from agriscan_core.errors import ImageValidationError
from agriscan_core.services import REGIONS, ReportFormData, ReportService

MB = 1024 * 1024


@pytest.fixture
def reports(no_sleep, fixed_clock):
    return ReportService(sleep=no_sleep, clock=fixed_clock)


@pytest.fixture
def complete_form():
    return ReportFormData(
        farmer_name="Juan dela Cruz",
        contact_number="09171234567",
        farm_location="Brgy. San Isidro, Cabanatuan",
        region=REGIONS[4],
        disease_name="Orange leaf",
        description="Leaves turn orange from the tip",
        symptoms="Orange tips, stunted tillers",
        consent_to_contact=True,
    )


def _image(name="leaf.jpg", mime_type="image/jpeg", size=MB):
    return ImageUpload(name=name, mime_type=mime_type, size=size)


class TestReportValidation:

    def test_complete_form_is_valid(self, complete_form):
        assert ReportService.validate(complete_form) is None

    @pytest.mark.parametrize("field,message", [
        ("farmer_name", "Farmer name is required"),
        ("contact_number", "Contact number is required"),
        ("farm_location", "Farm location is required"),
        ("region", "Region is required"),
        ("disease_name", "Disease name is required"),
        ("description", "Disease description is required"),
        ("symptoms", "Symptoms are required"),
    ])
    def test_required_fields(self, complete_form, field, message):
        setattr(complete_form, field, "  ")
        assert ReportService.validate(complete_form) == message

    def test_first_problem_reported(self, complete_form):
        complete_form.farmer_name = ""
        complete_form.symptoms = ""
        assert ReportService.validate(complete_form) == "Farmer name is required"

    def test_consent_required(self, complete_form):
        complete_form.consent_to_contact = False
        assert ReportService.validate(complete_form) == "Consent to contact is required"

    def test_optional_fields_may_be_blank(self, complete_form):
        complete_form.email = ""
        complete_form.affected_area = ""
        complete_form.consent_to_share = False
        assert ReportService.validate(complete_form) is None

    def test_unknown_urgency(self, complete_form):
        complete_form.urgency_level = "panic"
        assert "Urgency level" in ReportService.validate(complete_form)

    def test_to_dict_camel_case(self, complete_form):
        raw = complete_form.to_dict()
        assert raw["farmerName"] == "Juan dela Cruz"
        assert raw["consentToContact"] is True
        assert raw["spreadingRate"] == "moderate"
        assert len(raw) == 15


class TestReportImages:

    def test_accepts_and_rejects(self, reports):
        checked = reports.validate_images([], [
            _image("ok.jpg"),
            _image("notes.pdf", mime_type="application/pdf"),
            _image("huge.jpg", size=6 * MB),
        ])

        assert [i.name for i in checked["accepted"]] == ["ok.jpg"]
        assert checked["rejected"] == [
            ("notes.pdf", "notes.pdf is not an image file"),
            ("huge.jpg", "huge.jpg is too large. Maximum size is 5MB"),
        ]

    def test_limit_counts_existing_images(self, reports):
        existing = [_image(f"{i}.jpg") for i in range(4)]
        with pytest.raises(ImageValidationError, match="Maximum 5 images allowed"):
            reports.validate_images(existing, [_image("a.jpg"), _image("b.jpg")])

    def test_exactly_five_allowed(self, reports):
        existing = [_image(f"{i}.jpg") for i in range(4)]
        checked = reports.validate_images(existing, [_image("last.jpg")])
        assert len(checked["accepted"]) == 1


class TestPendingUploads:
    """Uploader contents against attached and removed photos"""

    def test_new_files_only(self):
        picked = [_image("a.jpg"), _image("b.jpg")]
        new, dismissed = ReportService.pending_uploads(picked, [_image("a.jpg")], [])
        assert [f.name for f in new] == ["b.jpg"]
        assert dismissed == []

    def test_removed_photo_not_reattached(self):
        picked = [_image("a.jpg"), _image("b.jpg")]
        attached = [_image("a.jpg")]

        new, dismissed = ReportService.pending_uploads(picked, attached, ["b.jpg"])

        assert new == []
        assert dismissed == ["b.jpg"]

    def test_dismissal_dropped_once_file_leaves_uploader(self):
        new, dismissed = ReportService.pending_uploads([_image("a.jpg")], [], ["b.jpg"])
        assert [f.name for f in new] == ["a.jpg"]
        assert dismissed == []

        again, _ = ReportService.pending_uploads([_image("b.jpg")], [], dismissed)
        assert [f.name for f in again] == ["b.jpg"]

    def test_empty_uploader(self):
        assert ReportService.pending_uploads([], [_image("a.jpg")], ["a.jpg"]) == ([], [])


class TestReportSubmission:

    def test_submit_online(self, reports, complete_form, no_sleep):
        result = reports.submit(complete_form, [_image("a.jpg")], is_online=True)

        assert result.success
        report = result.data
        assert report["reportId"] == "RPT-1700000000500"
        assert report["images"] == ["a.jpg"]
        assert report["farmerName"] == "Juan dela Cruz"
        assert "submittedAt" in report
        assert no_sleep.delays == [2.0]
        assert reports.submitted == [report]

    def test_submit_offline_blocked(self, reports, complete_form, no_sleep):
        result = reports.submit(complete_form, [], is_online=False)

        assert not result.success
        assert result.error == "Internet connection required to submit reports"
        assert result.error_code == "NET_001"
        assert no_sleep.delays == []
        assert reports.submitted == []

    def test_submit_invalid_form(self, reports, complete_form):
        complete_form.region = ""
        result = reports.submit(complete_form, [], is_online=True)

        assert not result.success
        assert result.error == "Region is required"
        assert result.error_code == "FORM_001"

    def test_unexpected_failure_message(self, complete_form, fixed_clock):
        def broken(seconds):
            raise RuntimeError("socket closed")

        service = ReportService(sleep=broken, clock=fixed_clock)
        result = service.submit(complete_form, [], is_online=True)

        assert not result.success
        assert result.error == "Failed to submit report. Please try again."
