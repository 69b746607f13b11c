# =============================================================================
# agriscan_core/services/report_service.py
# Unknown-Disease Report Submission
# =============================================================================
"""
Report form handling for farmers who find a disease the app does not know.

Reports need a connection. There is no receiving endpoint yet: a submitted
report is logged and returned, and the form data is then discarded.
"""

from __future__ import annotations
import time
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from .base_service import BaseService, ServiceResult, UNEXPECTED_ERROR
from agriscan_core.classification import ImageUpload
from agriscan_core.errors import (
    FormValidationError,
    ImageValidationError,
    OfflineActionError,
)

MB = 1024 * 1024
MAX_REPORT_IMAGES = 5
MAX_REPORT_IMAGE_BYTES = 5 * MB
SUBMIT_DELAY = 2.0  # seconds

SPREADING_RATES = ("slow", "moderate", "fast")
URGENCY_LEVELS = ("low", "medium", "high", "critical")

REGIONS = [
    "National Capital Region (NCR)",
    "Cordillera Administrative Region (CAR)",
    "Region I (Ilocos Region)",
    "Region II (Cagayan Valley)",
    "Region III (Central Luzon)",
    "Region IV-A (CALABARZON)",
    "Region IV-B (MIMAROPA)",
    "Region V (Bicol Region)",
    "Region VI (Western Visayas)",
    "Region VII (Central Visayas)",
    "Region VIII (Eastern Visayas)",
    "Region IX (Zamboanga Peninsula)",
    "Region X (Northern Mindanao)",
    "Region XI (Davao Region)",
    "Region XII (SOCCSKSARGEN)",
    "Region XIII (Caraga)",
    "Bangsamoro Autonomous Region in Muslim Mindanao (BARMM)",
]


@dataclass
class ReportFormData:
    farmer_name: str = ""
    contact_number: str = ""
    email: str = ""
    farm_location: str = ""
    region: str = ""
    disease_name: str = ""
    description: str = ""
    symptoms: str = ""
    affected_area: str = ""
    first_noticed: str = ""
    spreading_rate: str = "moderate"
    previous_treatments: str = ""
    urgency_level: str = "medium"
    consent_to_contact: bool = False
    consent_to_share: bool = False

    def to_dict(self) -> Dict[str, Any]:
        out = {}
        for name, value in asdict(self).items():
            head, *rest = name.split("_")
            out[head + "".join(part.title() for part in rest)] = value
        return out


# Checked in this order; the first missing field is reported.
_REQUIRED_TEXT = (
    ("farmer_name", "Farmer name is required"),
    ("contact_number", "Contact number is required"),
    ("farm_location", "Farm location is required"),
    ("region", "Region is required"),
    ("disease_name", "Disease name is required"),
    ("description", "Disease description is required"),
    ("symptoms", "Symptoms are required"),
)


class ReportService(BaseService):
    """
    Validate and "submit" disease reports.

    Usage:
        service = ReportService()
        problem = service.validate(form)
        if problem is None:
            result = service.submit(form, images, is_online=monitor.is_online)
    """

    def __init__(
        self,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
        submit_delay: float = SUBMIT_DELAY,
        max_images: int = MAX_REPORT_IMAGES,
        max_image_bytes: int = MAX_REPORT_IMAGE_BYTES,
    ):
        super().__init__()
        self._sleep = sleep
        self._clock = clock
        self._submit_delay = submit_delay
        self.max_images = max_images
        self.max_image_bytes = max_image_bytes
        self.submitted: List[Dict[str, Any]] = []

    # =========================================================================
    # VALIDATION
    # =========================================================================

    @staticmethod
    def validate(form: ReportFormData) -> Optional[str]:
        """Return the first problem with the form, or None when it is complete."""
        for field_name, message in _REQUIRED_TEXT:
            if not str(getattr(form, field_name)).strip():
                return message
        if not form.consent_to_contact:
            return "Consent to contact is required"
        if form.spreading_rate not in SPREADING_RATES:
            return "Spreading rate must be slow, moderate or fast"
        if form.urgency_level not in URGENCY_LEVELS:
            return "Urgency level must be low, medium, high or critical"
        return None

    @staticmethod
    def pending_uploads(
        picked: List[Any],
        attached: List[ImageUpload],
        dismissed: List[str],
    ) -> Tuple[List[Any], List[str]]:
        """
        Sort the uploader's current files against what is already attached.

        The uploader keeps every file it was given, so a photo the farmer
        removed would come straight back on the next rerun. ``dismissed``
        names stay out until the file leaves the uploader.

        Returns:
            (files to attach, dismissed names still held by the uploader)
        """
        in_picker = {f.name for f in picked}
        still_dismissed = [name for name in dismissed if name in in_picker]
        skip = {img.name for img in attached} | set(still_dismissed)
        return [f for f in picked if f.name not in skip], still_dismissed

    def validate_images(
        self,
        existing: List[ImageUpload],
        new: List[ImageUpload],
    ) -> Dict[str, Any]:
        """
        Check newly picked images.

        Raises:
            ImageValidationError: when the batch would exceed the image limit

        Returns:
            {"accepted": [...], "rejected": [(name, reason), ...]}
        """
        if len(existing) + len(new) > self.max_images:
            raise ImageValidationError(f"Maximum {self.max_images} images allowed")

        accepted, rejected = [], []
        for upload in new:
            if not upload.mime_type.startswith("image/"):
                rejected.append((upload.name, f"{upload.name} is not an image file"))
            elif upload.size > self.max_image_bytes:
                rejected.append((
                    upload.name,
                    f"{upload.name} is too large. Maximum size is {self.max_image_bytes // MB}MB",
                ))
            else:
                accepted.append(upload)
        return {"accepted": accepted, "rejected": rejected}

    # =========================================================================
    # SUBMISSION
    # =========================================================================

    def submit(
        self,
        form: ReportFormData,
        images: List[ImageUpload],
        is_online: bool,
    ) -> ServiceResult:
        def _submit():
            problem = self.validate(form)
            if problem:
                raise FormValidationError(problem)
            if not is_online:
                raise OfflineActionError("Internet connection required to submit reports",
                                         action="report")

            self._sleep(self._submit_delay)
            report = {
                **form.to_dict(),
                "images": [img.name for img in images],
                "submittedAt": datetime.now().isoformat(),
                "reportId": f"RPT-{int(self._clock() * 1000)}",
            }
            # No transport yet; the log is the delivery
            self.logger.info(f"Report submitted: {report}")
            self.submitted.append(report)
            return report

        result = self.safe_execute("Submitting disease report", _submit)
        if not result and result.error_code == UNEXPECTED_ERROR:
            return ServiceResult.fail("Failed to submit report. Please try again.")
        return result
