# =============================================================================
# agriscan_core/classification/simulated_classifier.py
# Placeholder Rice Disease Classifier
# =============================================================================
"""
Stand-in for an on-device disease model.

No pixels are looked at. The "detection" is picked from the file name when
it mentions a known disease and at random otherwise, with a jittered
confidence and, now and then, a weaker second guess. Swap ``analyze_image``
for a real inference backend; do not tune this one.
"""

from __future__ import annotations
import hashlib
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from agriscan_core.data.models import check_severity
from agriscan_core.errors import ImageValidationError
from agriscan_core.logging import get_logger, LogContext

logger = get_logger(__name__)

MB = 1024 * 1024
MAX_IMAGE_BYTES = 10 * MB
SUPPORTED_FORMATS = ("image/jpeg", "image/jpg", "image/png", "image/webp")

SCAN_DELAY_RANGE = (2.0, 4.0)      # seconds
CONFIDENCE_FLOOR = 0.5
CONFIDENCE_CEILING = 0.95
CONFIDENCE_JITTER = 0.2
SECONDARY_FLOOR = 0.3
SECONDARY_CHANCE_THRESHOLD = 0.7   # draw above this adds a second detection


@dataclass(frozen=True)
class KnownDisease:
    disease_id: str
    disease_name: str
    base_confidence: float
    severity: str
    keyword: str


# Order matters: the first keyword found in the file name wins.
KNOWN_DISEASES: Tuple[KnownDisease, ...] = (
    KnownDisease("d1", "Rice Blast", 0.85, "High", "blast"),
    KnownDisease("d2", "Bacterial Leaf Blight", 0.78, "Medium", "blight"),
    KnownDisease("d3", "Brown Spot", 0.72, "Medium", "spot"),
    KnownDisease("d4", "Sheath Blight", 0.68, "High", "sheath"),
    KnownDisease("d5", "Tungro Virus", 0.65, "High", "tungro"),
)


@dataclass(frozen=True)
class ImageUpload:
    """An image handed to the scanner."""
    name: str
    mime_type: str
    size: int
    data: bytes = b""

    @classmethod
    def from_uploaded_file(cls, uploaded) -> ImageUpload:
        """Build from a Streamlit UploadedFile."""
        data = uploaded.getvalue()
        return cls(
            name=uploaded.name,
            mime_type=uploaded.type or "",
            size=getattr(uploaded, "size", len(data)),
            data=data,
        )

    @property
    def size_mb(self) -> float:
        return self.size / MB

    @property
    def fingerprint(self) -> str:
        """Identifies the photo itself; camera captures all share one file name."""
        digest = hashlib.sha1(self.data).hexdigest()[:16]
        return f"{self.name}:{self.size}:{digest}"


@dataclass
class DiseaseDetectionResult:
    disease_id: str
    disease_name: str
    confidence: float
    description: str
    severity: str

    def __post_init__(self):
        check_severity(self.severity)
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {self.confidence}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diseaseId": self.disease_id,
            "diseaseName": self.disease_name,
            "confidence": self.confidence,
            "description": self.description,
            "severity": self.severity,
        }


@dataclass
class ImageAnalysisResult:
    success: bool
    results: List[DiseaseDetectionResult] = field(default_factory=list)
    error: Optional[str] = None
    processing_time_ms: int = 0

    @property
    def top(self) -> Optional[DiseaseDetectionResult]:
        return self.results[0] if self.results else None


# =============================================================================
# VALIDATION
# =============================================================================

def get_supported_formats() -> List[str]:
    return list(SUPPORTED_FORMATS)


def validate_image(upload: ImageUpload, max_bytes: int = MAX_IMAGE_BYTES) -> None:
    """
    Check an upload against the supported formats and size limit before it
    is accepted by the scanner page.

    Raises:
        ImageValidationError: unsupported format or file too large
    """
    if upload.mime_type not in SUPPORTED_FORMATS:
        raise ImageValidationError(
            f"Unsupported format. Please use: {', '.join(SUPPORTED_FORMATS)}",
            filename=upload.name,
            mime_type=upload.mime_type,
        )
    if upload.size > max_bytes:
        raise ImageValidationError(
            f"File too large. Maximum size is {max_bytes // MB}MB.",
            filename=upload.name,
            size=upload.size,
        )


def _check_analyzable(upload: ImageUpload, max_bytes: int) -> None:
    if not upload.mime_type.startswith("image/"):
        raise ImageValidationError(
            "Invalid file type. Please upload an image file.",
            filename=upload.name,
            mime_type=upload.mime_type,
        )
    if upload.size > max_bytes:
        raise ImageValidationError(
            f"Image file too large. Please use an image smaller than {max_bytes // MB}MB.",
            filename=upload.name,
            size=upload.size,
        )


# =============================================================================
# ANALYSIS
# =============================================================================

def _pick_disease(filename: str, rng: np.random.Generator) -> KnownDisease:
    lowered = filename.lower()
    for disease in KNOWN_DISEASES:
        if disease.keyword in lowered:
            return disease
    return KNOWN_DISEASES[int(rng.integers(0, len(KNOWN_DISEASES)))]


def _jittered_confidence(base: float, rng: np.random.Generator) -> float:
    jittered = base + (rng.random() - 0.5) * CONFIDENCE_JITTER
    return float(min(CONFIDENCE_CEILING, max(CONFIDENCE_FLOOR, jittered)))


def analyze_image(
    upload: ImageUpload,
    rng: Optional[np.random.Generator] = None,
    sleep: Callable[[float], None] = time.sleep,
    delay_range: Tuple[float, float] = SCAN_DELAY_RANGE,
    max_bytes: int = MAX_IMAGE_BYTES,
) -> ImageAnalysisResult:
    """
    Produce a simulated detection for an uploaded leaf image.

    Args:
        upload: The image to analyze
        rng: Random source (default: fresh numpy Generator)
        sleep: Delay function, replaced by a no-op in tests
        delay_range: Bounds of the artificial processing delay in seconds
        max_bytes: Size limit

    Returns:
        ImageAnalysisResult; validation problems come back as
        ``success=False`` with the message in ``error``.
    """
    rng = rng if rng is not None else np.random.default_rng()
    start = time.perf_counter()

    def _elapsed_ms() -> int:
        return int((time.perf_counter() - start) * 1000)

    try:
        _check_analyzable(upload, max_bytes)
    except ImageValidationError as e:
        logger.warning(f"Rejected scan of {upload.name}: {e.message}")
        return ImageAnalysisResult(success=False, error=e.message,
                                   processing_time_ms=_elapsed_ms())

    with LogContext(logger, f"Analyzing {upload.name}"):
        low, high = delay_range
        sleep(low + rng.random() * (high - low))

        primary = _pick_disease(upload.name, rng)
        confidence = _jittered_confidence(primary.base_confidence, rng)

        results = [
            DiseaseDetectionResult(
                disease_id=primary.disease_id,
                disease_name=primary.disease_name,
                confidence=round(confidence, 2),
                description=f"Detected {primary.disease_name} with {round(confidence * 100)}% confidence",
                severity=primary.severity,
            )
        ]

        if rng.random() > SECONDARY_CHANCE_THRESHOLD:
            secondary = next(d for d in KNOWN_DISEASES if d.disease_id != primary.disease_id)
            secondary_confidence = max(SECONDARY_FLOOR, confidence - 0.2 - rng.random() * 0.2)
            results.append(
                DiseaseDetectionResult(
                    disease_id=secondary.disease_id,
                    disease_name=secondary.disease_name,
                    confidence=round(secondary_confidence, 2),
                    description=f"Possible {secondary.disease_name} with {round(secondary_confidence * 100)}% confidence",
                    severity=secondary.severity,
                )
            )

    results.sort(key=lambda r: r.confidence, reverse=True)
    return ImageAnalysisResult(success=True, results=results,
                               processing_time_ms=_elapsed_ms())


# =============================================================================
# MODEL STATUS
# =============================================================================

def get_model_status() -> Dict[str, Any]:
    # Nothing to load for the placeholder
    return {"loaded": True, "loading": False, "error": None}


def preload_model(sleep: Callable[[float], None] = time.sleep) -> bool:
    try:
        sleep(1.0)
        return True
    except Exception as e:
        logger.error(f"Failed to preload model: {e}")
        return False
