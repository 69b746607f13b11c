"""
Rice disease detection for the scanner page.

Currently backed by a simulated classifier; see simulated_classifier.py.
"""

from .simulated_classifier import (
    ImageUpload,
    DiseaseDetectionResult,
    ImageAnalysisResult,
    KNOWN_DISEASES,
    MAX_IMAGE_BYTES,
    analyze_image,
    validate_image,
    get_supported_formats,
    get_model_status,
    preload_model,
)

__all__ = [
    "ImageUpload",
    "DiseaseDetectionResult",
    "ImageAnalysisResult",
    "KNOWN_DISEASES",
    "MAX_IMAGE_BYTES",
    "analyze_image",
    "validate_image",
    "get_supported_formats",
    "get_model_status",
    "preload_model",
]
