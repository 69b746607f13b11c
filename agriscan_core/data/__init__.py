# agriscan_core/data/__init__.py
"""
Bundled content for the app: the disease encyclopedia, the vendor directory
and the English-Filipino dictionary.
"""
from .models import Disease, Vendor, SEVERITIES
from .content import (
    load_diseases,
    load_vendors,
    load_translations,
    find_disease,
    diseases_to_frame,
    severity_counts,
)

__all__ = [
    "Disease",
    "Vendor",
    "SEVERITIES",
    "load_diseases",
    "load_vendors",
    "load_translations",
    "find_disease",
    "diseases_to_frame",
    "severity_counts",
]
