# =============================================================================
# agriscan_core/services/__init__.py
# Service Layer for AgriScan
# Separates business logic from UI presentation
# =============================================================================
"""
Service Layer for AgriScan

Pages create services and render their results; nothing in here draws to
the screen.

Usage Example:
-------------
    from agriscan_core.services import ScannerService, TranslationService

    scanner = ScannerService()
    result = scanner.scan(upload)
    if result.success:
        print(result.results[0].disease_name)

    translator = TranslationService(load_translations(), get_storage())
    print(translator.translate("rice disease").data["filipino"])

Offline-aware writes:
--------------------
    editor = DiseaseEditorService(get_storage(), get_monitor())
    editor.load(load_diseases())
    editor.delete_disease("d3")   # logged as sent online, stored locally offline
"""

from .base_service import BaseService, ServiceResult
from .scanner_service import ScannerService
from .disease_editor_service import DiseaseEditorService, DiseaseFormData
from .translation_service import TranslationService, translate_words
from .vendor_service import VendorService, UserLocation, ALL_REGIONS
from .report_service import ReportService, ReportFormData, REGIONS

__all__ = [
    "BaseService",
    "ServiceResult",
    "ScannerService",
    "DiseaseEditorService",
    "DiseaseFormData",
    "TranslationService",
    "translate_words",
    "VendorService",
    "UserLocation",
    "ALL_REGIONS",
    "ReportService",
    "ReportFormData",
    "REGIONS",
]
