# =============================================================================
# agriscan_core/data/content.py
# Static Content Loading (diseases, vendors, translations)
# =============================================================================
"""
Loaders for the bundled JSON documents.

    data/diseases.json      list of Disease records
    data/vendors.json       list of Vendor records
    data/translations.json  {english_word: filipino_word}

Any failure surfaces as DataLoadError with a short generic message; the
page shows it inline.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from agriscan_core.data.models import Disease, Vendor, SEVERITIES
from agriscan_core.errors import DataLoadError
from agriscan_core.logging import get_logger

logger = get_logger(__name__)

DISEASES_FILE = "diseases.json"
VENDORS_FILE = "vendors.json"
TRANSLATIONS_FILE = "translations.json"


def _data_dir(data_dir: Optional[Path]) -> Path:
    if data_dir is not None:
        return Path(data_dir)
    from agriscan_core.config import get_config
    return get_config().data_dir


def _read_json(path: Path, failure_message: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading {path}: {e}")
        raise DataLoadError(failure_message, source=str(path)) from e


def load_diseases(data_dir: Optional[Path] = None) -> List[Disease]:
    path = _data_dir(data_dir) / DISEASES_FILE
    raw = _read_json(path, "Failed to load disease data")
    try:
        diseases = [Disease.from_dict(item) for item in raw]
    except (KeyError, TypeError, ValueError) as e:
        raise DataLoadError("Failed to load disease data", source=str(path),
                            details={"reason": str(e)}) from e
    logger.info(f"Loaded {len(diseases)} diseases from {path.name}")
    return diseases


def load_vendors(data_dir: Optional[Path] = None) -> List[Vendor]:
    path = _data_dir(data_dir) / VENDORS_FILE
    raw = _read_json(path, "Failed to load vendor data")
    try:
        vendors = [Vendor.from_dict(item) for item in raw]
    except (KeyError, TypeError, ValueError) as e:
        raise DataLoadError("Failed to load vendor data", source=str(path),
                            details={"reason": str(e)}) from e
    logger.info(f"Loaded {len(vendors)} vendors from {path.name}")
    return vendors


def load_translations(data_dir: Optional[Path] = None) -> Dict[str, str]:
    path = _data_dir(data_dir) / TRANSLATIONS_FILE
    raw = _read_json(path, "Failed to load translation dictionary")
    if not isinstance(raw, dict):
        raise DataLoadError("Failed to load translation dictionary", source=str(path))
    return {str(k).lower(): str(v) for k, v in raw.items()}


def find_disease(diseases: List[Disease], disease_id: Optional[str]) -> Disease:
    """Look up a disease for the details view."""
    if not disease_id:
        raise DataLoadError("No disease ID provided")
    found = next((d for d in diseases if d.id == disease_id), None)
    if found is None:
        raise DataLoadError("Disease not found", details={"disease_id": disease_id})
    return found


def diseases_to_frame(diseases: List[Disease]) -> pd.DataFrame:
    """One row per disease with list fields reduced to counts."""
    rows = [
        {
            "id": d.id,
            "name": d.name,
            "severity": d.severity,
            "symptoms": len(d.symptoms),
            "solutions": len(d.solutions),
            "prevention": len(d.prevention),
            "common_areas": ", ".join(d.common_areas),
        }
        for d in diseases
    ]
    df = pd.DataFrame(rows, columns=["id", "name", "severity", "symptoms",
                                     "solutions", "prevention", "common_areas"])
    df["severity"] = pd.Categorical(df["severity"], categories=list(SEVERITIES), ordered=True)
    return df


def severity_counts(diseases: List[Disease]) -> pd.Series:
    """Count of diseases per severity, always including all three levels."""
    df = diseases_to_frame(diseases)
    return df["severity"].value_counts(sort=False).reindex(list(SEVERITIES), fill_value=0)
