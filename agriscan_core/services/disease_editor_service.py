# =============================================================================
# agriscan_core/services/disease_editor_service.py
# Disease Database Editor
# =============================================================================

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .base_service import BaseService, ServiceResult
from agriscan_core.data.models import Disease, SEVERITIES
from agriscan_core.errors import FormValidationError
from agriscan_core.offline import (
    LocalFirstStore,
    LocalStorage,
    NetworkMonitor,
    LOCAL_DISEASES_KEY,
)


@dataclass
class DiseaseFormData:
    """Editor form as typed by the user; list fields are free text."""
    name: str = ""
    description: str = ""
    symptoms: str = ""       # one per line
    solutions: str = ""      # one per line
    prevention: str = ""     # one per line
    severity: str = "Medium"
    common_areas: str = ""   # comma separated


def _lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def _comma_list(text: str) -> List[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


class DiseaseEditorService(BaseService):
    """
    Add, edit and delete disease entries.

    Changes land in memory immediately. While online they are logged as sent
    to the server; while offline the whole collection is written to local
    storage under ``localDiseases``.

    Usage:
        service = DiseaseEditorService(storage, monitor)
        service.load(load_diseases())
        service.add_disease(DiseaseFormData(name="Leaf Scald", description="..."))
    """

    def __init__(
        self,
        storage: LocalStorage,
        monitor: NetworkMonitor,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__()
        self._clock = clock
        self.store: LocalFirstStore[Disease] = LocalFirstStore(
            storage=storage,
            monitor=monitor,
            key=LOCAL_DISEASES_KEY,
            serialize=Disease.to_dict,
            deserialize=Disease.from_dict,
            id_of=lambda d: d.id,
        )

    def load(self, bundled: List[Disease]) -> List[Disease]:
        return self.store.load(bundled)

    @property
    def diseases(self) -> List[Disease]:
        return self.store.items

    # =========================================================================
    # FORM HANDLING
    # =========================================================================

    def _build(self, form: DiseaseFormData, disease_id: str) -> Disease:
        if not form.name.strip() or not form.description.strip():
            raise FormValidationError("Please fill in all required fields")
        if form.severity not in SEVERITIES:
            raise FormValidationError(
                f"Severity must be one of {', '.join(SEVERITIES)}",
                field="severity",
            )
        return Disease(
            id=disease_id,
            name=form.name.strip(),
            description=form.description.strip(),
            symptoms=_lines(form.symptoms),
            solutions=_lines(form.solutions),
            prevention=_lines(form.prevention),
            severity=form.severity,
            common_areas=_comma_list(form.common_areas),
        )

    @staticmethod
    def disease_to_form(disease: Disease) -> DiseaseFormData:
        """Pre-fill the editor form for an existing entry."""
        return DiseaseFormData(
            name=disease.name,
            description=disease.description,
            symptoms="\n".join(disease.symptoms),
            solutions="\n".join(disease.solutions),
            prevention="\n".join(disease.prevention),
            severity=disease.severity,
            common_areas=", ".join(disease.common_areas),
        )

    def new_id(self) -> str:
        return f"d{int(self._clock() * 1000)}"

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add_disease(self, form: DiseaseFormData) -> ServiceResult:
        def _add():
            disease = self._build(form, self.new_id())
            record = self.store.add(disease)
            return {"disease": disease, "outcome": record.outcome}

        return self.safe_execute("Adding disease", _add)

    def update_disease(self, disease_id: str, form: DiseaseFormData) -> ServiceResult:
        def _update():
            if self.store.get(disease_id) is None:
                raise FormValidationError("Disease not found", field="id")
            disease = self._build(form, disease_id)
            record = self.store.update(disease_id, disease)
            return {"disease": disease, "outcome": record.outcome}

        return self.safe_execute(f"Updating disease {disease_id}", _update)

    def delete_disease(self, disease_id: str) -> ServiceResult:
        def _delete():
            record = self.store.delete(disease_id)
            return {"disease_id": disease_id, "outcome": record.outcome}

        return self.safe_execute(f"Deleting disease {disease_id}", _delete)

    # =========================================================================
    # SUMMARY
    # =========================================================================

    def stats(self) -> Dict[str, int]:
        items = self.store.items
        return {
            "total": len(items),
            "high": sum(1 for d in items if d.severity == "High"),
            "medium": sum(1 for d in items if d.severity == "Medium"),
            "low": sum(1 for d in items if d.severity == "Low"),
        }

    def search(self, term: Optional[str]) -> List[Disease]:
        if not term:
            return self.store.items
        needle = term.lower()
        return [
            d for d in self.store.items
            if needle in d.name.lower() or needle in d.description.lower()
        ]
