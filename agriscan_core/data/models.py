# =============================================================================
# agriscan_core/data/models.py
# Content Records: Diseases and Vendors
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

SEVERITIES = ("Low", "Medium", "High")


def check_severity(value: str) -> str:
    if value not in SEVERITIES:
        raise ValueError(f"Severity must be one of {', '.join(SEVERITIES)}, got {value!r}")
    return value


@dataclass
class Disease:
    """A rice disease entry in the encyclopedia."""
    id: str
    name: str
    description: str
    symptoms: List[str] = field(default_factory=list)
    solutions: List[str] = field(default_factory=list)
    prevention: List[str] = field(default_factory=list)
    severity: str = "Medium"
    common_areas: List[str] = field(default_factory=list)

    def __post_init__(self):
        check_severity(self.severity)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Disease:
        return cls(
            id=str(raw["id"]),
            name=raw["name"],
            description=raw.get("description", ""),
            symptoms=list(raw.get("symptoms", [])),
            solutions=list(raw.get("solutions", [])),
            prevention=list(raw.get("prevention", [])),
            severity=raw.get("severity", "Medium"),
            common_areas=list(raw.get("commonAreas", [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "symptoms": list(self.symptoms),
            "solutions": list(self.solutions),
            "prevention": list(self.prevention),
            "severity": self.severity,
            "commonAreas": list(self.common_areas),
        }


@dataclass
class Vendor:
    """A pest-control supplier in the vendor directory (read-only)."""
    id: str
    name: str
    address: str
    contact: str
    email: str
    services: str
    specialties: List[str] = field(default_factory=list)
    rating: float = 0.0
    verified: bool = False
    region: str = ""

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Vendor:
        return cls(
            id=str(raw["id"]),
            name=raw["name"],
            address=raw.get("address", ""),
            contact=raw.get("contact", ""),
            email=raw.get("email", ""),
            services=raw.get("services", ""),
            specialties=list(raw.get("specialties", [])),
            rating=float(raw.get("rating", 0.0)),
            verified=bool(raw.get("verified", False)),
            region=raw.get("region", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "contact": self.contact,
            "email": self.email,
            "services": self.services,
            "specialties": list(self.specialties),
            "rating": self.rating,
            "verified": self.verified,
            "region": self.region,
        }
