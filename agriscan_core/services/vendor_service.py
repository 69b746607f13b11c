# =============================================================================
# agriscan_core/services/vendor_service.py
# Vendor Directory
# =============================================================================

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

import pandas as pd

from .base_service import BaseService
from agriscan_core.data.models import Vendor
from agriscan_core.errors import FormValidationError, OfflineActionError

ALL_REGIONS = "all"
MAPS_URL = "https://maps.google.com/maps?q={query}"


@dataclass(frozen=True)
class UserLocation:
    latitude: float
    longitude: float


class VendorService(BaseService):
    """
    Search and contact helpers for the read-only vendor list.

    Usage:
        service = VendorService(load_vendors())
        service.filter("fungicide", region="Region III")
    """

    def __init__(self, vendors: List[Vendor]):
        super().__init__()
        self.vendors = list(vendors)
        self.user_location: Optional[UserLocation] = None

    def regions(self) -> List[str]:
        """Distinct regions in first-seen order."""
        return list(dict.fromkeys(v.region for v in self.vendors))

    def filter(self, search: str = "", region: str = ALL_REGIONS) -> List[Vendor]:
        """
        Case-insensitive match on name, services or any specialty, then an
        exact region match unless region is "all".
        """
        filtered = self.vendors
        if search:
            needle = search.lower()
            filtered = [
                v for v in filtered
                if needle in v.name.lower()
                or needle in v.services.lower()
                or any(needle in s.lower() for s in v.specialties)
            ]
        if region != ALL_REGIONS:
            filtered = [v for v in filtered if v.region == region]
        return filtered

    def to_frame(self, vendors: Optional[List[Vendor]] = None) -> pd.DataFrame:
        rows = [v.to_dict() for v in (self.vendors if vendors is None else vendors)]
        df = pd.DataFrame(rows, columns=["id", "name", "region", "rating", "verified",
                                         "contact", "email", "address", "services",
                                         "specialties"])
        df["specialties"] = df["specialties"].apply(
            lambda s: ", ".join(s) if isinstance(s, list) else s
        )
        return df

    # =========================================================================
    # CONTACT
    # =========================================================================

    @staticmethod
    def rating_stars(rating: float) -> str:
        """One star per whole point, plus one for any fractional part."""
        full = int(math.floor(rating))
        half = 1 if rating % 1 != 0 else 0
        return "⭐" * (full + half)

    @staticmethod
    def tel_link(contact: str) -> str:
        return f"tel:{contact}"

    @staticmethod
    def mailto_link(email: str) -> str:
        return f"mailto:{email}"

    @staticmethod
    def directions_url(address: str, is_online: bool) -> str:
        if not is_online:
            raise OfflineActionError("Directions require an internet connection",
                                     action="directions")
        return MAPS_URL.format(query=quote(address, safe=""))

    # =========================================================================
    # LOCATION
    # =========================================================================

    def read_user_location(self, latitude: float, longitude: float) -> UserLocation:
        """
        Store the device's raw coordinates. They are shown to the user but do
        not reorder the vendor list.
        """
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            raise FormValidationError("Location access denied or unavailable",
                                      field="location")
        self.user_location = UserLocation(latitude=latitude, longitude=longitude)
        self.logger.info(f"User location read: {latitude:.4f}, {longitude:.4f}")
        return self.user_location
