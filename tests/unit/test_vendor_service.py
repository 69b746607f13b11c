# =============================================================================
# tests/unit/test_vendor_service.py
# Unit Tests for VendorService
# =============================================================================

import pytest

from agriscan_core.errors import FormValidationError, OfflineActionError
from agriscan_core.services import ALL_REGIONS, VendorService


@pytest.fixture
def vendors(sample_vendors):
    return VendorService(sample_vendors)


class TestVendorFilter:

    def test_no_filters_returns_all(self, vendors):
        assert len(vendors.filter()) == 3

    def test_search_by_name(self, vendors):
        assert [v.id for v in vendors.filter("bicol")] == ["v2"]

    def test_search_by_services(self, vendors):
        assert [v.id for v in vendors.filter("FUNGICIDES")] == ["v1"]

    def test_search_by_specialty(self, vendors):
        assert [v.id for v in vendors.filter("tungro")] == ["v2"]

    def test_region_filter(self, vendors):
        assert [v.id for v in vendors.filter(region="Central Luzon")] == ["v1", "v3"]

    def test_search_and_region_combined(self, vendors):
        assert [v.id for v in vendors.filter("seeds", "Central Luzon")] == ["v3"]
        assert vendors.filter("seeds", "Bicol Region") == []

    def test_all_regions_sentinel(self, vendors):
        assert len(vendors.filter(region=ALL_REGIONS)) == 3

    def test_regions_first_seen_order(self, vendors):
        assert vendors.regions() == ["Central Luzon", "Bicol Region"]

    def test_to_frame(self, vendors):
        df = vendors.to_frame(vendors.filter("bicol"))
        assert list(df["name"]) == ["Bicol Crop Care"]
        assert df.loc[0, "specialties"] == "Tungro Virus, Insecticide"


class TestVendorContact:

    @pytest.mark.parametrize("rating,stars", [(4.7, 5), (4.0, 4), (3.5, 4), (0.0, 0)])
    def test_rating_stars(self, rating, stars):
        assert VendorService.rating_stars(rating) == "⭐" * stars

    def test_links(self):
        assert VendorService.tel_link("+63449401234") == "tel:+63449401234"
        assert VendorService.mailto_link("a@b.ph") == "mailto:a@b.ph"

    def test_directions_online(self):
        url = VendorService.directions_url("Naga City, Camarines Sur", is_online=True)
        assert url == "https://maps.google.com/maps?q=Naga%20City%2C%20Camarines%20Sur"

    def test_directions_offline(self):
        with pytest.raises(OfflineActionError) as exc:
            VendorService.directions_url("Naga City", is_online=False)
        assert exc.value.code == "NET_001"


class TestUserLocation:

    def test_read_location(self, vendors):
        location = vendors.read_user_location(14.5995, 120.9842)
        assert vendors.user_location == location

    def test_out_of_range(self, vendors):
        with pytest.raises(FormValidationError, match="Location access denied or unavailable"):
            vendors.read_user_location(123.0, 0.0)

    def test_location_does_not_reorder(self, vendors):
        before = [v.id for v in vendors.filter()]
        vendors.read_user_location(13.6, 123.2)
        assert [v.id for v in vendors.filter()] == before
