# =============================================================================
# pages/04_Vendor_Suggestions.py
# Pest-control vendor directory
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.data import load_vendors
from agriscan_core.errors import ErrorContext, safe_execute
from agriscan_core.offline import resolve_capabilities
from agriscan_core.services import VendorService, ALL_REGIONS
from agriscan_core.state import get_monitor
from agriscan_core.ui import setup_page, header, status_banner

setup_page("Vendors", "🏪")


@st.cache_data(show_spinner=False)
def _vendors():
    return load_vendors()


with ErrorContext("Loading vendor directory", halt=True):
    service = VendorService(_vendors())

monitor = get_monitor()
caps = resolve_capabilities(monitor.is_online)

header("Vendor Suggestions", "Pest-control suppliers in your area", "🏪")

if monitor.is_online:
    status_banner("🟢 Online - Maps and directions available", "online")
else:
    status_banner("📱 Offline - Contact info available", "local")

# ============================================================================
# FILTERS
# ============================================================================
search = st.text_input("🔍 Search vendors", key="vendor_search",
                       placeholder="Name, service or specialty")
st.selectbox(
    "Region",
    [ALL_REGIONS] + service.regions(),
    key="vendor_region",
    format_func=lambda r: "All regions" if r == ALL_REGIONS else r,
)

with st.expander("📍 My location"):
    lat = st.number_input("Latitude", value=14.5995, format="%.4f")
    lon = st.number_input("Longitude", value=120.9842, format="%.4f")
    if st.button("Use this location"):
        location = safe_execute(service.read_user_location, lat, lon)
        if location:
            st.success(f"Location set: {location.latitude:.4f}, {location.longitude:.4f}")

vendors = service.filter(search, st.session_state["vendor_region"])
st.caption(f"{len(vendors)} vendor(s) found")

if not vendors:
    st.info("No vendors match your search.")

# ============================================================================
# VENDOR CARDS
# ============================================================================
for vendor in vendors:
    with st.container(border=True):
        badge = " ✔️ Verified" if vendor.verified else ""
        st.markdown(f"**{vendor.name}**{badge}")
        st.caption(f"{VendorService.rating_stars(vendor.rating)} {vendor.rating:.1f} · {vendor.region}")
        st.write(vendor.services)
        if vendor.specialties:
            st.caption("Specialties: " + ", ".join(vendor.specialties))
        st.caption(f"📍 {vendor.address}")

        col_call, col_email, col_map = st.columns(3)
        with col_call:
            st.link_button("📞 Call", VendorService.tel_link(vendor.contact),
                           disabled=not caps.can_make_phone_calls)
        with col_email:
            st.link_button("✉️ Email", VendorService.mailto_link(vendor.email),
                           disabled=not caps.can_send_emails)
        with col_map:
            if caps.can_access_maps:
                st.link_button("🗺️ Directions",
                               VendorService.directions_url(vendor.address, monitor.is_online))
            else:
                st.button("🗺️ Directions", key=f"dir_{vendor.id}", disabled=True,
                          help="Directions require an internet connection")

if st.session_state.get("debug_mode"):
    with st.expander("Vendor table"):
        st.dataframe(service.to_frame(vendors), use_container_width=True, hide_index=True)
