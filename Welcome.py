from __future__ import annotations
import streamlit as st

from agriscan_core.ui import setup_page, header, status_banner, stat_row, PAGES
from agriscan_core.state import get_monitor

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================
setup_page("Home", "🌾")

monitor = get_monitor()

header("AgriScan", "Rice disease detection for Filipino farmers", "🌾")

if monitor.is_online:
    status_banner("🟢 Online - All features available", "online")
else:
    status_banner("🔴 Offline - Limited features available", "offline")

stat_row(
    {"Diseases": "5+", "Vendors": "8+", "Terms": "100+"},
)

# ============================================================================
# FEATURES
# ============================================================================
st.markdown("### What you can do")
for page in PAGES:
    st.page_link(page["file"], label=f"{page['name']}", icon=page["icon"])
    st.caption(page["blurb"])

# ============================================================================
# HELP
# ============================================================================
st.markdown("### Need help now?")
st.markdown(
    "<div class='feature-card'>📞 <b>DA Hotline:</b> "
    "<a href='tel:+63288444601'>(02) 8844-4601</a><br>"
    "<span style='font-size:.8rem;color:#4b5563;'>Department of Agriculture farmer assistance</span>"
    "</div>",
    unsafe_allow_html=True,
)

st.info(
    "💡 **Quick tip:** Take photos in daylight and fill the frame with the "
    "affected leaf. The scanner works without internet."
)
