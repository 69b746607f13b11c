# =============================================================================
# pages/01_Disease_Scanner.py
# Rice leaf scanner
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.classification import ImageUpload, get_supported_formats
from agriscan_core.config import get_config
from agriscan_core.services import ScannerService
from agriscan_core.state import get_monitor
from agriscan_core.ui import setup_page, header, status_banner, severity_badge, confidence_bar

setup_page("Disease Scanner", "📷")

monitor = get_monitor()
config = get_config()

header("Disease Scanner", "Take or upload a photo of an affected rice leaf", "📷")

if monitor.is_online:
    status_banner("🟢 Online Mode - Full accuracy", "online")
else:
    status_banner("📱 Offline Mode - Local processing available", "local")

scanner = ScannerService(
    delay_range=(config.scan_delay_min, config.scan_delay_max),
    max_bytes=config.max_scan_image_bytes,
)

# ============================================================================
# UPLOAD
# ============================================================================
source = st.radio("Image source", ["Upload photo", "Use camera"], horizontal=True)
if source == "Use camera":
    uploaded = st.camera_input("Take a photo of the leaf")
else:
    uploaded = st.file_uploader(
        "Choose an image",
        type=[fmt.split("/")[1] for fmt in get_supported_formats()],
    )

if uploaded is None:
    st.session_state["scan_upload"] = None
    st.session_state["scan_result"] = None
    st.caption("Supported: JPEG, PNG, WEBP up to 10MB")
    st.stop()

upload = ImageUpload.from_uploaded_file(uploaded)
if st.session_state["scan_upload"] != upload.fingerprint:
    st.session_state["scan_upload"] = upload.fingerprint
    st.session_state["scan_result"] = None

check = scanner.check(upload)
if not check:
    st.error(f"❌ {check.error}")
    st.stop()

st.image(upload.data, caption=f"{upload.name} ({upload.size_mb:.1f} MB)", use_container_width=True)

# ============================================================================
# ANALYSIS
# ============================================================================
if st.button("🔍 Analyze Image", type="primary"):
    bar = st.progress(0, text="Analyzing...")
    scanner.set_progress_callback(lambda pct, msg: bar.progress(pct, text=msg))
    with st.spinner("Analyzing image..."):
        st.session_state["scan_result"] = scanner.scan(upload)
    bar.empty()

result = st.session_state["scan_result"]
if result is None:
    st.stop()

if not result.success:
    st.error(f"❌ {result.error}")
    st.stop()

st.markdown("### Results")
st.caption(f"Processed in {result.processing_time_ms / 1000:.1f}s")

for detection in result.results:
    with st.container(border=True):
        icon = ScannerService.severity_icon(detection.severity)
        st.markdown(f"**{icon} {detection.disease_name}**")
        st.markdown(severity_badge(detection.severity, "severity"), unsafe_allow_html=True)
        st.caption(detection.description)
        confidence_bar(detection.confidence, detection.severity)
        st.page_link(
            "pages/02_Disease_Details.py",
            label="View details and treatment",
            icon="📖",
            query_params={"id": detection.disease_id},
        )

st.warning(
    "This result is a guide only. Confirm with your local agricultural "
    "technician before applying treatment."
)
