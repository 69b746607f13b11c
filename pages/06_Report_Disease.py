# =============================================================================
# pages/06_Report_Disease.py
# Report an unknown disease to agricultural experts
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.classification import ImageUpload
from agriscan_core.config import get_config
from agriscan_core.errors import ImageValidationError, handle_error
from agriscan_core.offline import resolve_capabilities
from agriscan_core.services import ReportService, ReportFormData, REGIONS
from agriscan_core.services.report_service import SPREADING_RATES, URGENCY_LEVELS
from agriscan_core.state import get_monitor, reset_report_form
from agriscan_core.ui import setup_page, header, status_banner

setup_page("Report a Disease", "📝")

monitor = get_monitor()
config = get_config()
caps = resolve_capabilities(monitor.is_online)

service = ReportService(
    submit_delay=config.report_submit_delay,
    max_images=config.max_report_images,
    max_image_bytes=config.max_report_image_bytes,
)

header("Report a Disease", "Found something the scanner doesn't know?", "📝")

if not caps.can_report_diseases:
    status_banner("🔴 Offline - Reports need an internet connection", "offline")
    st.info("You can still fill in the form. Submit once you're back online.")
else:
    status_banner("🟢 Online - Reports go straight to our experts", "online")

# ============================================================================
# CONFIRMATION
# ============================================================================
submitted = st.session_state["report_submitted"]
if submitted:
    st.success(f"✅ Report {submitted['reportId']} submitted. An expert will contact you soon.")
    st.button("Submit another report", on_click=reset_report_form)
    st.stop()

# ============================================================================
# PHOTOS
# ============================================================================


def _remove_image(name: str):
    st.session_state["report_images"] = [
        img for img in st.session_state["report_images"] if img.name != name
    ]
    st.session_state["report_dismissed"] = st.session_state["report_dismissed"] + [name]


st.markdown(f"### Photos (up to {service.max_images})")
picked = st.file_uploader("Add photos", type=["jpg", "jpeg", "png", "webp"],
                          accept_multiple_files=True,
                          key=f"report_picker_{st.session_state['report_picker_round']}")
new, dismissed = service.pending_uploads(
    picked or [], st.session_state["report_images"], st.session_state["report_dismissed"])
st.session_state["report_dismissed"] = dismissed
if new:
    try:
        checked = service.validate_images(st.session_state["report_images"],
                                          [ImageUpload.from_uploaded_file(f) for f in new])
        st.session_state["report_images"] = st.session_state["report_images"] + checked["accepted"]
        for _, reason in checked["rejected"]:
            st.warning(reason)
    except ImageValidationError as e:
        handle_error(e)

for img in st.session_state["report_images"]:
    col_img, col_rm = st.columns([4, 1])
    col_img.caption(f"🖼️ {img.name} ({img.size_mb:.1f} MB)")
    col_rm.button("✖", key=f"rm_img_{img.name}", on_click=_remove_image, args=(img.name,))

# ============================================================================
# FORM
# ============================================================================
with st.form("report_form"):
    st.markdown("### Your details")
    farmer_name = st.text_input("Full name *")
    contact_number = st.text_input("Contact number *")
    email = st.text_input("Email (optional)")
    farm_location = st.text_input("Farm location *")
    region = st.selectbox("Region *", [""] + REGIONS,
                          format_func=lambda r: r or "Select region")

    st.markdown("### The disease")
    disease_name = st.text_input("What do you call it? *")
    description = st.text_area("Description *")
    symptoms = st.text_area("Symptoms *")
    affected_area = st.text_input("Affected area (e.g. 2 hectares)")
    first_noticed = st.text_input("When did you first notice it?")
    spreading_rate = st.selectbox("How fast is it spreading?", list(SPREADING_RATES), index=1)
    previous_treatments = st.text_area("Treatments already tried")
    urgency_level = st.selectbox("Urgency", list(URGENCY_LEVELS), index=1)

    st.markdown("### Consent")
    consent_to_contact = st.checkbox("I agree to be contacted about this report *")
    consent_to_share = st.checkbox("I agree to share this report with researchers")

    send = st.form_submit_button("📤 Submit report", type="primary",
                                 disabled=not caps.can_report_diseases)

if send:
    form = ReportFormData(
        farmer_name=farmer_name,
        contact_number=contact_number,
        email=email,
        farm_location=farm_location,
        region=region,
        disease_name=disease_name,
        description=description,
        symptoms=symptoms,
        affected_area=affected_area,
        first_noticed=first_noticed,
        spreading_rate=spreading_rate,
        previous_treatments=previous_treatments,
        urgency_level=urgency_level,
        consent_to_contact=consent_to_contact,
        consent_to_share=consent_to_share,
    )
    with st.spinner("Submitting report..."):
        result = service.submit(form, st.session_state["report_images"], monitor.is_online)
    if result:
        st.session_state["report_submitted"] = result.data
        st.rerun()
    else:
        st.error(f"❌ {result.error}")
