# =============================================================================
# pages/02_Disease_Details.py
# Disease details, reached from scan results or the disease library
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.data import find_disease
from agriscan_core.errors import ErrorContext
from agriscan_core.state import get_disease_editor
from agriscan_core.ui import setup_page, header, severity_badge

setup_page("Disease Details", "📖")

disease = None
with ErrorContext("Opening disease details"):
    disease = find_disease(get_disease_editor().diseases, st.query_params.get("id"))

if disease is None:
    st.page_link("pages/01_Disease_Scanner.py", label="Back to scanner", icon="⬅️")
    st.stop()

header(disease.name, "Symptoms, treatment and prevention", "📖")
st.markdown(severity_badge(disease.severity, "severity"), unsafe_allow_html=True)
st.write(disease.description)

tab_symptoms, tab_solutions, tab_prevention = st.tabs(["Symptoms", "Treatment", "Prevention"])

with tab_symptoms:
    for item in disease.symptoms or ["No symptoms recorded."]:
        st.markdown(f"- {item}")

with tab_solutions:
    for i, item in enumerate(disease.solutions or ["No treatment recorded."], start=1):
        st.markdown(f"{i}. {item}")

with tab_prevention:
    for item in disease.prevention or ["No prevention tips recorded."]:
        st.markdown(f"- ✅ {item}")

if disease.common_areas:
    st.markdown("### Common areas")
    st.write(", ".join(disease.common_areas))

st.markdown("### Next steps")
col1, col2 = st.columns(2)
with col1:
    st.page_link("pages/04_Vendor_Suggestions.py", label="Find vendors", icon="🏪")
with col2:
    st.page_link("pages/01_Disease_Scanner.py", label="Scan again", icon="📷")
