# =============================================================================
# pages/05_Update_Diseases.py
# Disease library editor (local-first)
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.data import SEVERITIES, severity_counts
from agriscan_core.errors import ErrorContext
from agriscan_core.offline import SyncOutcome
from agriscan_core.services import DiseaseFormData
from agriscan_core.state import get_disease_editor, get_monitor, reset_editor_form
from agriscan_core.ui import (setup_page, header, status_banner, stat_row,
                              severity_badge, severity_chart)
from agriscan_core.ui.theme import SEVERITY_COLORS

setup_page("Disease Library", "📚")

with ErrorContext("Loading disease library", halt=True):
    editor = get_disease_editor()

monitor = get_monitor()

header("Disease Library", "Keep the disease list up to date", "📚")

if monitor.is_online:
    status_banner("🟢 Online - Changes will sync to server", "online")
else:
    status_banner("📱 Offline - Changes saved locally until online", "pending")

# ============================================================================
# SUMMARY
# ============================================================================
stats = editor.stats()
stat_row(
    {"Total": stats["total"], "High": stats["high"],
     "Medium": stats["medium"], "Low": stats["low"]},
    colors=SEVERITY_COLORS,
)
if editor.diseases:
    st.plotly_chart(severity_chart(severity_counts(editor.diseases)), use_container_width=True)


def _report(result, verb: str):
    if not result:
        st.error(f"❌ {result.error}")
        return False
    if result.data["outcome"] is SyncOutcome.STORED_LOCALLY:
        st.info(f"Disease {verb}. Saved on this device.")
    else:
        st.success(f"Disease {verb}.")
    return True


def _start_add():
    st.session_state["editing_disease_id"] = None
    st.session_state["show_disease_form"] = True


def _start_edit(disease_id: str):
    st.session_state["editing_disease_id"] = disease_id
    st.session_state["show_disease_form"] = True


# ============================================================================
# FORM
# ============================================================================
if st.session_state["show_disease_form"]:
    editing_id = st.session_state["editing_disease_id"]
    existing = editor.store.get(editing_id) if editing_id else None
    form = editor.disease_to_form(existing) if existing else DiseaseFormData()

    with st.form("disease_form"):
        st.markdown(f"### {'Edit' if existing else 'Add'} disease")
        name = st.text_input("Name *", value=form.name)
        description = st.text_area("Description *", value=form.description)
        severity = st.selectbox("Severity", list(SEVERITIES), index=list(SEVERITIES).index(form.severity))
        symptoms = st.text_area("Symptoms (one per line)", value=form.symptoms)
        solutions = st.text_area("Treatment (one per line)", value=form.solutions)
        prevention = st.text_area("Prevention (one per line)", value=form.prevention)
        common_areas = st.text_input("Common areas (comma separated)", value=form.common_areas)

        col_save, col_cancel = st.columns(2)
        saved = col_save.form_submit_button("💾 Save", type="primary")
        cancelled = col_cancel.form_submit_button("Cancel")

    if cancelled:
        reset_editor_form()
        st.rerun()
    if saved:
        data = DiseaseFormData(name, description, symptoms, solutions, prevention,
                               severity, common_areas)
        if existing:
            ok = _report(editor.update_disease(editing_id, data), "updated")
        else:
            ok = _report(editor.add_disease(data), "added")
        if ok:
            reset_editor_form()
else:
    st.button("➕ Add disease", type="primary", on_click=_start_add)

# ============================================================================
# LIST
# ============================================================================
term = st.text_input("🔍 Search diseases")
for disease in editor.search(term):
    with st.container(border=True):
        st.markdown(f"**{disease.name}** " + severity_badge(disease.severity),
                    unsafe_allow_html=True)
        st.caption(disease.description)
        col_view, col_edit, col_delete = st.columns(3)
        with col_view:
            st.page_link("pages/02_Disease_Details.py", label="View", icon="📖",
                         query_params={"id": disease.id})
        with col_edit:
            st.button("✏️ Edit", key=f"edit_{disease.id}", on_click=_start_edit,
                      args=(disease.id,))
        with col_delete:
            if st.button("🗑️ Delete", key=f"delete_{disease.id}"):
                if _report(editor.delete_disease(disease.id), "deleted"):
                    st.rerun()
