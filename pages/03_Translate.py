# =============================================================================
# pages/03_Translate.py
# English to Filipino farming translator (works offline)
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.data import load_translations
from agriscan_core.errors import error_boundary
from agriscan_core.state import get_storage
from agriscan_core.services import TranslationService
from agriscan_core.services.translation_service import MAX_INPUT_LENGTH
from agriscan_core.ui import setup_page, header, status_banner

setup_page("Translator", "🌐")


@st.cache_data(show_spinner=False)
def _dictionary():
    return load_translations()


@error_boundary(default_return=None)
def _translator():
    return TranslationService(_dictionary(), get_storage())


translator = _translator()
if translator is None:
    st.stop()

header("Translator", "English to Filipino farming terms", "🌐")
status_banner(f"📚 Works offline - {translator.term_count} terms available", "local")


def _use_phrase(english: str):
    st.session_state["translation_input"] = english
    st.session_state["translated_text"] = ""


text = st.text_area(
    "English text",
    key="translation_input",
    max_chars=MAX_INPUT_LENGTH,
    placeholder="e.g. rice leaf disease",
)
st.caption(f"{len(text)}/{MAX_INPUT_LENGTH}")

if st.button("🌐 Translate", type="primary", disabled=not text.strip()):
    with st.spinner("Translating..."):
        result = translator.translate(text)
    if result:
        st.session_state["translated_text"] = result.data["filipino"] if result.data else ""
    else:
        st.error(f"❌ {result.error}")

if st.session_state["translated_text"]:
    st.markdown("**Filipino**")
    st.success(st.session_state["translated_text"])

# ============================================================================
# COMMON PHRASES
# ============================================================================
st.markdown("### Common phrases")
for i, phrase in enumerate(translator.common_phrases()):
    st.button(
        f"{phrase['english']} → {phrase['filipino']}",
        key=f"phrase_{i}",
        on_click=_use_phrase,
        args=(phrase["english"],),
    )

# ============================================================================
# RECENT
# ============================================================================
recent = translator.recent_translations()
if recent:
    st.markdown("### Recent translations")
    for entry in recent:
        st.markdown(f"- {entry['english']} → **{entry['filipino']}**")
    if st.button("Clear recent"):
        translator.clear_recent()
        st.rerun()
