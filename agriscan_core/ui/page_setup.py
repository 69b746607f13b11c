# =============================================================================
# agriscan_core/ui/page_setup.py
# Common page bootstrap
# =============================================================================
from __future__ import annotations
import streamlit as st

from agriscan_core.config import get_config
from agriscan_core.logging import setup_logging
from agriscan_core.state import init_state
from .sidebar import render_sidebar
from .theme import apply_css

PAGES = [
    {"file": "pages/01_Disease_Scanner.py", "name": "Disease Scanner", "icon": "📷",
     "blurb": "Snap a leaf and get a likely diagnosis"},
    {"file": "pages/03_Translate.py", "name": "Translator", "icon": "🌐",
     "blurb": "English to Filipino farming terms"},
    {"file": "pages/04_Vendor_Suggestions.py", "name": "Vendors", "icon": "🏪",
     "blurb": "Pest-control suppliers near you"},
    {"file": "pages/05_Update_Diseases.py", "name": "Disease Library", "icon": "📚",
     "blurb": "Browse and edit disease entries"},
    {"file": "pages/06_Report_Disease.py", "name": "Report a Disease", "icon": "📝",
     "blurb": "Tell experts about something new"},
]


@st.cache_resource
def _configure_logging() -> bool:
    config = get_config()
    setup_logging(level=config.log_level, log_to_file=config.log_to_file)
    return True


def setup_page(title: str, icon: str, sidebar: bool = True):
    """Page config, logging, session state, theme and sidebar, in that order."""
    st.set_page_config(
        page_title=f"{title} - AgriScan",
        page_icon=icon,
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    _configure_logging()
    init_state()
    apply_css()
    if sidebar:
        render_sidebar()
