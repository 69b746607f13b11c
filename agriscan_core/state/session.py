import copy
import uuid

import streamlit as st

from agriscan_core.config import get_config
from agriscan_core.logging import bind_device
from agriscan_core.offline import LocalStorage, NetworkMonitor, get_local_storage

# Central registry for session-state keys used across the app.
SESSION_DEFAULTS = {
    "network_monitor": None,
    "simulate_offline": False,
    "auto_detect": False,
    "debug_mode": False,
    # Device storage
    "device_id": None,
    "local_storage": None,
    # Scanner
    "scan_upload": None,
    "scan_result": None,
    # Translator
    "translation_input": "",
    "translated_text": "",
    # Vendors
    "vendor_search": "",
    "vendor_region": "all",
    # Disease editor
    "disease_editor": None,
    "editing_disease_id": None,
    "show_disease_form": False,
    # Reports
    "report_images": [],
    "report_dismissed": [],
    "report_picker_round": 0,
    "report_submitted": None,
}


def init_state():
    """Seed session state with defaults and the per-session network monitor."""
    for k, v in SESSION_DEFAULTS.items():
        if k not in st.session_state:
            st.session_state[k] = copy.copy(v)

    if st.session_state["device_id"] is None:
        st.session_state["device_id"] = uuid.uuid4().hex
    bind_device(st.session_state["device_id"])

    if st.session_state["network_monitor"] is None:
        config = get_config()
        monitor = NetworkMonitor(
            initial_online=not config.force_offline,
            probe_hosts=config.probe_hosts,
            probe_timeout=config.probe_timeout,
        )
        st.session_state["network_monitor"] = monitor
        st.session_state["simulate_offline"] = config.force_offline


def get_monitor() -> NetworkMonitor:
    """This session's NetworkMonitor."""
    init_state()
    return st.session_state["network_monitor"]


def get_storage() -> LocalStorage:
    """This session's device storage: the shared file, scoped to ``device_id``."""
    init_state()
    if st.session_state["local_storage"] is None:
        st.session_state["local_storage"] = get_local_storage().scoped(st.session_state["device_id"])
    return st.session_state["local_storage"]


def get_disease_editor():
    """This session's disease editor, loaded from device storage or the bundled list."""
    from agriscan_core.data import load_diseases
    from agriscan_core.services import DiseaseEditorService

    init_state()
    if st.session_state["disease_editor"] is None:
        editor = DiseaseEditorService(get_storage(), get_monitor())
        editor.load(load_diseases())
        st.session_state["disease_editor"] = editor
    return st.session_state["disease_editor"]


def reset_editor_form():
    st.session_state["editing_disease_id"] = None
    st.session_state["show_disease_form"] = False


def reset_report_form():
    """Clear attached photos and start a fresh uploader widget."""
    st.session_state["report_images"] = []
    st.session_state["report_dismissed"] = []
    st.session_state["report_submitted"] = None
    st.session_state["report_picker_round"] += 1
