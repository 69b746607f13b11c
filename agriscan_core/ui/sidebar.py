# =============================================================================
# agriscan_core/ui/sidebar.py
# Sidebar Brand & Connectivity Panel
# =============================================================================
"""
Shared sidebar for every page: the AgriScan brand, a connectivity switch
that drives the session's NetworkMonitor, and the list of features usable
right now.

Call ``render_sidebar()`` right after ``st.set_page_config()``.
"""
from __future__ import annotations
import streamlit as st

from agriscan_core.config import get_config
from agriscan_core.offline import resolve_capabilities
from agriscan_core.state import get_monitor

CAPABILITY_LABELS = {
    "can_scan_images": "📷 Scan images",
    "can_translate": "🌐 Translate",
    "can_view_diseases": "📖 Disease library",
    "can_view_vendors": "🏪 Vendor directory",
    "can_make_phone_calls": "📞 Phone calls",
    "can_report_diseases": "📝 Report diseases",
    "can_update_database": "☁️ Sync database",
    "can_access_maps": "🗺️ Maps & directions",
    "can_send_emails": "✉️ Send emails",
}


def _sync_simulated_offline():
    """Toggle callback: feed the switch into the monitor as a connectivity event."""
    get_monitor().set_online(not st.session_state["simulate_offline"])


def _probe_connection():
    status = get_monitor().check_connection()
    st.session_state["simulate_offline"] = status.is_offline


def _apply_auto_detect(monitor):
    config = get_config()
    if st.session_state["auto_detect"]:
        # Every rerun is a heartbeat; abandoned sessions let the thread lapse
        monitor.start_monitoring(config.check_interval_online, config.check_interval_offline,
                                 idle_timeout=config.monitor_idle_timeout)
        # Probe thread owns the state; mirror it into the switch before it renders
        st.session_state["simulate_offline"] = monitor.is_offline
    else:
        monitor.stop_monitoring()


def render_sidebar():
    """Brand, connectivity switch, and the capability list."""
    monitor = get_monitor()
    _apply_auto_detect(monitor)

    with st.sidebar:
        st.markdown(
            "<div style='font-size:1.3rem;font-weight:700;'>🌾 AgriScan</div>"
            "<div style='font-size:.8rem;color:#4b5563;margin-bottom:.75rem;'>"
            "Rice disease help, online or off</div>",
            unsafe_allow_html=True,
        )

        st.markdown("#### Connectivity")
        st.toggle(
            "Simulate offline",
            key="simulate_offline",
            on_change=_sync_simulated_offline,
            disabled=st.session_state["auto_detect"],
            help="Work as if the device has no connection.",
        )
        st.checkbox("Auto-detect connection", key="auto_detect",
                    help="Probe the network in the background.")
        st.button("🔄 Check connection", use_container_width=True, on_click=_probe_connection)

        status = monitor.status
        if status.is_online:
            st.success("Online")
        else:
            st.warning("Offline")
        if status.was_offline and status.is_online:
            st.caption("Back online. Changes made offline stay on this device.")

        caps = resolve_capabilities(monitor.is_online)
        with st.expander("Available features", expanded=False):
            for flag, label in CAPABILITY_LABELS.items():
                mark = "✅" if getattr(caps, flag) else "⛔"
                st.markdown(f"{mark} {label}")

        st.checkbox("Show error details", key="debug_mode")
