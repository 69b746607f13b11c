from .session import (
    SESSION_DEFAULTS,
    init_state,
    get_monitor,
    get_storage,
    get_disease_editor,
    reset_editor_form,
    reset_report_form,
)

__all__ = [
    "SESSION_DEFAULTS",
    "init_state",
    "get_monitor",
    "get_storage",
    "get_disease_editor",
    "reset_editor_form",
    "reset_report_form",
]
