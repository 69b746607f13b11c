# =============================================================================
# agriscan_core/errors/handlers.py
# Inline Error Reporting for Pages
# =============================================================================
"""
Every failure ends up as an inline message in the current view; nothing
is retried. Pages pick whichever shape fits the call site:

    handle_error(e)                         # inside an existing except block
    safe_execute(fn, *args, default=...)    # one-off call with a fallback
    with ErrorContext("Loading vendors", halt=True): ...
    @error_boundary(default_return=None)    # whole helper function
"""

from __future__ import annotations
import functools
import traceback
from typing import Optional, Callable, TypeVar, Any, Dict, Tuple
import streamlit as st

from agriscan_core.logging import get_logger
from .exceptions import AgriScanError

logger = get_logger(__name__)

T = TypeVar("T")


def _summarize(error: Exception, user_message: Optional[str]) -> Tuple[str, str, Dict[str, Any], bool]:
    if isinstance(error, AgriScanError):
        return user_message or error.message, error.code, error.details, error.recoverable
    return user_message or str(error), "UNKNOWN", {"traceback": traceback.format_exc()}, True


def handle_error(
    error: Exception,
    show_user_message: bool = True,
    log_error: bool = True,
    user_message: Optional[str] = None,
) -> None:
    """
    Log an error and show it in the current view.

    AgriScanError messages are farmer-facing and shown as-is; anything else
    is logged with its traceback. With "Show error details" on in the
    sidebar the error's details are listed under the message.
    """
    message, code, details, recoverable = _summarize(error, user_message)

    if log_error:
        logger.error(
            f"[{code}] {message}",
            extra={"details": details},
            exc_info=not isinstance(error, AgriScanError),
        )

    if not show_user_message:
        return

    if recoverable:
        st.error(f"❌ {message}")
    else:
        st.error(f"Critical Error: {message}. Please restart the app.")

    if details and st.session_state.get("debug_mode", False):
        with st.expander("Error Details", expanded=False):
            st.json(details)


def safe_execute(
    func: Callable[..., T],
    *args,
    default: Optional[T] = None,
    error_message: Optional[str] = None,
    **kwargs,
) -> Optional[T]:
    """
    Call ``func``; on failure report it inline and return ``default``.

    Usage:
        location = safe_execute(service.read_user_location, lat, lon)
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        handle_error(e, user_message=error_message)
        return default


class ErrorContext:
    """
    Report any error raised in the block and keep rendering.

    With ``halt=True`` the page stops after the message, for blocks that
    load something the rest of the page cannot do without.

    Usage:
        with ErrorContext("Loading vendor directory", halt=True):
            service = VendorService(load_vendors())
    """

    def __init__(self, operation: str, halt: bool = False,
                 user_message: Optional[str] = None):
        self.operation = operation
        self.halt = halt
        self.user_message = user_message
        self.failed = False

    def __enter__(self) -> ErrorContext:
        logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            logger.debug(f"Completed: {self.operation}")
            return False
        if not issubclass(exc_type, Exception):
            # st.stop / st.rerun control flow and KeyboardInterrupt
            return False

        self.failed = True
        fallback = None if isinstance(exc_val, AgriScanError) else f"Error during: {self.operation}"
        handle_error(exc_val, user_message=self.user_message or fallback)
        if self.halt:
            st.stop()
        return True


def error_boundary(default_return: Any = None, error_message: Optional[str] = None):
    """
    Decorator form of ``safe_execute``.

    Usage:
        @error_boundary(default_return=None)
        def build_translator() -> TranslationService:
            return TranslationService(load_translations(), get_storage())
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Optional[T]:
            return safe_execute(func, *args, default=default_return,
                                error_message=error_message, **kwargs)

        return wrapper

    return decorator
