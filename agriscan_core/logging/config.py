# =============================================================================
# agriscan_core/logging/config.py
# Logging Configuration for AgriScan
# =============================================================================
"""
One log stream for every farmer session served by the process.

Records carry a short device tag (the first characters of the session's
``device_id``) so that interleaved sessions can be told apart:

    2024-06-01 08:15:02 | 3f2a9c1b | agriscan_core.offline.local_first_store | INFO | Offline: saved 5 items ...
"""

import logging
import sys
import time
from contextvars import ContextVar
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


LOG_FORMAT = "%(asctime)s | %(device)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_DIR = Path("logs")
NO_DEVICE = "-"
DEVICE_TAG_LENGTH = 8

# Third-party loggers that flood the console at INFO
NOISY_LOGGERS = ("urllib3", "PIL", "watchdog", "tornado", "asyncio", "streamlit")

# Each Streamlit script run executes in its own context
_current_device: ContextVar[str] = ContextVar("agriscan_device", default=NO_DEVICE)


def bind_device(device_id: Optional[str]) -> None:
    """Tag records logged from the current script run with this device."""
    _current_device.set(device_id[:DEVICE_TAG_LENGTH] if device_id else NO_DEVICE)


def current_device() -> str:
    return _current_device.get()


class DeviceFilter(logging.Filter):
    """Adds ``record.device`` for LOG_FORMAT."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.device = _current_device.get()
        return True


def parse_log_level(level: Union[int, str]) -> int:
    """Accept either a logging constant or its name ("debug", "INFO", ...)."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_to_file: bool = True,
    log_filename: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Route all records to stdout and, optionally, a daily file.

    Args:
        level: Logging level, as a constant or a name (default: INFO)
        log_to_file: Whether to also write logs/agriscan_YYYY-MM-DD.log
        log_filename: Override for the file name
        log_dir: Override for the log directory (default: ./logs)
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_to_file:
        directory = log_dir or LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        name = log_filename or f"agriscan_{datetime.now():%Y-%m-%d}.log"
        handlers.append(logging.FileHandler(directory / name, encoding="utf-8"))

    device_filter = DeviceFilter()
    for handler in handlers:
        handler.addFilter(device_filter)

    logging.basicConfig(
        level=parse_log_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("agriscan_core").info(
        f"Logging initialized at {logging.getLevelName(parse_log_level(level))}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Usage:
        from agriscan_core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Scan started")
    """
    return logging.getLogger(name)


class LogContext:
    """
    Times a block and logs its start and outcome.

    Usage:
        with LogContext(logger, "Analyzing leaf image"):
            result = analyze_image(upload)
        # Analyzing leaf image... started
        # Analyzing leaf image... completed (2.81s)
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[float] = None

    @property
    def elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        return time.perf_counter() - self.start_time

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.info(f"{self.operation}... started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(f"{self.operation}... completed ({self.elapsed:.2f}s)")
        else:
            self.logger.error(
                f"{self.operation}... failed after {self.elapsed:.2f}s: {exc_val}",
                exc_info=True,
            )
        return False
