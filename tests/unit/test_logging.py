# =============================================================================
# tests/unit/test_logging.py
# Unit Tests for logging setup
# =============================================================================

import logging

import pytest

from agriscan_core.logging import (
    DeviceFilter,
    LogContext,
    bind_device,
    current_device,
    get_logger,
    parse_log_level,
    setup_logging,
)


@pytest.fixture
def restore_root_logging():
    """setup_logging replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLogLevel:

    @pytest.mark.parametrize("value,expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ])
    def test_levels(self, value, expected):
        assert parse_log_level(value) == expected


class TestSetupLogging:

    def test_file_handler_created(self, tmp_path, restore_root_logging):
        setup_logging(level="INFO", log_to_file=True, log_filename="test.log", log_dir=tmp_path)
        get_logger("agriscan_core.test").info("hello from test")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in (tmp_path / "test.log").read_text(encoding="utf-8")

    def test_noisy_loggers_quieted(self, restore_root_logging):
        setup_logging(level="DEBUG", log_to_file=False)
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_records_tagged_with_device(self, tmp_path, restore_root_logging):
        setup_logging(level="INFO", log_to_file=True, log_filename="dev.log", log_dir=tmp_path)
        bind_device("3f2a9c1b77d04e5a")
        try:
            get_logger("agriscan_core.test").info("saved offline")
        finally:
            bind_device(None)

        for handler in logging.getLogger().handlers:
            handler.flush()
        line = (tmp_path / "dev.log").read_text(encoding="utf-8").splitlines()[-1]
        assert " | 3f2a9c1b | agriscan_core.test | INFO | saved offline" in line


class TestDeviceTag:

    def test_default_tag(self):
        bind_device(None)
        assert current_device() == "-"

    def test_tag_truncated(self):
        bind_device("abcdef0123456789")
        try:
            assert current_device() == "abcdef01"
        finally:
            bind_device(None)

    def test_filter_sets_attribute(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        assert DeviceFilter().filter(record)
        assert record.device == current_device()


class TestLogContext:

    def test_logs_start_and_completion(self, caplog):
        logger = get_logger("agriscan_core.ctx")
        with caplog.at_level(logging.INFO, logger="agriscan_core.ctx"):
            with LogContext(logger, "Analyzing leaf") as ctx:
                pass

        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Analyzing leaf... started"
        assert messages[1].startswith("Analyzing leaf... completed")
        assert ctx.elapsed >= 0

    def test_failure_logged_and_propagated(self, caplog):
        logger = get_logger("agriscan_core.ctx")
        with caplog.at_level(logging.INFO, logger="agriscan_core.ctx"):
            with pytest.raises(RuntimeError):
                with LogContext(logger, "Saving"):
                    raise RuntimeError("disk")

        assert any("failed" in r.getMessage() for r in caplog.records)
