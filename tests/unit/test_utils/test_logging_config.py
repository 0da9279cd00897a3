"""
Unit tests for logging setup.
"""

import logging

import pytest

from railpath.utils.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_logging():
    """Put root handlers and package levels back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    for name in ("railpath.core", "railpath.managers"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestSetupLogging:
    """Test logging configuration."""

    def test_levels_are_applied(self, restore_logging):
        setup_logging("debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("railpath.core").level == logging.DEBUG
        assert logging.getLogger("railpath.managers").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, restore_logging):
        setup_logging("verbose")

        assert logging.getLogger().level == logging.WARNING

    def test_log_file(self, restore_logging, tmp_path):
        log_file = tmp_path / "logs" / "railpath.log"

        setup_logging("INFO", str(log_file))
        logging.getLogger("railpath.core.test").info("graph built")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        contents = log_file.read_text(encoding="utf-8")
        assert "railpath.core.test - INFO - graph built" in contents
        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert file_handlers[0].formatter._fmt == LOG_FORMAT
