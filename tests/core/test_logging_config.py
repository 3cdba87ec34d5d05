"""
Tests for responsive_controls.core.logging_config module
"""

import json
import logging

import pytest

from responsive_controls.core.logging_config import (
    ContextFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message="Resolved option", level=logging.INFO, **attrs):
    record = logging.LogRecord("responsive_controls.test", level, __file__, 10, message, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON structured output"""

    def test_basic_fields(self):
        """Test core fields are present"""
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Resolved option"
        assert data["logger"] == "responsive_controls.test"
        assert data["timestamp"].endswith("Z")

    def test_structured_error_fields(self):
        """Test error_handling extras are serialized"""
        record = _record(error_type="Settings lookup", context={"setting": "sticky_tablet"})
        data = json.loads(JSONFormatter().format(record))

        assert data["error_type"] == "Settings lookup"
        assert data["context"] == {"setting": "sticky_tablet"}

    def test_extra_fields_merged(self):
        """Test log_with_context fields are merged at top level"""
        data = json.loads(JSONFormatter().format(_record(extra_fields={"fragment_count": 3})))
        assert data["fragment_count"] == 3


class TestContextFormatter:
    """Test human-readable output"""

    def test_plain_output(self):
        """Test no color codes when color is disabled"""
        formatter = ContextFormatter(fmt="%(levelname)s | %(message)s", use_color=False)
        assert formatter.format(_record()) == "INFO | Resolved option"

    def test_color_does_not_leak(self):
        """Test coloring does not modify the shared record"""
        formatter = ContextFormatter(fmt="%(levelname)s", use_color=True)
        record = _record(level=logging.WARNING)

        assert "\033[33m" in formatter.format(record)
        assert record.levelname == "WARNING"


class TestSetupLogging:
    """Test application logging setup"""

    def test_setup_console(self, restore_root_logger):
        """Test console handler and level"""
        setup_logging(level="DEBUG")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, ContextFormatter)

    def test_setup_json_file(self, restore_root_logger, tmp_path):
        """Test file handler always writes JSON"""
        log_file = tmp_path / "logs" / "queries.log"
        setup_logging(level="INFO", log_file=log_file, json_output=True)

        get_logger("responsive_controls.test").info("written")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
        assert json.loads(log_file.read_text().strip())["message"] == "written"

    def test_unknown_level_defaults_to_info(self, restore_root_logger):
        """Test invalid level names fall back to INFO"""
        setup_logging(level="chatty")
        assert restore_root_logger.level == logging.INFO


class TestLogWithContext:
    """Test context logging helper"""

    def test_log_with_context(self, mock_logger):
        """Test context is passed as extra_fields"""
        log_with_context(mock_logger, "debug", "Fragments built", fragment_count=2)

        mock_logger.debug.assert_called_once_with("Fragments built", extra={"extra_fields": {"fragment_count": 2}})
