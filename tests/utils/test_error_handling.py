#!/usr/bin/env python3
"""
Tests for Error Handling Utility Module

Tests:
1. log_and_return_default() - Return default value after logging
2. log_and_raise() - Log and re-raise exception
3. fallback_on() - Decorator returning a logged default
"""

import logging

import pytest

from responsive_controls.utils.error_handling import (
    log_and_raise,
    log_and_return_default,
    fallback_on,
)


class TestLogAndReturnDefault:
    """Test suite for log_and_return_default() function."""

    def test_returns_default(self, mock_logger):
        """Test the default value is returned."""
        result = log_and_return_default(mock_logger, TypeError("x"), {}, default_value="", error_type="Lookup")

        assert result == ""
        mock_logger.warning.assert_called_once()

    def test_default_value_in_extra(self, mock_logger):
        """Test default value is logged as repr."""
        log_and_return_default(mock_logger, TypeError("x"), {}, default_value=None)

        extra = mock_logger.warning.call_args[1]["extra"]
        assert extra["default_value"] == "None"


class TestLogAndRaise:
    """Test suite for log_and_raise() function."""

    def test_reraises(self, mock_logger):
        """Test the original exception propagates after logging."""
        error = RuntimeError("config broken")

        with pytest.raises(RuntimeError, match="config broken"):
            log_and_raise(mock_logger, error, {"path": "bp.json"}, "Config loading")

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["exc_info"] is True


class TestFallbackOn:
    """Test suite for fallback_on() decorator."""

    def test_passes_through_result(self):
        """Test successful calls are unaffected."""

        @fallback_on(str)
        def build():
            return "(min-width: 768px)"

        assert build() == "(min-width: 768px)"

    def test_returns_default_on_error(self, caplog):
        """Test expected errors return the factory default and log a warning."""

        @fallback_on(bool, error_type="Enabled check")
        def check():
            raise LookupError("missing breakpoint")

        with caplog.at_level(logging.WARNING):
            assert check() is False

        assert "Enabled check failed" in caplog.text

    def test_unexpected_errors_propagate(self):
        """Test exceptions outside the tuple are not caught."""

        @fallback_on(str, exceptions=(KeyError,))
        def build():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            build()

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the function name."""

        @fallback_on(list)
        def build_fragments():
            """Docstring"""
            return []

        assert build_fragments.__name__ == "build_fragments"
        assert build_fragments.__doc__ == "Docstring"
