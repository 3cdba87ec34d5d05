"""
Centralized logging configuration with structured JSON output.

Provides:
- JSON structured logging for log aggregation
- Human-readable console logging for development
- Structured context fields (breakpoint, option, fallback values)
- Optional file output

The library never configures logging on import; applications (and the
``responsive-query`` CLI) call ``setup_logging`` once at startup.

Usage:
    from responsive_controls.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Resolved option", extra={"extra_fields": {"option": "sticky"}})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Keys set by utils.error_handling on degraded lookups
STRUCTURED_KEYS = ("error_type", "exception_class", "context", "default_value")


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string"""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in STRUCTURED_KEYS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        # Fields from log_with_context()
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Colors the level name when writing to a terminal.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_color: bool | None = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color coding"""
        if not self.use_color:
            return super().format(record)

        # Work on a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output (always JSON)
        json_output: If True, use JSON formatter on the console

    Example:
        setup_logging(level="DEBUG")
        setup_logging(level="INFO", log_file=Path(".tmp/logs/queries.log"), json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    # Console output goes to stderr so stdout stays clean for query strings
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())

        root_logger.addHandler(file_handler)

    logging.getLogger("jinja2").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: Module name (use __name__ in calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **context: Additional context fields (key-value pairs)

    Example:
        log_with_context(logger, "debug", "Fragments built", option="sticky", fragment_count=3)
    """
    log_func = getattr(logger, level.lower())
    log_func(message, extra={"extra_fields": context})
