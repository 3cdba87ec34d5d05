"""
Core Infrastructure - Logging

Usage:
    from responsive_controls.core import get_logger

    logger = get_logger(__name__)
    logger.debug("Resolving option")
"""

from .logging_config import ContextFormatter, JSONFormatter, get_logger, log_with_context, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "log_with_context",
    "JSONFormatter",
    "ContextFormatter",
]
