#!/usr/bin/env python3
"""
Error Handling Utility Module

Rendering paths in this library must never raise: a missing setting, an
unknown breakpoint or a misbehaving settings source degrades to "nothing
enabled". These helpers make each degradation visible with structured
logging instead of a silent fallback.

This module provides three utilities:
1. log_and_return_default() - Log error and return a default value
2. log_and_raise() - Log error with context and re-raise (startup errors)
3. fallback_on() - Decorator returning a default value on expected errors
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

# Errors a settings source or registry lookup may raise for malformed input
LOOKUP_ERRORS: tuple[type[Exception], ...] = (LookupError, TypeError, AttributeError, ValueError)


def log_and_return_default(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    default_value: Any = None,
    error_type: str = "Operation",
) -> Any:
    """
    Log an error and return a default value.

    Args:
        logger: Logger instance
        error: The caught exception
        context: Structured data about what failed
        default_value: Value to return on error (None, "", False, ...)
        error_type: Human-readable description

    Returns:
        default_value

    Example:
        try:
            return source.get_value(key)
        except LOOKUP_ERRORS as e:
            return log_and_return_default(logger, e, {"key": key}, None, "Settings lookup")
    """
    logger.warning(
        f"{error_type} failed, returning default value: {error}",
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
            "default_value": repr(default_value),
        },
    )
    return default_value


def log_and_raise(
    logger: logging.Logger,
    error: Exception,
    context: dict[str, Any],
    error_type: str = "Operation",
) -> None:
    """
    Log an error with context and re-raise it.

    Use for configuration problems that should stop the application at
    startup rather than degrade a rendered page.

    Raises:
        The original exception after logging
    """
    logger.error(
        f"{error_type} failed critically: {error}",
        exc_info=True,
        extra={
            "error_type": error_type,
            "exception_class": error.__class__.__name__,
            "context": context,
        },
    )
    raise error


def fallback_on(
    default_factory: Callable[[], T],
    exceptions: tuple[type[Exception], ...] = LOOKUP_ERRORS,
    error_type: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that turns expected errors into a logged default value.

    Args:
        default_factory: Builds the value returned on error (e.g. ``str`` for "")
        exceptions: Tuple of exception types to catch
        error_type: Description used in the log message (default: function name)

    Example:
        @fallback_on(bool)
        def has_enabled_anywhere(option_name: str) -> bool:
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                return log_and_return_default(
                    logging.getLogger(func.__module__),
                    e,
                    context={"function": func.__name__},
                    default_value=default_factory(),
                    error_type=error_type or func.__name__,
                )

        return wrapper

    return decorator
