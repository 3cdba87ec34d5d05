"""
Secure Configuration Management

Provides centralized, validated configuration for the application.
Values come from environment variables (optionally loaded from a .env file)
and are validated with fail-fast behavior.

Usage:
    from responsive_controls.secure_config import get_config

    config = get_config()
    registry = config.get_registry()
    print(config.enabled_value)

Environment Variables:
    RESPONSIVE_BREAKPOINTS_FILE: Optional JSON breakpoint config
        ({"mobile": {"value": 767, "direction": "max", "is_enabled": true}, ...})
    RESPONSIVE_ENABLED_VALUE: Value marking an option as enabled (default: yes)
    RESPONSIVE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)

Raises:
    ConfigurationError: If configuration is missing or invalid
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.logging_config import get_logger
from .domain.breakpoints import BreakpointRegistry, default_registry, registry_from_config
from .utils.error_handling import log_and_raise

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass
class ResponsiveConfig:
    """
    Validated responsive-controls configuration.
    """

    breakpoints_file: Path | None = None
    enabled_value: str = "yes"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.breakpoints_file is not None:
            self.breakpoints_file = Path(self.breakpoints_file)

            if self.breakpoints_file.suffix.lower() != ".json":
                raise ConfigurationError(
                    f"RESPONSIVE_BREAKPOINTS_FILE must be a .json file: {self.breakpoints_file}"
                )

            if not self.breakpoints_file.is_file():
                raise ConfigurationError(f"RESPONSIVE_BREAKPOINTS_FILE not found: {self.breakpoints_file}")

        if not self.enabled_value:
            raise ConfigurationError("RESPONSIVE_ENABLED_VALUE cannot be empty")

        if any(char.isspace() for char in self.enabled_value):
            raise ConfigurationError(
                f"RESPONSIVE_ENABLED_VALUE cannot contain whitespace: {self.enabled_value!r}"
            )

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"RESPONSIVE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.log_level}"
            )


def load_breakpoints_file(path: Path) -> BreakpointRegistry:
    """
    Load a breakpoint registry from a JSON config file.

    The file holds either the flat breakpoint config or an object with
    "breakpoints", "device_min_widths" and "desktop_min_width" keys.

    Args:
        path: JSON file in the page builder's breakpoint config format

    Returns:
        BreakpointRegistry

    Raises:
        ConfigurationError: If the file cannot be read or describes invalid breakpoints
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(data, dict) and "breakpoints" in data:
            return registry_from_config(
                data["breakpoints"],
                device_min_widths=data.get("device_min_widths"),
                desktop_min_width=data.get("desktop_min_width"),
            )
        return registry_from_config(data)
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        error = ConfigurationError(f"Invalid breakpoint config {path}: {e}")
        error.__cause__ = e
        log_and_raise(logger, error, context={"path": str(path)}, error_type="Breakpoint config loading")


class SecureConfig:
    """
    Centralized configuration manager.

    Loads and validates configuration from environment variables.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_responsive_config(self) -> ResponsiveConfig:
        """
        Get validated responsive configuration.

        Returns:
            ResponsiveConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        breakpoints_file = os.getenv("RESPONSIVE_BREAKPOINTS_FILE")

        return ResponsiveConfig(
            breakpoints_file=Path(breakpoints_file) if breakpoints_file else None,
            enabled_value=os.getenv("RESPONSIVE_ENABLED_VALUE", "yes"),
            log_level=os.getenv("RESPONSIVE_LOG_LEVEL", "INFO"),
        )

    def get_registry(self) -> BreakpointRegistry:
        """
        Get the breakpoint registry: the configured JSON file, or the
        page builder's standard breakpoints.

        Raises:
            ConfigurationError: If the breakpoint file is invalid
        """
        responsive_config = self.get_responsive_config()
        if responsive_config.breakpoints_file is None:
            return default_registry()
        return load_breakpoints_file(responsive_config.breakpoints_file)


_config_instance = None


def get_config() -> SecureConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SecureConfig: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SecureConfig()
    return _config_instance


def validate_config_on_startup() -> ResponsiveConfig:
    """
    Validate configuration at application startup.

    Returns:
        ResponsiveConfig: The validated configuration

    Raises:
        ConfigurationError: If configuration or the breakpoint file is invalid
    """
    config = get_config()
    responsive_config = config.get_responsive_config()
    config.get_registry()  # Raises if the breakpoint file is invalid
    return responsive_config
