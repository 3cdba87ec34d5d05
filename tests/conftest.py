"""
Pytest configuration and shared fixtures

Provides breakpoint registries and settings sources shared by the domain,
framework and CLI tests.
"""

import logging

import pytest

from responsive_controls.domain.breakpoints import BreakpointDefinition, BreakpointRegistry
from responsive_controls.domain.settings import MappingSettingsSource

# ===== Registry Fixtures =====


@pytest.fixture
def scenario_registry():
    """Mobile/tablet/widescreen registry with explicit device floors"""
    return BreakpointRegistry(
        breakpoints=(
            BreakpointDefinition("mobile", 767, "max"),
            BreakpointDefinition("tablet", 1024, "max"),
            BreakpointDefinition("widescreen", 1920, "min"),
        ),
        device_min_widths={"mobile": 320, "tablet": 768, "desktop": 1025},
        desktop_min=1025,
    )


@pytest.fixture
def no_widescreen_registry():
    """Registry with only max-direction breakpoints"""
    return BreakpointRegistry(
        breakpoints=(
            BreakpointDefinition("mobile", 767, "max"),
            BreakpointDefinition("tablet", 1024, "max"),
        )
    )


@pytest.fixture
def partially_disabled_registry():
    """Registry where tablet is disabled in the page builder"""
    return BreakpointRegistry(
        breakpoints=(
            BreakpointDefinition("mobile", 767, "max"),
            BreakpointDefinition("tablet", 1024, "max", enabled=False),
            BreakpointDefinition("widescreen", 1920, "min"),
        )
    )


# ===== Settings Fixtures =====


@pytest.fixture
def make_source():
    """Factory building a settings source for an option from per-breakpoint values"""

    def _make(option="sticky", **values):
        settings = {}
        for name, value in values.items():
            key = option if name == "desktop" else f"{option}_{name}"
            settings[key] = value
        return MappingSettingsSource(settings)

    return _make


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing log calls."""
    from unittest.mock import MagicMock

    return MagicMock(spec=logging.Logger)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset configuration and template engine singletons between tests"""
    import responsive_controls.secure_config as secure_config
    import responsive_controls.template_engine as template_engine

    secure_config._config_instance = None
    template_engine._engine = None
    yield
    secure_config._config_instance = None
    template_engine._engine = None
