"""
Domain Models - Breakpoints and per-breakpoint settings

This package contains the data structures shared by the resolver and the
media query synthesizer:
    - breakpoints: BreakpointDefinition, BreakpointRegistry
    - settings: SettingsMap, SettingsSource, MappingSettingsSource

Usage:
    from responsive_controls.domain import BreakpointRegistry, BreakpointDefinition

    registry = BreakpointRegistry(breakpoints=(BreakpointDefinition("mobile", 767, "max"),))
"""

from .breakpoints import (
    DESKTOP_KEY,
    DIRECTION_MAX,
    DIRECTION_MIN,
    MOBILE_MIN_WIDTH,
    WIDESCREEN_KEY,
    BreakpointDefinition,
    BreakpointRegistry,
    BreakpointSource,
    active_breakpoints,
    default_registry,
    registry_from_config,
)
from .settings import MappingSettingsSource, SettingsMap, SettingsSource, breakpoint_option_name, is_unset

__all__ = [
    # Breakpoints
    "BreakpointDefinition",
    "BreakpointRegistry",
    "BreakpointSource",
    "active_breakpoints",
    "default_registry",
    "registry_from_config",
    "DESKTOP_KEY",
    "WIDESCREEN_KEY",
    "DIRECTION_MIN",
    "DIRECTION_MAX",
    "MOBILE_MIN_WIDTH",
    # Settings
    "SettingsMap",
    "SettingsSource",
    "MappingSettingsSource",
    "breakpoint_option_name",
    "is_unset",
]
