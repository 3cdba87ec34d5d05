"""
Responsive Controls - Breakpoint Resolution and Media Query Synthesis

Resolves per-breakpoint option values for a page-builder widget and turns
them into a single CSS media query that matches the enabled screen widths.

Package Structure:
    - core: Logging infrastructure
    - domain: Breakpoint registry and settings map models
    - framework: Resolver, media query synthesizer, option facade, CSS rules
    - utils: Error handling helpers

Usage::

    from responsive_controls import ResponsiveOptions, default_registry, MappingSettingsSource

    options = ResponsiveOptions(default_registry(), MappingSettingsSource(widget_settings))
    query = options.get_media_query_string("sticky_header")
"""

from .domain.breakpoints import (
    BreakpointDefinition,
    BreakpointRegistry,
    BreakpointSource,
    default_registry,
    registry_from_config,
)
from .domain.settings import MappingSettingsSource, SettingsMap, SettingsSource
from .framework.css_rules import render_media_rule
from .framework.responsive import ResponsiveOptions, get_media_query_string, has_enabled_anywhere

__version__ = "1.0.0"
__author__ = "Responsive Controls Team"

__all__ = [
    "BreakpointDefinition",
    "BreakpointRegistry",
    "BreakpointSource",
    "default_registry",
    "registry_from_config",
    "SettingsMap",
    "SettingsSource",
    "MappingSettingsSource",
    "ResponsiveOptions",
    "get_media_query_string",
    "has_enabled_anywhere",
    "render_media_rule",
]
