"""
Responsive Option Framework

Package Structure:
    - resolver.py: Raw per-breakpoint values and inheritance
    - media_queries.py: Media query fragments, suffixes and rendering
    - responsive.py: ResponsiveOptions facade
    - css_rules.py: @media rule rendering

Usage::

    from responsive_controls.framework import ResponsiveOptions

    options = ResponsiveOptions(registry, settings_source)
    query = options.get_media_query_string("sticky_header")
"""

from .css_rules import render_media_rule, render_responsive_rule
from .media_queries import ENABLED_VALUE, append_suffix, build_fragments, render
from .resolver import apply_inheritance, build_raw_map, inheritance_sequence, resolve_settings_map
from .responsive import ResponsiveOptions, get_media_query_string, has_enabled_anywhere

__all__ = [
    "ENABLED_VALUE",
    "build_raw_map",
    "apply_inheritance",
    "inheritance_sequence",
    "resolve_settings_map",
    "build_fragments",
    "append_suffix",
    "render",
    "ResponsiveOptions",
    "get_media_query_string",
    "has_enabled_anywhere",
    "render_media_rule",
    "render_responsive_rule",
]
