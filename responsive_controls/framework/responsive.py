"""
Responsive Option Facade

The two operations presentation code calls for a responsive option: build
the combined media query string and check whether the option is enabled at
any breakpoint. Both are total and return "" / False for invalid input.

Usage::

    from responsive_controls.framework.responsive import ResponsiveOptions

    options = ResponsiveOptions(registry, MappingSettingsSource(widget_settings))
    query = options.get_media_query_string("sticky_header", "and (hover: hover)")
    if options.has_enabled_anywhere("sticky_header"):
        ...
"""

from ..domain.breakpoints import BreakpointSource
from ..domain.settings import SettingsMap, SettingsSource
from ..utils.error_handling import fallback_on
from .media_queries import ENABLED_VALUE, append_suffix, build_fragments, render
from .resolver import resolve_settings_map


class ResponsiveOptions:
    """
    Stateless service resolving responsive options against one registry and
    one settings source.

    Attributes:
        registry: Breakpoint registry snapshot for the current render
        settings_source: Accessor for the widget's raw settings
        enabled_value: Value marking an option as enabled (default "yes")
    """

    def __init__(
        self,
        registry: BreakpointSource,
        settings_source: SettingsSource,
        enabled_value: str = ENABLED_VALUE,
    ):
        self.registry = registry
        self.settings_source = settings_source
        self.enabled_value = enabled_value

    def get_resolved_map(self, option_name: str) -> SettingsMap:
        """Return the inherited per-breakpoint values, largest breakpoint first."""
        return resolve_settings_map(option_name, self.registry, self.settings_source)

    @fallback_on(str, error_type="Media query synthesis")
    def get_media_query_string(self, option_name: str, suffix: str = "") -> str:
        """
        Build the media query matching every width where the option is enabled.

        Args:
            option_name: Base option name
            suffix: Optional condition appended to each fragment

        Returns:
            Comma-separated media query, "" when nothing applies
        """
        fragments = build_fragments(self.get_resolved_map(option_name), self.registry, self.enabled_value)
        return render(append_suffix(fragments, suffix))

    @fallback_on(bool, error_type="Enabled value check")
    def has_enabled_anywhere(self, option_name: str, enabled_value: str | None = None) -> bool:
        """
        Check whether any resolved breakpoint value equals the enabled value.

        Args:
            option_name: Base option name
            enabled_value: Value to look for (default: the service's enabled value)
        """
        target = self.enabled_value if enabled_value is None else enabled_value
        return any(value == target for _, value in self.get_resolved_map(option_name))


def get_media_query_string(
    registry: BreakpointSource, settings_source: SettingsSource, option_name: str, suffix: str = ""
) -> str:
    """Functional form of ResponsiveOptions.get_media_query_string()."""
    return ResponsiveOptions(registry, settings_source).get_media_query_string(option_name, suffix)


def has_enabled_anywhere(
    registry: BreakpointSource,
    settings_source: SettingsSource,
    option_name: str,
    enabled_value: str = ENABLED_VALUE,
) -> bool:
    """Functional form of ResponsiveOptions.has_enabled_anywhere()."""
    return ResponsiveOptions(registry, settings_source).has_enabled_anywhere(option_name, enabled_value)
