"""
Breakpoint Value Resolver

Reads the raw value of a responsive option at every enabled breakpoint and
fills unset breakpoints from the nearest larger breakpoint that was
explicitly configured.
"""

from typing import Any

from ..core.logging_config import get_logger, log_with_context
from ..domain.breakpoints import DESKTOP_KEY, BreakpointSource, active_breakpoints
from ..domain.settings import SettingsMap, SettingsSource, breakpoint_option_name, is_unset
from ..utils.error_handling import LOOKUP_ERRORS, log_and_return_default

logger = get_logger(__name__)


def _read_setting(settings_source: SettingsSource, key: str) -> Any:
    try:
        return settings_source.get_value(key)
    except LOOKUP_ERRORS as e:
        return log_and_return_default(
            logger, e, context={"setting": key}, default_value=None, error_type="Settings lookup"
        )


def build_raw_map(option_name: str, registry: BreakpointSource, settings_source: SettingsSource) -> SettingsMap:
    """
    Collect the raw value of an option for desktop and each enabled breakpoint.

    Desktop reads the bare option name; breakpoints read
    ``<option>_<breakpoint>``. The result lists entries in reverse reading
    order: largest breakpoints first, desktop last.

    Args:
        option_name: Base option name (e.g. "sticky_header")
        registry: Breakpoint registry snapshot
        settings_source: Accessor for the widget's raw settings

    Returns:
        SettingsMap, empty when option_name is empty or not a string
    """
    if not option_name or not isinstance(option_name, str):
        return SettingsMap()

    entries = [(DESKTOP_KEY, _read_setting(settings_source, option_name))]
    for breakpoint in active_breakpoints(registry):
        key = breakpoint_option_name(option_name, breakpoint.name)
        entries.append((breakpoint.name, _read_setting(settings_source, key)))

    return SettingsMap.from_pairs(entries).reversed()


def inheritance_sequence(settings: SettingsMap, registry: BreakpointSource) -> list[str]:
    """
    Order the breakpoints of a settings map from smallest screen to largest.

    Only enabled registry breakpoints present in the map take part. Desktop
    sits directly below widescreen, or on top when there is no widescreen.
    """
    breakpoints = [bp for bp in active_breakpoints(registry) if bp.name in settings]
    # Stable sort keeps registry order for equal thresholds
    sequence = [bp.name for bp in sorted(breakpoints, key=lambda bp: bp.threshold_px)]

    if DESKTOP_KEY in settings:
        widescreen_key = registry.widescreen_key()
        if widescreen_key in sequence:
            sequence.insert(sequence.index(widescreen_key), DESKTOP_KEY)
        else:
            sequence.append(DESKTOP_KEY)

    return sequence


def apply_inheritance(settings: SettingsMap, registry: BreakpointSource) -> SettingsMap:
    """
    Fill unset breakpoints from the nearest larger configured breakpoint.

    The walk runs from the largest breakpoint down. The largest member is
    never filled, and an all-unset map comes back unchanged.

    Args:
        settings: Raw map from build_raw_map()
        registry: Breakpoint registry snapshot

    Returns:
        SettingsMap with the same keys in the same order

    Example:
        raw = {widescreen: "", desktop: "yes", tablet: "", mobile: "no"}
        resolved = {widescreen: "", desktop: "yes", tablet: "yes", mobile: "no"}
    """
    inherited: Any = None
    filled: dict[str, Any] = {}

    for name in reversed(inheritance_sequence(settings, registry)):
        value = settings.get(name)
        if not is_unset(value):
            inherited = value
        elif inherited is not None:
            filled[name] = inherited

    if filled:
        log_with_context(logger, "debug", "Inherited breakpoint values", filled=filled)

    return settings.with_values(filled)


def resolve_settings_map(
    option_name: str, registry: BreakpointSource, settings_source: SettingsSource
) -> SettingsMap:
    """Build the raw map for an option and apply inheritance."""
    return apply_inheritance(build_raw_map(option_name, registry, settings_source), registry)
