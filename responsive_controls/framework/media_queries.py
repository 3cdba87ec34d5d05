"""
Media Query Synthesizer

Turns a resolved settings map into CSS media-query fragments. Fragments are
OR-ed together when rendered, so the final query matches every screen width
where the option resolves to the enabled value.

Fragment shapes:
    enabled max breakpoint:   (min-width: <device floor>px) and (max-width: <threshold>px)
    enabled min breakpoint:   (min-width: <threshold>px)
    disabled min breakpoint:  not (min-width: <threshold>px)
    disabled max breakpoint:  no fragment
    enabled desktop:          (min-width: <desktop floor>px)[ and (max-width: <widescreen>px)]
    disabled desktop:         not ((min-width: <desktop floor>px) and (max-width: <widescreen>px))
"""

from ..core.logging_config import get_logger, log_with_context
from ..domain.breakpoints import DESKTOP_KEY, BreakpointSource, active_breakpoints
from ..domain.settings import SettingsMap

logger = get_logger(__name__)

ENABLED_VALUE = "yes"


def build_fragments(
    settings: SettingsMap, registry: BreakpointSource, enabled_value: str = ENABLED_VALUE
) -> list[str]:
    """
    Build media-query fragments for a resolved settings map.

    Breakpoints are visited in registry order, then desktop. Disabled
    max-direction breakpoints emit nothing, so at most one fragment is
    produced per enabled breakpoint plus one for desktop.

    Args:
        settings: Resolved map from apply_inheritance()
        registry: Breakpoint registry snapshot
        enabled_value: Value marking the option as enabled

    Returns:
        List of fragment strings (possibly empty)
    """
    fragments: list[str] = []
    widescreen_key = registry.widescreen_key()
    widescreen = None

    for breakpoint in active_breakpoints(registry):
        if breakpoint.name not in settings:
            continue

        if settings.get(breakpoint.name) == enabled_value:
            if breakpoint.is_max:
                min_width = registry.device_min_width(breakpoint.name)
                fragments.append(f"(min-width: {min_width}px) and (max-width: {breakpoint.threshold_px}px)")
            else:
                fragments.append(f"(min-width: {breakpoint.threshold_px}px)")
        elif not breakpoint.is_max:
            fragments.append(f"not (min-width: {breakpoint.threshold_px}px)")

        if breakpoint.name == widescreen_key:
            widescreen = breakpoint

    if DESKTOP_KEY in settings:
        desktop_min = registry.desktop_min_width()

        if settings.get(DESKTOP_KEY) == enabled_value:
            fragment = f"(min-width: {desktop_min}px)"
            if widescreen is not None:
                fragment += f" and (max-width: {widescreen.threshold_px}px)"
            fragments.append(fragment)
        elif widescreen is not None:
            fragments.append(f"not ((min-width: {desktop_min}px) and (max-width: {widescreen.threshold_px}px))")

    log_with_context(logger, "debug", "Built media query fragments", fragment_count=len(fragments))
    return fragments


def append_suffix(fragments: list[str], suffix: str = "") -> list[str]:
    """
    Append an extra condition to every fragment.

    Example:
        append_suffix(["(min-width: 1025px)"], "and (orientation: landscape)")
        # ["(min-width: 1025px) and (orientation: landscape)"]
    """
    if not suffix:
        return list(fragments)
    return [f"{fragment} {suffix}" for fragment in fragments]


def render(fragments: list[str]) -> str:
    """Join fragments into one media query (comma means OR)."""
    return ", ".join(fragments)
