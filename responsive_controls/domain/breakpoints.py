"""
Breakpoint domain models

Provides the breakpoint registry consumed by the resolver and the media
query synthesizer:
    - BreakpointDefinition: One named screen-width threshold
    - BreakpointSource: Protocol the resolver and synthesizer read from
    - BreakpointRegistry: Ordered breakpoints plus device minimum widths
    - default_registry(): The page builder's standard breakpoint set
    - registry_from_config(): Build a registry from the host's config dict
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

DIRECTION_MIN = "min"
DIRECTION_MAX = "max"
DIRECTIONS = (DIRECTION_MIN, DIRECTION_MAX)

DESKTOP_KEY = "desktop"
WIDESCREEN_KEY = "widescreen"

# Floor of the smallest device class
MOBILE_MIN_WIDTH = 320


@dataclass(frozen=True)
class BreakpointDefinition:
    """
    A named screen-width threshold.

    Attributes:
        name: Breakpoint key (e.g. "mobile", "tablet", "widescreen")
        threshold_px: Pixel threshold of the breakpoint
        direction: "max" applies up to the threshold, "min" from it upward
        enabled: Whether the breakpoint is active in the page builder

    Example:
        tablet = BreakpointDefinition(name="tablet", threshold_px=1024, direction="max")
        tablet.is_max  # True
    """

    name: str
    threshold_px: int
    direction: str = DIRECTION_MAX
    enabled: bool = True

    def __post_init__(self) -> None:
        """
        Validate the definition.

        Raises:
            ValueError: If name is empty, direction unknown or threshold negative
        """
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Breakpoint name must be a non-empty string, got {self.name!r}")
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Breakpoint '{self.name}' direction must be 'min' or 'max', got {self.direction!r}")
        if isinstance(self.threshold_px, bool) or not isinstance(self.threshold_px, int):
            raise ValueError(f"Breakpoint '{self.name}' threshold must be an integer, got {self.threshold_px!r}")
        if self.threshold_px < 0:
            raise ValueError(f"Breakpoint '{self.name}' threshold cannot be negative")

    @property
    def is_max(self) -> bool:
        return self.direction == DIRECTION_MAX


@runtime_checkable
class BreakpointSource(Protocol):
    """Read access to the page builder's breakpoint configuration."""

    def list_breakpoints(self) -> list[BreakpointDefinition]:
        """Return all breakpoints (enabled or not) in registry order."""
        ...

    def device_min_width(self, name: str) -> int:
        """Return the lower bound of the device class named by a breakpoint."""
        ...

    def desktop_min_width(self) -> int:
        """Return the smallest width treated as desktop."""
        ...

    def widescreen_key(self) -> str | None:
        """Return the widescreen breakpoint name, or None."""
        ...


def active_breakpoints(registry: BreakpointSource) -> list[BreakpointDefinition]:
    """Return the enabled breakpoints of any registry, in registry order."""
    return [breakpoint for breakpoint in registry.list_breakpoints() if breakpoint.enabled]


def _check_width(label: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{label} cannot be negative")


@dataclass(frozen=True)
class BreakpointRegistry:
    """
    Ordered breakpoint definitions, smallest screen first.

    Device minimum widths and the desktop minimum width are derived from the
    enabled ``max`` breakpoints unless given explicitly.

    Attributes:
        breakpoints: Definitions in page-builder order
        device_min_widths: Optional explicit floor per device name
        desktop_min: Optional explicit desktop floor
        widescreen_name: Name of the distinguished widescreen breakpoint

    Example:
        registry = BreakpointRegistry(
            breakpoints=(
                BreakpointDefinition("mobile", 767, "max"),
                BreakpointDefinition("tablet", 1024, "max"),
            )
        )
        registry.device_min_width("tablet")  # 768
        registry.desktop_min_width()  # 1025
    """

    breakpoints: tuple[BreakpointDefinition, ...]
    device_min_widths: Mapping[str, int] = field(default_factory=dict)
    desktop_min: int | None = None
    widescreen_name: str | None = WIDESCREEN_KEY

    def __post_init__(self) -> None:
        """
        Validate registry invariants.

        Raises:
            ValueError: On duplicate names, a reserved "desktop" breakpoint,
                a widescreen breakpoint that is not min-direction, or
                device / desktop floors that are not non-negative integers
        """
        if self.device_min_widths is not None and not isinstance(self.device_min_widths, Mapping):
            raise ValueError(
                f"device_min_widths must be a mapping of device name to width, "
                f"got {type(self.device_min_widths).__name__}"
            )
        for name, width in (self.device_min_widths or {}).items():
            _check_width(f"Device min width for '{name}'", width)
        if self.desktop_min is not None:
            _check_width("Desktop min width", self.desktop_min)

        # Accept any iterable but store an immutable snapshot
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        object.__setattr__(self, "device_min_widths", dict(self.device_min_widths or {}))

        seen: set[str] = set()
        for breakpoint in self.breakpoints:
            if not isinstance(breakpoint, BreakpointDefinition):
                raise ValueError(f"Expected BreakpointDefinition, got {type(breakpoint).__name__}")
            if breakpoint.name in seen:
                raise ValueError(f"Duplicate breakpoint name: {breakpoint.name}")
            if breakpoint.name == DESKTOP_KEY:
                raise ValueError("'desktop' is implicit and cannot be registered as a breakpoint")
            if breakpoint.name == self.widescreen_name and breakpoint.direction != DIRECTION_MIN:
                raise ValueError(f"Widescreen breakpoint '{breakpoint.name}' must use direction 'min'")
            seen.add(breakpoint.name)

    def list_breakpoints(self) -> list[BreakpointDefinition]:
        """Return all breakpoints (enabled or not) in registry order."""
        return list(self.breakpoints)

    def enabled_breakpoints(self) -> list[BreakpointDefinition]:
        return active_breakpoints(self)

    def get(self, name: str) -> BreakpointDefinition | None:
        for breakpoint in self.breakpoints:
            if breakpoint.name == name:
                return breakpoint
        return None

    def widescreen_key(self) -> str | None:
        """Return the widescreen breakpoint name, or None when it is not registered."""
        if self.widescreen_name and self.get(self.widescreen_name) is not None:
            return self.widescreen_name
        return None

    def desktop_min_width(self) -> int:
        """
        Return the smallest width treated as desktop.

        Defaults to one pixel above the largest enabled max-direction
        breakpoint (0 when there is none).
        """
        if self.desktop_min is not None:
            return self.desktop_min

        max_thresholds = [bp.threshold_px for bp in self.enabled_breakpoints() if bp.is_max]
        return max(max_thresholds) + 1 if max_thresholds else 0

    def device_min_width(self, name: str) -> int:
        """
        Return the lower bound of the device class named by a breakpoint.

        Explicit table entries win. Otherwise a max-direction device starts
        one pixel above the previous enabled max-direction breakpoint (or at
        MOBILE_MIN_WIDTH for the smallest), a min-direction device starts at
        its own threshold and "desktop" starts at desktop_min_width().
        Unknown names return 0.
        """
        if name in self.device_min_widths:
            return self.device_min_widths[name]
        if name == DESKTOP_KEY:
            return self.desktop_min_width()

        breakpoint = self.get(name)
        if breakpoint is None:
            return 0
        if not breakpoint.is_max:
            return breakpoint.threshold_px

        smaller = [
            bp.threshold_px
            for bp in self.enabled_breakpoints()
            if bp.is_max and bp.threshold_px < breakpoint.threshold_px
        ]
        return max(smaller) + 1 if smaller else MOBILE_MIN_WIDTH


STANDARD_BREAKPOINTS: tuple[BreakpointDefinition, ...] = (
    BreakpointDefinition("mobile", 767, DIRECTION_MAX, enabled=True),
    BreakpointDefinition("mobile_extra", 880, DIRECTION_MAX, enabled=False),
    BreakpointDefinition("tablet", 1024, DIRECTION_MAX, enabled=True),
    BreakpointDefinition("tablet_extra", 1200, DIRECTION_MAX, enabled=False),
    BreakpointDefinition("laptop", 1366, DIRECTION_MAX, enabled=False),
    BreakpointDefinition(WIDESCREEN_KEY, 2400, DIRECTION_MIN, enabled=False),
)


def default_registry(enabled: Iterable[str] | None = None) -> BreakpointRegistry:
    """
    Build the page builder's standard breakpoint registry.

    Args:
        enabled: Optional names to enable; all others are disabled.
            None keeps the stock mobile + tablet configuration.

    Returns:
        BreakpointRegistry with the six standard breakpoints

    Example:
        registry = default_registry(enabled=["mobile", "tablet", "laptop", "widescreen"])
    """
    if enabled is None:
        return BreakpointRegistry(breakpoints=STANDARD_BREAKPOINTS)

    enabled_names = set(enabled)
    unknown = enabled_names - {bp.name for bp in STANDARD_BREAKPOINTS}
    if unknown:
        raise ValueError(f"Unknown standard breakpoints: {', '.join(sorted(unknown))}")

    return BreakpointRegistry(
        breakpoints=tuple(
            BreakpointDefinition(bp.name, bp.threshold_px, bp.direction, enabled=bp.name in enabled_names)
            for bp in STANDARD_BREAKPOINTS
        )
    )


def registry_from_config(
    config: Mapping[str, Mapping[str, Any]],
    device_min_widths: Mapping[str, int] | None = None,
    desktop_min_width: int | None = None,
    widescreen_key: str | None = WIDESCREEN_KEY,
) -> BreakpointRegistry:
    """
    Build a registry from the page builder's breakpoint config.

    Args:
        config: ``{name: {"value": 767, "direction": "max", "is_enabled": True}}``
            in page-builder order
        device_min_widths: Optional explicit device floors
        desktop_min_width: Optional explicit desktop floor
        widescreen_key: Name of the widescreen breakpoint

    Returns:
        BreakpointRegistry

    Raises:
        ValueError: If an entry is missing a value or has invalid fields, or
            the device / desktop floors are not non-negative integers
    """
    if not isinstance(config, Mapping):
        raise ValueError(f"Breakpoint config must be a mapping, got {type(config).__name__}")

    breakpoints = []
    for name, entry in config.items():
        if not isinstance(entry, Mapping):
            raise ValueError(f"Breakpoint '{name}' config must be a mapping")
        if "value" not in entry:
            raise ValueError(f"Breakpoint '{name}' is missing 'value'")

        breakpoints.append(
            BreakpointDefinition(
                name=name,
                threshold_px=entry["value"],
                direction=entry.get("direction", DIRECTION_MAX),
                enabled=bool(entry.get("is_enabled", True)),
            )
        )

    return BreakpointRegistry(
        breakpoints=tuple(breakpoints),
        device_min_widths=device_min_widths or {},
        desktop_min=desktop_min_width,
        widescreen_name=widescreen_key,
    )
