"""
Settings domain models

Provides:
    - SettingsSource: Protocol for reading raw option values
    - MappingSettingsSource: Adapts a plain dict of widget settings
    - SettingsMap: Explicit ordered list of (breakpoint, value) entries
    - is_unset(): Shared definition of an "empty" raw value
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsSource(Protocol):
    """Read access to the raw configured value of an option."""

    def get_value(self, full_option_name: str) -> Any:
        """Return the value for ``option`` or ``option_<breakpoint>``; None when absent."""
        ...


class MappingSettingsSource:
    """
    Settings source backed by a mapping of option names to values.

    Example:
        source = MappingSettingsSource({"sticky": "yes", "sticky_mobile": ""})
        source.get_value("sticky_tablet")  # None
    """

    def __init__(self, settings: Mapping[str, Any] | None = None):
        self.settings = dict(settings or {})

    def get_value(self, full_option_name: str) -> Any:
        return self.settings.get(full_option_name)

    def __repr__(self) -> str:
        return f"MappingSettingsSource({len(self.settings)} settings)"


def breakpoint_option_name(option_name: str, breakpoint_name: str) -> str:
    """Return the per-breakpoint option key, e.g. ``sticky_tablet``."""
    return f"{option_name}_{breakpoint_name}"


def is_unset(value: Any) -> bool:
    """
    Check whether a raw value counts as "not configured".

    None and empty strings or containers are unset. Every other value,
    including False and 0, is an explicit (non-enabling) setting.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class SettingsMap:
    """
    Ordered per-breakpoint values for one option.

    Order is part of the contract: maps returned by the resolver list the
    largest breakpoints first and "desktop" last.

    Attributes:
        entries: (breakpoint_name, value) pairs in order

    Example:
        settings = SettingsMap.from_pairs([("tablet", ""), ("desktop", "yes")])
        settings.get("desktop")  # "yes"
        settings.names()  # ["tablet", "desktop"]
    """

    entries: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        """
        Validate entry names are unique.

        Raises:
            ValueError: If a breakpoint name appears twice
        """
        object.__setattr__(self, "entries", tuple((name, value) for name, value in self.entries))
        names = [name for name, _ in self.entries]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate breakpoint names in settings map: {names}")

    @classmethod
    def from_pairs(cls, pairs) -> "SettingsMap":
        return cls(entries=tuple(pairs))

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return any(entry_name == name for entry_name, _ in self.entries)

    def get(self, name: str, default: Any = None) -> Any:
        for entry_name, value in self.entries:
            if entry_name == name:
                return value
        return default

    def names(self) -> list[str]:
        return [name for name, _ in self.entries]

    def values(self) -> list[Any]:
        return [value for _, value in self.entries]

    def reversed(self) -> "SettingsMap":
        return SettingsMap(entries=tuple(reversed(self.entries)))

    def with_values(self, updates: Mapping[str, Any]) -> "SettingsMap":
        """Return a copy with some values replaced; key order is preserved."""
        return SettingsMap(entries=tuple((name, updates.get(name, value)) for name, value in self.entries))

    def to_dict(self) -> dict[str, Any]:
        return dict(self.entries)
