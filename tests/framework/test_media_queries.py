"""
Tests for responsive_controls.framework.media_queries module
"""

import pytest

from responsive_controls.domain.breakpoints import BreakpointDefinition, BreakpointRegistry
from responsive_controls.domain.settings import SettingsMap
from responsive_controls.framework.media_queries import append_suffix, build_fragments, render
from responsive_controls.framework.resolver import apply_inheritance


def _settings(**values):
    return SettingsMap.from_pairs(values.items())


class TestBuildFragments:
    """Test fragment synthesis from resolved maps"""

    def test_desktop_enabled_everywhere_but_widescreen(self, scenario_registry):
        """Test desktop "yes" inherited down with widescreen left unset"""
        raw = _settings(widescreen="", tablet="", mobile="", desktop="yes")
        fragments = build_fragments(apply_inheritance(raw, scenario_registry), scenario_registry)

        assert fragments == [
            "(min-width: 320px) and (max-width: 767px)",
            "(min-width: 768px) and (max-width: 1024px)",
            "not (min-width: 1920px)",
            "(min-width: 1025px) and (max-width: 1920px)",
        ]

    def test_mobile_only(self, scenario_registry):
        """Test mobile enabled with desktop and widescreen explicitly off"""
        raw = _settings(widescreen="no", tablet="", mobile="yes", desktop="no")
        fragments = build_fragments(apply_inheritance(raw, scenario_registry), scenario_registry)

        assert fragments == [
            "(min-width: 320px) and (max-width: 767px)",
            "not (min-width: 1920px)",
            "not ((min-width: 1025px) and (max-width: 1920px))",
        ]

    def test_no_desktop_fragment_without_widescreen(self, no_widescreen_registry):
        """Test disabled desktop emits nothing when there is no widescreen"""
        fragments = build_fragments(_settings(tablet="no", mobile="no", desktop="no"), no_widescreen_registry)
        assert fragments == []

    def test_desktop_unbounded_without_widescreen(self, no_widescreen_registry):
        """Test enabled desktop is open-ended when there is no widescreen"""
        fragments = build_fragments(_settings(tablet="", mobile="", desktop="yes"), no_widescreen_registry)
        assert fragments == ["(min-width: 1025px)"]

    def test_widescreen_enabled(self, scenario_registry):
        """Test enabled min-direction breakpoint emits an open-ended min-width"""
        fragments = build_fragments(_settings(widescreen="yes"), scenario_registry)
        assert fragments == ["(min-width: 1920px)"]

    def test_disabled_max_breakpoint_emits_nothing(self, scenario_registry):
        """Test disabled max-direction breakpoints have no negated fragment"""
        fragments = build_fragments(_settings(tablet="no", mobile=""), scenario_registry)
        assert fragments == []

    def test_missing_breakpoints_ignored(self, scenario_registry):
        """Test breakpoints absent from the map produce nothing"""
        assert build_fragments(SettingsMap(), scenario_registry) == []

    def test_disabled_widescreen_not_bounding_desktop(self):
        """Test a registry-disabled widescreen does not bound desktop"""
        registry = BreakpointRegistry(
            breakpoints=(
                BreakpointDefinition("mobile", 767, "max"),
                BreakpointDefinition("widescreen", 1920, "min", enabled=False),
            )
        )
        fragments = build_fragments(_settings(widescreen="yes", desktop="yes"), registry)
        assert fragments == ["(min-width: 768px)"]

    def test_custom_enabled_value(self, scenario_registry):
        """Test an alternative enabled value"""
        fragments = build_fragments(_settings(mobile="on", tablet="yes"), scenario_registry, enabled_value="on")
        assert fragments == ["(min-width: 320px) and (max-width: 767px)"]

    def test_derived_device_floor(self, no_widescreen_registry):
        """Test max breakpoint floor derived from previous breakpoint"""
        fragments = build_fragments(_settings(tablet="yes"), no_widescreen_registry)
        assert fragments == ["(min-width: 768px) and (max-width: 1024px)"]

    @pytest.mark.parametrize(
        "values",
        [
            {"widescreen": "yes", "tablet": "yes", "mobile": "yes", "desktop": "yes"},
            {"widescreen": "no", "tablet": "no", "mobile": "no", "desktop": "no"},
            {"widescreen": "", "tablet": "yes", "mobile": "", "desktop": ""},
        ],
    )
    def test_fragment_count_bound(self, scenario_registry, values):
        """Test at most one fragment per enabled breakpoint plus desktop"""
        fragments = build_fragments(_settings(**values), scenario_registry)
        assert len(fragments) <= len(scenario_registry.enabled_breakpoints()) + 1


class TestAppendSuffix:
    """Test suffix application"""

    FRAGMENTS = ["(min-width: 1025px)", "not (min-width: 1920px)"]

    def test_empty_suffix_is_identity(self):
        """Test empty suffix leaves fragments untouched"""
        assert append_suffix(self.FRAGMENTS, "") == self.FRAGMENTS

    def test_suffix_appended_with_space(self):
        """Test suffix is space-joined to every fragment"""
        result = append_suffix(self.FRAGMENTS, "and (hover: hover)")

        assert result == [
            "(min-width: 1025px) and (hover: hover)",
            "not (min-width: 1920px) and (hover: hover)",
        ]
        assert len(result) == len(self.FRAGMENTS)
        assert all(out.startswith(inp) for inp, out in zip(self.FRAGMENTS, result))

    def test_input_not_mutated(self):
        """Test the input list is left unchanged"""
        fragments = list(self.FRAGMENTS)
        append_suffix(fragments, "and print")
        assert fragments == self.FRAGMENTS


class TestRender:
    """Test rendering fragments into one query"""

    def test_render_joins_with_comma(self):
        """Test fragments are comma-joined"""
        assert render(["(min-width: 768px)", "print"]) == "(min-width: 768px), print"

    def test_render_empty(self):
        """Test empty fragment list renders as empty string"""
        assert render([]) == ""
