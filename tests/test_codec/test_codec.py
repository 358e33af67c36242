"""Tests for the breakpoint / pseudo-state codec."""

import pytest

from tokencss.codec import (
    BREAKPOINT_MEDIA_QUERIES,
    breakpoint_to_media_query,
    extract_pseudo_state,
    media_query_to_breakpoint,
)


# ---------------------------------------------------------------------------
# breakpoint -> media query
# ---------------------------------------------------------------------------


class TestBreakpointToMediaQuery:
    @pytest.mark.parametrize(
        "breakpoint, expected",
        [
            ("xs", "(max-width: 576px)"),
            ("sm", "(max-width: 768px)"),
            ("md", "(max-width: 992px)"),
            ("lg", "(max-width: 1200px)"),
            ("xl", "(max-width: 1400px)"),
        ],
    )
    def test_table(self, breakpoint, expected):
        assert breakpoint_to_media_query(breakpoint) == expected

    def test_default_is_none(self):
        assert breakpoint_to_media_query("default") is None

    def test_unknown_is_none(self):
        assert breakpoint_to_media_query("xxl") is None

    def test_case_sensitive(self):
        assert breakpoint_to_media_query("MD") is None


# ---------------------------------------------------------------------------
# media query -> breakpoint
# ---------------------------------------------------------------------------


class TestMediaQueryToBreakpoint:
    @pytest.mark.parametrize(
        "width, expected",
        [
            (320, "xs"),
            (576, "xs"),
            (577, "sm"),
            (768, "sm"),
            (992, "md"),
            (1000, "lg"),
            (1200, "lg"),
            (1400, "xl"),
        ],
    )
    def test_smallest_covering_breakpoint(self, width, expected):
        assert media_query_to_breakpoint(f"(max-width: {width}px)") == expected

    def test_wider_than_largest_is_default(self):
        assert media_query_to_breakpoint("(max-width: 1401px)") == "default"

    def test_compact_form(self):
        assert media_query_to_breakpoint("(max-width:992px)") == "md"

    def test_case_insensitive(self):
        assert media_query_to_breakpoint("(MAX-WIDTH: 700PX)") == "sm"

    def test_min_width_is_default(self):
        assert media_query_to_breakpoint("(min-width: 600px)") == "default"

    def test_non_px_units_are_default(self):
        assert media_query_to_breakpoint("(max-width: 40em)") == "default"

    def test_empty_and_none(self):
        assert media_query_to_breakpoint("") == "default"
        assert media_query_to_breakpoint(None) == "default"

    def test_forward_table_round_trips(self):
        for breakpoint, query in BREAKPOINT_MEDIA_QUERIES.items():
            assert media_query_to_breakpoint(query) == breakpoint


# ---------------------------------------------------------------------------
# pseudo-state extraction
# ---------------------------------------------------------------------------


class TestExtractPseudoState:
    def test_plain_selector(self):
        assert extract_pseudo_state(".btn") == "default"

    @pytest.mark.parametrize("state", ["hover", "focus", "active"])
    def test_single_state(self, state):
        assert extract_pseudo_state(f".btn:{state}") == state

    def test_fixed_order_wins_over_position(self):
        assert extract_pseudo_state(".btn:active:focus:hover") == "hover"
        assert extract_pseudo_state(".btn:active:focus") == "focus"

    def test_other_pseudo_classes_are_default(self):
        assert extract_pseudo_state("a:visited") == "default"

    def test_compound_selector(self):
        assert extract_pseudo_state(".menu li:hover > a") == "hover"
