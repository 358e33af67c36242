"""Breakpoint <-> media query mapping and pseudo-state extraction."""

from __future__ import annotations

import re

__all__ = [
    "BREAKPOINT_MEDIA_QUERIES",
    "BREAKPOINT_THRESHOLDS",
    "breakpoint_to_media_query",
    "media_query_to_breakpoint",
    "extract_pseudo_state",
]

BREAKPOINT_MEDIA_QUERIES: dict[str, str | None] = {
    "xs": "(max-width: 576px)",
    "sm": "(max-width: 768px)",
    "md": "(max-width: 992px)",
    "lg": "(max-width: 1200px)",
    "xl": "(max-width: 1400px)",
    "default": None,
}

# Ascending max-width thresholds used by the inverse mapping.
BREAKPOINT_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (576, "xs"),
    (768, "sm"),
    (992, "md"),
    (1200, "lg"),
    (1400, "xl"),
)

# Checked in this order; the first one found wins.
_PSEUDO_STATES = ("hover", "focus", "active")

_MAX_WIDTH_RE = re.compile(r"max-width:\s*(\d+)px", re.IGNORECASE)


def breakpoint_to_media_query(breakpoint: str) -> str | None:
    """Return the media predicate for *breakpoint*, or None for default/unknown."""
    return BREAKPOINT_MEDIA_QUERIES.get(breakpoint)


def media_query_to_breakpoint(media_query: str | None) -> str:
    """Map a media predicate back to the smallest breakpoint that covers it.

    Predicates without a ``max-width: Npx`` term, or wider than the largest
    threshold, resolve to ``"default"``.
    """
    if not media_query:
        return "default"
    match = _MAX_WIDTH_RE.search(media_query)
    if match:
        width = int(match.group(1))
        for threshold, breakpoint in BREAKPOINT_THRESHOLDS:
            if width <= threshold:
                return breakpoint
    return "default"


def extract_pseudo_state(selector: str) -> str:
    """Return the pseudo-state named in *selector*, or ``"default"``."""
    for state in _PSEUDO_STATES:
        if f":{state}" in selector:
            return state
    return "default"
