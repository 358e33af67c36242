"""Merge layered style tokens into a single computed token."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from tokencss.model.token import (
    BREAKPOINTS,
    PSEUDO_STATES,
    PropertyMap,
    StyleToken,
    as_token,
    empty_contents,
    lookup,
)
from tokencss.projector import style_token_to_css

__all__ = [
    "compute_inherited_styles",
    "merge_tokens_union",
    "computed_token_to_css",
    "extract_properties_from_computed_token",
]

log = logging.getLogger(__name__)


def compute_inherited_styles(
    tokens: Iterable[StyleToken | dict],
    breakpoint_order: Sequence[str] = BREAKPOINTS,
) -> StyleToken:
    """Merge *tokens* so that later tokens override earlier ones.

    The result always has the canonical shape: every breakpoint in
    *breakpoint_order* x the four standard pseudo-states.  Addresses outside
    that grid in the inputs are ignored.
    """
    # Decode everything first so a malformed token fails before any merging.
    layers = [as_token(t) for t in tokens]
    contents = empty_contents(breakpoint_order, PSEUDO_STATES)

    for layer in layers:
        for breakpoint, states in layer.contents.items():
            if breakpoint not in contents:
                continue
            for pseudo_state, properties in states.items():
                if pseudo_state in contents[breakpoint]:
                    contents[breakpoint][pseudo_state].update(properties)

    log.debug("Merged %d token(s) over %d breakpoint(s)", len(layers), len(contents))
    return StyleToken(id="computed", name="Computed Styles", state=0, contents=contents)


def merge_tokens_union(tokens: Iterable[StyleToken | dict]) -> StyleToken:
    """Merge *tokens* over the union of every breakpoint and pseudo-state seen.

    Unlike :func:`compute_inherited_styles` nonstandard keys are kept; the
    result holds the full cross product of the collected keys.
    """
    layers = [as_token(t) for t in tokens]

    breakpoints: dict[str, None] = {}
    pseudo_states: dict[str, None] = {}
    for layer in layers:
        for breakpoint, states in layer.contents.items():
            breakpoints.setdefault(breakpoint)
            for pseudo_state in states:
                pseudo_states.setdefault(pseudo_state)

    contents = empty_contents(breakpoints, pseudo_states)
    for layer in layers:
        for breakpoint, states in layer.contents.items():
            for pseudo_state, properties in states.items():
                contents[breakpoint][pseudo_state].update(properties)

    log.debug(
        "Union-merged %d token(s) into %d x %d grid",
        len(layers),
        len(breakpoints),
        len(pseudo_states),
    )
    return StyleToken(id="merged", name="Merged Styles", state=0, contents=contents)


def computed_token_to_css(
    token: StyleToken | dict, selector: str = ".token", minify: bool = True
) -> str:
    """Render a computed token to CSS text."""
    return style_token_to_css(token, selector, minify=minify)


def extract_properties_from_computed_token(
    token: StyleToken | dict,
    breakpoint: str = "default",
    pseudo_state: str = "default",
) -> PropertyMap:
    """Return a copy of the properties at one address of *token*."""
    return dict(lookup(as_token(token).contents, breakpoint, pseudo_state))
