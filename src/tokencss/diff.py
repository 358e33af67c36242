"""Structural diff between two style tokens."""

from __future__ import annotations

from tokencss.model.diff import StyleDiff
from tokencss.model.token import StyleToken, as_token, lookup

__all__ = ["diff_style_tokens"]


def _addresses(base: StyleToken, compare: StyleToken, include_compare_only: bool):
    """Yield (breakpoint, pseudo_state) pairs to compare, base order first."""
    seen: set[tuple[str, str]] = set()
    for breakpoint, states in base.contents.items():
        for pseudo_state in states:
            seen.add((breakpoint, pseudo_state))
            yield breakpoint, pseudo_state
    if not include_compare_only:
        return
    for breakpoint, states in compare.contents.items():
        for pseudo_state in states:
            if (breakpoint, pseudo_state) not in seen:
                yield breakpoint, pseudo_state


def diff_style_tokens(
    base: StyleToken | dict,
    compare: StyleToken | dict,
    include_compare_only: bool = False,
) -> StyleDiff:
    """Classify every property as added, removed, or changed.

    By default only addresses present in *base* are visited, so breakpoints
    and pseudo-states that exist only in *compare* are not reported.  Pass
    ``include_compare_only=True`` to report their properties as added.
    Values are compared as exact strings.
    """
    base = as_token(base)
    compare = as_token(compare)
    added: dict = {}
    removed: dict = {}
    changed: dict = {}

    for breakpoint in base.contents:
        added[breakpoint] = {}
        removed[breakpoint] = {}
        changed[breakpoint] = {}

    for breakpoint, pseudo_state in _addresses(base, compare, include_compare_only):
        base_props = lookup(base.contents, breakpoint, pseudo_state)
        compare_props = lookup(compare.contents, breakpoint, pseudo_state)

        removed_here = {}
        changed_here = {}
        for prop, value in base_props.items():
            if prop not in compare_props:
                removed_here[prop] = value
            elif compare_props[prop] != value:
                changed_here[prop] = {"from": value, "to": compare_props[prop]}
        added_here = {
            prop: value for prop, value in compare_props.items() if prop not in base_props
        }

        added.setdefault(breakpoint, {})[pseudo_state] = added_here
        removed.setdefault(breakpoint, {})[pseudo_state] = removed_here
        changed.setdefault(breakpoint, {})[pseudo_state] = changed_here

    return StyleDiff(added=added, removed=removed, changed=changed)
