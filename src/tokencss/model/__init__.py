"""Token model layer -- public type re-exports."""

from tokencss.model.diff import StyleDiff
from tokencss.model.token import (
    BREAKPOINTS,
    PSEUDO_STATES,
    BreakpointMap,
    PropertyMap,
    PseudoStateMap,
    StyleToken,
    as_token,
    empty_contents,
    lookup,
    validate_contents,
)

__all__ = [
    # token
    "BREAKPOINTS",
    "PSEUDO_STATES",
    "PropertyMap",
    "PseudoStateMap",
    "BreakpointMap",
    "StyleToken",
    "as_token",
    "empty_contents",
    "lookup",
    "validate_contents",
    # diff
    "StyleDiff",
]
