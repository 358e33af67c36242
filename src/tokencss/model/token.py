"""Style token model: StyleToken and the breakpoint/pseudo-state grid."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from tokencss.errors import ShapeError

BREAKPOINTS: tuple[str, ...] = ("default", "xl", "lg", "md", "sm", "xs")
PSEUDO_STATES: tuple[str, ...] = ("default", "hover", "focus", "active")

PropertyMap = dict[str, str]
PseudoStateMap = dict[str, PropertyMap]
BreakpointMap = dict[str, PseudoStateMap]


def _check_mapping(value: object, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ShapeError(f"expected a mapping, got {type(value).__name__}", path)
    return value


def validate_contents(contents: object, path: str = "contents") -> BreakpointMap:
    """Check the three-level shape of *contents* and return a plain-dict copy."""
    result: BreakpointMap = {}
    for breakpoint, states in _check_mapping(contents, path).items():
        bp_path = f"{path}.{breakpoint}"
        if not isinstance(breakpoint, str):
            raise ShapeError("breakpoint keys must be strings", bp_path)
        result[breakpoint] = {}
        for state, props in _check_mapping(states, bp_path).items():
            ps_path = f"{bp_path}.{state}"
            if not isinstance(state, str):
                raise ShapeError("pseudo-state keys must be strings", ps_path)
            copied: PropertyMap = {}
            for prop, value in _check_mapping(props, ps_path).items():
                if not isinstance(prop, str) or not isinstance(value, str):
                    raise ShapeError(
                        "properties must map strings to strings", f"{ps_path}.{prop}"
                    )
                copied[prop] = value
            result[breakpoint][state] = copied
    return result


def empty_contents(
    breakpoints: Iterable[str] = BREAKPOINTS,
    pseudo_states: Iterable[str] = PSEUDO_STATES,
) -> BreakpointMap:
    """Build a grid with an empty PropertyMap at every address."""
    states = list(pseudo_states)
    return {bp: {ps: {} for ps in states} for bp in breakpoints}


def lookup(contents: Mapping, breakpoint: str, pseudo_state: str) -> Mapping[str, str]:
    """Return the PropertyMap at an address, or an empty mapping when absent.

    The returned mapping must be treated as read-only.
    """
    return contents.get(breakpoint, {}).get(pseudo_state, {})


@dataclass(frozen=True)
class StyleToken:
    """A named bundle of CSS properties addressed by breakpoint and pseudo-state.

    ``contents`` is validated and copied on construction, so the token never
    aliases the caller's dictionaries.
    """

    id: str
    name: str
    state: int = 0
    contents: BreakpointMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not isinstance(self.name, str):
            raise ShapeError("token id and name must be strings")
        if not isinstance(self.state, int) or isinstance(self.state, bool):
            raise ShapeError("token state must be an integer")
        object.__setattr__(self, "contents", validate_contents(self.contents))

    @classmethod
    def from_dict(cls, data: object) -> StyleToken:
        """Decode a token from its ``{id, name, state, contents}`` mapping."""
        if isinstance(data, StyleToken):
            return data
        if not isinstance(data, Mapping):
            raise ShapeError(f"token must be a mapping, got {type(data).__name__}")
        if "contents" not in data:
            raise ShapeError("token is missing 'contents'")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            state=data.get("state", 0),
            contents=data["contents"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready copy of the token."""
        return {
            "id": self.id,
            "name": self.name,
            "state": self.state,
            "contents": validate_contents(self.contents),
        }

    def lookup(self, breakpoint: str, pseudo_state: str) -> PropertyMap:
        """Return a copy of the properties at (*breakpoint*, *pseudo_state*)."""
        return dict(lookup(self.contents, breakpoint, pseudo_state))

    @property
    def is_empty(self) -> bool:
        """True when no address holds any property."""
        return not any(props for states in self.contents.values() for props in states.values())


def as_token(value: object) -> StyleToken:
    """Coerce a StyleToken or token mapping into a StyleToken."""
    return StyleToken.from_dict(value)
