"""Diff model: three-way classification of properties between two tokens."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StyleDiff:
    """Differences between a base token and a compare token.

    Attributes:
        added: ``[bp][ps][prop] -> value`` present only in the compare token.
        removed: ``[bp][ps][prop] -> value`` present only in the base token.
        changed: ``[bp][ps][prop] -> {"from": old, "to": new}``.
    """

    added: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)
    removed: dict[str, dict[str, dict[str, str]]] = field(default_factory=dict)
    changed: dict[str, dict[str, dict[str, dict[str, str]]]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(
            props
            for section in (self.added, self.removed, self.changed)
            for states in section.values()
            for props in states.values()
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "added": copy.deepcopy(self.added),
            "removed": copy.deepcopy(self.removed),
            "changed": copy.deepcopy(self.changed),
        }
