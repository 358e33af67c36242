from __future__ import annotations

from dataclasses import dataclass

from tokencss.model.token import BREAKPOINTS, PSEUDO_STATES


@dataclass(frozen=True)
class TokenCssConfig:
    selector: str = ".token"
    breakpoints: tuple[str, ...] = BREAKPOINTS
    pseudo_states: tuple[str, ...] = PSEUDO_STATES
    minify: bool = True
    chunk_size: int = 10
    log_level: str = "WARNING"
