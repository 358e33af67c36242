"""Project style tokens to CSS ASTs and back."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tokencss.codec import (
    breakpoint_to_media_query,
    extract_pseudo_state,
    media_query_to_breakpoint,
)
from tokencss.cssast import (
    Atrule,
    Block,
    Declaration,
    Rule,
    StyleSheet,
    generate,
    is_media,
    parse,
    parse_values,
    require_node,
    serialize_values,
    value_text,
    walk,
)
from tokencss.model.token import BREAKPOINTS, PSEUDO_STATES, StyleToken, as_token, empty_contents

__all__ = [
    "style_token_to_ast",
    "ast_to_style_token",
    "css_to_ast",
    "ast_to_css",
    "style_token_to_css",
    "css_to_style_token",
    "target_selector",
]

log = logging.getLogger(__name__)


def target_selector(selector: str, pseudo_state: str) -> str:
    """Return ``selector`` for the default state, else ``selector:state``."""
    return selector if pseudo_state == "default" else f"{selector}:{pseudo_state}"


def style_token_to_ast(token: StyleToken | dict, selector: str = ".token") -> StyleSheet:
    """Build a CSS AST with one rule per non-empty (breakpoint, pseudo-state).

    Non-default breakpoints are wrapped in an ``@media`` block; breakpoints
    are emitted in the token's insertion order.
    """
    token = as_token(token)
    sheet = StyleSheet()
    rules = 0
    for breakpoint, states in token.contents.items():
        filled = {ps: props for ps, props in states.items() if props}
        if not filled:
            # No rules to emit, so no empty @media block either.
            continue
        media_query = breakpoint_to_media_query(breakpoint)
        context: StyleSheet | Block = sheet
        if media_query is not None:
            media = sheet.append(
                Atrule(name="media", prelude=parse_values(media_query), block=Block())
            )
            context = media.block

        for pseudo_state, properties in filled.items():
            rule = context.append(
                Rule(prelude=parse_values(target_selector(selector, pseudo_state)))
            )
            for prop, value in properties.items():
                rule.block.append(Declaration(property=prop, value=parse_values(value)))
            rules += 1

    log.debug("Projected token %r to %d rule(s) for %s", token.id, rules, selector)
    return sheet


def ast_to_style_token(
    ast: StyleSheet,
    id: str,
    name: str,
    breakpoints: Sequence[str] = BREAKPOINTS,
    pseudo_states: Sequence[str] = PSEUDO_STATES,
) -> StyleToken:
    """Decode a CSS AST into a StyleToken.

    The result is pre-populated for every supplied breakpoint x pseudo-state;
    declarations that resolve to an address outside that grid are dropped.
    """
    require_node(ast, StyleSheet)
    contents = empty_contents(breakpoints, pseudo_states)
    current = "default"
    dropped = 0

    def enter(node) -> None:
        nonlocal current, dropped
        if is_media(node):
            current = media_query_to_breakpoint(serialize_values(node.prelude))
        elif isinstance(node, Rule):
            state = extract_pseudo_state(serialize_values(node.prelude))
            target = contents.get(current, {}).get(state)
            for child in node.block.children:
                if not isinstance(child, Declaration):
                    continue
                if target is None:
                    dropped += 1
                    continue
                target[child.property] = value_text(child.value)

    def leave(node) -> None:
        nonlocal current
        if is_media(node):
            current = "default"

    walk(ast, enter, leave)
    if dropped:
        log.debug("Dropped %d declaration(s) outside the breakpoint grid", dropped)
    return StyleToken(id=id, name=name, state=0, contents=contents)


def css_to_ast(css: str) -> StyleSheet:
    """Parse CSS text into an AST."""
    return parse(css)


def ast_to_css(ast: StyleSheet, minify: bool = True) -> str:
    """Generate CSS text from an AST; ``minify=False`` pretty-prints."""
    require_node(ast)
    return generate(ast, pretty=not minify)


def style_token_to_css(
    token: StyleToken | dict, selector: str = ".token", minify: bool = True
) -> str:
    """Render a token straight to CSS text."""
    return ast_to_css(style_token_to_ast(token, selector), minify=minify)


def css_to_style_token(
    css: str,
    id: str,
    name: str,
    breakpoints: Sequence[str] = BREAKPOINTS,
    pseudo_states: Sequence[str] = PSEUDO_STATES,
) -> StyleToken:
    """Parse CSS text and decode it into a StyleToken."""
    return ast_to_style_token(css_to_ast(css), id, name, breakpoints, pseudo_states)
