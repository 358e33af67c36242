"""Query and update CSS declarations directly on an AST or a style token."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tokencss.codec import extract_pseudo_state
from tokencss.cssast import (
    Atrule,
    Block,
    Declaration,
    NodeType,
    Rule,
    StyleSheet,
    closest,
    clone,
    is_media,
    normalize,
    parse,
    parse_declaration,
    parse_values,
    require_node,
    serialize_values,
    value_text,
    walk,
)
from tokencss.model.token import StyleToken, as_token
from tokencss.projector import target_selector

__all__ = [
    "ExtractedProperty",
    "extract_properties_from_ast",
    "extract_properties_from_css",
    "update_property_in_ast",
    "update_property_in_style_token",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedProperty:
    """A declaration found in an AST, together with where it was found."""

    property: str
    value: str
    important: bool
    selector: str
    media_query: str | None
    pseudo_state: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property,
            "value": self.value,
            "important": self.important,
            "selector": self.selector,
            "mediaQuery": self.media_query,
            "pseudoState": self.pseudo_state,
        }


def extract_properties_from_ast(
    ast: StyleSheet,
    selector: str | None = None,
    media_query: str | None = None,
    pseudo_state: str | None = None,
) -> list[ExtractedProperty]:
    """Collect every declaration matching all of the supplied filters.

    ``selector`` matches by substring of the rule's selector text,
    ``media_query`` by exact (normalized) predicate text and ``pseudo_state``
    by exact name.  A filter left as None matches everything.
    """
    require_node(ast)
    wanted_media = normalize(media_query) if media_query is not None else None
    found: list[ExtractedProperty] = []
    current: str | None = None

    def enter(node) -> None:
        nonlocal current
        if is_media(node):
            current = serialize_values(node.prelude)
            return
        if not isinstance(node, Declaration):
            return
        rule = closest(node.parent, NodeType.RULE)
        if rule is None:
            return
        selector_text = serialize_values(rule.prelude)
        state = extract_pseudo_state(selector_text)
        if selector is not None and selector not in selector_text:
            return
        if wanted_media is not None and current != wanted_media:
            return
        if pseudo_state is not None and state != pseudo_state:
            return
        found.append(
            ExtractedProperty(
                property=node.property,
                value=value_text(node.value),
                important=node.important,
                selector=selector_text,
                media_query=current,
                pseudo_state=state,
            )
        )

    def leave(node) -> None:
        nonlocal current
        if is_media(node):
            current = None

    walk(ast, enter, leave)
    return found


def extract_properties_from_css(
    css: str,
    selector: str | None = None,
    media_query: str | None = None,
    pseudo_state: str | None = None,
) -> list[ExtractedProperty]:
    """Parse *css* and extract matching declarations."""
    return extract_properties_from_ast(
        parse(css), selector=selector, media_query=media_query, pseudo_state=pseudo_state
    )


def update_property_in_ast(
    ast: StyleSheet,
    property: str,
    value: str,
    selector: str = ".token",
    media_query: str | None = None,
    pseudo_state: str = "default",
    important: bool = False,
) -> StyleSheet:
    """Return a copy of *ast* with one declaration set to *value*.

    The first rule whose selector equals ``selector`` (plus ``:pseudo_state``)
    inside a matching media context is updated in place, overwriting an
    existing declaration of the same name or appending a new one.  When no
    rule matches, a new rule is appended, inside a new or existing top-level
    ``@media`` block if *media_query* is given.  The input is never modified.
    """
    require_node(ast, StyleSheet)
    # Parse everything up front so a bad value fails before any mutation.
    replacement = parse_declaration(f"{property}: {value}")
    replacement.important = important or replacement.important
    target = normalize(target_selector(selector, pseudo_state))
    wanted_media = normalize(media_query) if media_query else None

    result = clone(ast)
    done = False
    in_target = wanted_media is None

    def enter(node) -> None:
        nonlocal done, in_target
        if is_media(node):
            in_target = wanted_media is None or serialize_values(node.prelude) == wanted_media
            return
        if done or not in_target or not isinstance(node, Rule):
            return
        if serialize_values(node.prelude) != target:
            return
        for child in node.block.children:
            if isinstance(child, Declaration) and child.property == replacement.property:
                child.value = replacement.value
                child.important = replacement.important
                log.debug("Updated %s in existing rule %s", property, target)
                break
        else:
            node.block.append(replacement)
            log.debug("Appended %s to existing rule %s", property, target)
        done = True

    def leave(node) -> None:
        nonlocal in_target
        if is_media(node):
            in_target = wanted_media is None

    walk(result, enter, leave)
    if done:
        return result

    context: StyleSheet | Block = result
    if wanted_media is not None:
        media = next(
            (
                child
                for child in result.children
                if is_media(child)
                and child.block is not None
                and serialize_values(child.prelude) == wanted_media
            ),
            None,
        )
        if media is None:
            media = result.append(
                Atrule(name="media", prelude=parse_values(media_query), block=Block())
            )
            log.debug("Created @media %s block", wanted_media)
        context = media.block

    rule = Rule(prelude=parse_values(target))
    rule.block.append(replacement)
    context.append(rule)
    log.debug("Created rule %s for %s", target, property)
    return result


def update_property_in_style_token(
    token: StyleToken | dict,
    property: str,
    value: str,
    breakpoint: str = "default",
    pseudo_state: str = "default",
) -> StyleToken:
    """Return a copy of *token* with ``contents[bp][ps][property] = value``."""
    token = as_token(token)
    contents = token.to_dict()["contents"]
    contents.setdefault(breakpoint, {}).setdefault(pseudo_state, {})[property] = value
    return StyleToken(id=token.id, name=token.name, state=token.state, contents=contents)
