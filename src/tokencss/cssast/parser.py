"""tinycss2-backed parser producing :mod:`tokencss.cssast.nodes` trees."""

from __future__ import annotations

import tinycss2

from tokencss.cssast.nodes import Atrule, Block, Declaration, Rule, StyleSheet
from tokencss.errors import ParseError, ShapeError

__all__ = ["parse", "parse_declaration", "parse_values"]


def _raise_error(error) -> None:
    raise ParseError(
        f"{error.kind}: {error.message}",
        line=error.source_line,
        column=error.source_column,
    )


def _check_values(values) -> None:
    for value in values:
        if value.type == "error":
            _raise_error(value)


def _build_declaration(decl) -> Declaration:
    _check_values(decl.value)
    return Declaration(
        property=decl.name,
        value=list(decl.value),
        important=decl.important,
        line=decl.source_line,
        column=decl.source_column,
    )


def _build_rule(rule) -> Rule:
    block = Block()
    contents = tinycss2.parse_blocks_contents(
        rule.content, skip_comments=True, skip_whitespace=True
    )
    for item in contents:
        if item.type == "error":
            _raise_error(item)
        if item.type == "declaration":
            block.append(_build_declaration(item))
        else:
            # Nested rules and at-rules inside a style rule are not supported.
            raise ParseError(
                f"unsupported nested {item.type} inside style rule",
                line=item.source_line,
                column=item.source_column,
            )
    return Rule(
        prelude=list(rule.prelude),
        block=block,
        line=rule.source_line,
        column=rule.source_column,
    )


def _build_atrule(rule) -> Atrule:
    name = rule.at_keyword
    if rule.lower_at_keyword == "media" and rule.content is not None:
        block = Block()
        for child in tinycss2.parse_rule_list(
            rule.content, skip_comments=True, skip_whitespace=True
        ):
            block.append(_build_item(child))
        return Atrule(
            name=name,
            prelude=list(rule.prelude),
            block=block,
            line=rule.source_line,
            column=rule.source_column,
        )
    return Atrule(
        name=name,
        prelude=list(rule.prelude),
        content=None if rule.content is None else list(rule.content),
        line=rule.source_line,
        column=rule.source_column,
    )


def _build_item(item) -> Atrule | Rule:
    if item.type == "error":
        _raise_error(item)
    if item.type == "at-rule":
        return _build_atrule(item)
    return _build_rule(item)


def parse(css: str) -> StyleSheet:
    """Parse CSS source into a :class:`StyleSheet`.

    Raises :class:`ParseError` (with line and column) on the first syntax
    error tinycss2 reports.
    """
    if not isinstance(css, str):
        raise ShapeError(f"CSS source must be a string, got {type(css).__name__}")
    sheet = StyleSheet()
    for item in tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True):
        sheet.append(_build_item(item))
    return sheet


def parse_declaration(text: str) -> Declaration:
    """Parse a single ``property: value`` declaration."""
    decl = tinycss2.parse_one_declaration(text, skip_comments=True)
    if decl.type == "error":
        _raise_error(decl)
    return _build_declaration(decl)


def parse_values(text: str) -> list:
    """Tokenize a prelude or value fragment into tinycss2 component values."""
    values = tinycss2.parse_component_value_list(text, skip_comments=True)
    _check_values(values)
    return values
