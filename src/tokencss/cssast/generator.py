"""Serialize AST nodes back to CSS text.

Compact output follows the csstree convention used throughout this package::

    .c{font-size:16px;color:red}
    @media (max-width:992px){.c{font-size:14px}}
"""

from __future__ import annotations

import tinycss2
from tinycss2.serializer import serialize_identifier

from tokencss.cssast.nodes import Atrule, Block, Declaration, Rule, StyleSheet
from tokencss.cssast.parser import parse_values
from tokencss.cssast.walker import walk
from tokencss.errors import ShapeError

__all__ = ["generate", "serialize_values", "value_text", "normalize"]

# Literals after which whitespace is insignificant.
_TIGHT_AFTER = {":", ",", ">", "~", ";"}
# Literals before which whitespace is insignificant.
_TIGHT_BEFORE = {",", ">", "~", ";"}

_BLOCK_BRACKETS = {
    "() block": ("(", ")"),
    "[] block": ("[", "]"),
    "{} block": ("{", "}"),
}


def _literal(node) -> str | None:
    return node.value if node.type == "literal" else None


def _serialize_value(node) -> str:
    if node.type in _BLOCK_BRACKETS:
        opening, closing = _BLOCK_BRACKETS[node.type]
        return opening + serialize_values(node.content) + closing
    if node.type == "function":
        return serialize_identifier(node.name) + "(" + serialize_values(node.arguments) + ")"
    return node.serialize()


def serialize_values(values) -> str:
    """Serialize tinycss2 component values with collapsed whitespace."""
    parts: list[str] = []
    previous = None
    pending_space = False
    for node in values:
        if node.type in ("whitespace", "comment"):
            pending_space = previous is not None
            continue
        if (
            pending_space
            and _literal(previous) not in _TIGHT_AFTER
            and _literal(node) not in _TIGHT_BEFORE
        ):
            parts.append(" ")
        pending_space = False
        parts.append(_serialize_value(node))
        previous = node
    return "".join(parts)


def value_text(values) -> str:
    """Return declaration value tokens as written, trimmed at both ends.

    Unlike :func:`serialize_values` this keeps inner whitespace and string
    quoting, so a value decoded from the AST equals the text it was built from.
    """
    return tinycss2.serialize(values).strip()


def normalize(text: str) -> str:
    """Return *text* in the same form :func:`generate` emits for preludes."""
    return serialize_values(parse_values(text))


def _declaration(node: Declaration, pretty: bool) -> str:
    separator = ": " if pretty else ":"
    text = f"{node.property}{separator}{serialize_values(node.value)}"
    if node.important:
        text += " !important" if pretty else "!important"
    return text


def _compact(node) -> str:
    if isinstance(node, StyleSheet):
        return "".join(_compact(child) for child in node.children)
    if isinstance(node, Block):
        if any(isinstance(child, Declaration) for child in node.children):
            return ";".join(_compact(child) for child in node.children)
        return "".join(_compact(child) for child in node.children)
    if isinstance(node, Rule):
        return f"{serialize_values(node.prelude)}{{{_compact(node.block)}}}"
    if isinstance(node, Atrule):
        head = "@" + serialize_identifier(node.name)
        prelude = serialize_values(node.prelude)
        if prelude:
            head += " " + prelude
        if node.block is not None:
            return f"{head}{{{_compact(node.block)}}}"
        if node.content is not None:
            return f"{head}{{{serialize_values(node.content)}}}"
        return head + ";"
    if isinstance(node, Declaration):
        return _declaration(node, pretty=False)
    raise ShapeError(f"cannot generate CSS for {type(node).__name__}")


def _pretty(node, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(node, (StyleSheet, Block)):
        lines: list[str] = []
        for child in node.children:
            lines.extend(_pretty(child, depth))
        return lines
    if isinstance(node, Rule):
        return (
            [f"{indent}{serialize_values(node.prelude)} {{"]
            + _pretty(node.block, depth + 1)
            + [f"{indent}}}"]
        )
    if isinstance(node, Atrule):
        head = "@" + serialize_identifier(node.name)
        prelude = serialize_values(node.prelude)
        if prelude:
            head += " " + prelude
        if node.block is not None:
            return [f"{indent}{head} {{"] + _pretty(node.block, depth + 1) + [f"{indent}}}"]
        if node.content is not None:
            return [f"{indent}{head} {{ {serialize_values(node.content)} }}"]
        return [f"{indent}{head};"]
    if isinstance(node, Declaration):
        return [f"{indent}{_declaration(node, pretty=True)};"]
    raise ShapeError(f"cannot generate CSS for {type(node).__name__}")


def generate(node, pretty: bool = False) -> str:
    """Generate CSS text for any AST node.

    Compact mode emits no optional whitespace.  Pretty mode emits one
    declaration per line with two-space indentation and a trailing newline.
    """
    # Validates every node up front.
    walk(node)
    if pretty:
        lines = _pretty(node)
        return "\n".join(lines) + "\n" if lines else ""
    return _compact(node)
