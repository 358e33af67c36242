"""CSS AST layer built on tinycss2 -- public re-exports."""

from tokencss.cssast.generator import generate, normalize, serialize_values, value_text
from tokencss.cssast.nodes import (
    Atrule,
    Block,
    Declaration,
    Node,
    NodeType,
    Rule,
    StyleSheet,
    is_media,
    is_node,
)
from tokencss.cssast.parser import parse, parse_declaration, parse_values
from tokencss.cssast.walker import clone, closest, require_node, walk

__all__ = [
    # nodes
    "NodeType",
    "Node",
    "StyleSheet",
    "Atrule",
    "Rule",
    "Block",
    "Declaration",
    "is_node",
    "is_media",
    # parse / generate
    "parse",
    "parse_declaration",
    "parse_values",
    "generate",
    "serialize_values",
    "value_text",
    "normalize",
    # traversal
    "walk",
    "clone",
    "closest",
    "require_node",
]
