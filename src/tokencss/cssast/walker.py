"""Tree traversal, cloning, and parent-chain navigation for AST nodes."""

from __future__ import annotations

import copy
from typing import Callable

from tokencss.cssast.nodes import (
    Atrule,
    Block,
    Declaration,
    Node,
    NodeType,
    Rule,
    StyleSheet,
    is_node,
)
from tokencss.errors import ShapeError

__all__ = ["walk", "clone", "closest", "require_node"]

Visitor = Callable[[Node], None]


def require_node(obj: object, *types: type) -> Node:
    """Return *obj* if it is an AST node (of one of *types*, when given)."""
    if not is_node(obj) or (types and not isinstance(obj, types)):
        expected = " or ".join(t.__name__ for t in types) if types else "an AST node"
        raise ShapeError(f"expected {expected}, got {type(obj).__name__}")
    return obj  # type: ignore[return-value]


def _check_fields(node: Node) -> None:
    """Raise ShapeError when *node* lacks a field the traversal relies on."""
    name = type(node).__name__
    if isinstance(node, (StyleSheet, Block)):
        if not isinstance(node.children, list):
            raise ShapeError(f"{name} children must be a list")
        for child in node.children:
            # Declarations are read through their rule before they are visited.
            if isinstance(require_node(child), Declaration):
                _check_fields(child)
    elif isinstance(node, Atrule):
        if not isinstance(node.name, str):
            raise ShapeError("at-rule name must be a string")
        if not isinstance(node.prelude, list):
            raise ShapeError(f"@{node.name} prelude must be a list")
        if node.block is not None and not isinstance(node.block, Block):
            raise ShapeError(f"@{node.name} block must be a Block")
        if node.content is not None and not isinstance(node.content, list):
            raise ShapeError(f"@{node.name} content must be a list")
    elif isinstance(node, Rule):
        if not isinstance(node.prelude, list):
            raise ShapeError("rule prelude must be a list")
        if not isinstance(node.block, Block):
            raise ShapeError("rule has no block")
        _check_fields(node.block)
    elif isinstance(node, Declaration):
        if not isinstance(node.property, str):
            raise ShapeError("declaration property must be a string")
        if not isinstance(node.value, list):
            raise ShapeError(f"value of {node.property!r} must be a list")


def _children(node: Node) -> list[Node]:
    if isinstance(node, (StyleSheet, Block)):
        return list(node.children)
    if isinstance(node, Atrule):
        return [node.block] if node.block is not None else []
    if isinstance(node, Rule):
        return [node.block]
    return []


def walk(
    node: Node,
    enter: Visitor | None = None,
    leave: Visitor | None = None,
) -> None:
    """Visit *node* and its descendants depth-first.

    ``enter`` is called before a node's children are visited and ``leave``
    after.  Child lists are snapshotted, so callbacks may append nodes.
    """
    require_node(node)
    _check_fields(node)
    if enter is not None:
        enter(node)
    for child in _children(node):
        walk(child, enter, leave)
    if leave is not None:
        leave(node)


def clone(node: Node) -> Node:
    """Return a deep copy of *node*; the copy is detached from any parent."""
    require_node(node)
    # Mapping the parent to None in the memo stops deepcopy from climbing
    # out of the subtree through the back-reference.
    memo = {id(node.parent): None} if node.parent is not None else {}
    return copy.deepcopy(node, memo)


def closest(node: Node | None, node_type: NodeType) -> Node | None:
    """Return *node* or its nearest ancestor of *node_type*, else None."""
    while node is not None and node.type is not node_type:
        node = node.parent
    return node
