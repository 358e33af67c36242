"""CSS AST node model: StyleSheet, Atrule, Rule, Block, and Declaration.

Preludes and declaration values are kept as lists of tinycss2 component
values so they can be re-serialized without loss.  Every node carries a
``parent`` back-reference that containers maintain through :meth:`append`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class NodeType(Enum):
    """Discriminant for AST nodes."""

    STYLESHEET = "StyleSheet"
    ATRULE = "Atrule"
    RULE = "Rule"
    BLOCK = "Block"
    DECLARATION = "Declaration"


class _Container:
    """Mixin for nodes holding an ordered child list."""

    children: list

    def append(self, node: Node) -> Node:
        """Append *node* as the last child and return it."""
        node.parent = self  # type: ignore[assignment]
        self.children.append(node)
        return node

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self


@dataclass(eq=False)
class StyleSheet(_Container):
    """Root of a parsed stylesheet."""

    type: ClassVar[NodeType] = NodeType.STYLESHEET

    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class Block(_Container):
    """The ``{...}`` body of a rule or at-rule."""

    type: ClassVar[NodeType] = NodeType.BLOCK

    children: list[Node] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)


@dataclass(eq=False)
class Atrule:
    """An at-rule such as ``@media (max-width: 768px) { ... }``.

    Only ``@media`` gets a parsed :class:`Block`.  Other at-rules keep their
    raw ``content`` tokens (``None`` for statement at-rules like ``@import``).
    """

    type: ClassVar[NodeType] = NodeType.ATRULE

    name: str
    prelude: list[Any] = field(default_factory=list)
    block: Block | None = None
    content: list[Any] | None = None
    line: int | None = None
    column: int | None = None
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.block is not None:
            self.block.parent = self


@dataclass(eq=False)
class Rule:
    """A style rule: selector prelude plus a block of declarations."""

    type: ClassVar[NodeType] = NodeType.RULE

    prelude: list[Any] = field(default_factory=list)
    block: Block = field(default_factory=Block)
    line: int | None = None
    column: int | None = None
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.block.parent = self


@dataclass(eq=False)
class Declaration:
    """A single ``property: value`` pair, optionally ``!important``."""

    type: ClassVar[NodeType] = NodeType.DECLARATION

    property: str
    value: list[Any] = field(default_factory=list)
    important: bool = False
    line: int | None = None
    column: int | None = None
    parent: Node | None = field(default=None, repr=False)


Node = Union[StyleSheet, Atrule, Rule, Block, Declaration]

NODE_CLASSES = (StyleSheet, Atrule, Rule, Block, Declaration)


def is_node(obj: object) -> bool:
    """Return True if *obj* is one of the AST node classes."""
    return isinstance(obj, NODE_CLASSES)


def is_media(node: object) -> bool:
    """Return True if *node* is an ``@media`` at-rule."""
    return isinstance(node, Atrule) and node.name.lower() == "media"
