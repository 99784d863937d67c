"""Tree node datatypes shared by flattening, projection, and rebuild."""

from __future__ import annotations

from dataclasses import dataclass

Tree = tuple["TreeNode", ...]


@dataclass(frozen=True)
class TreeNode:
    """One named node with ordered children.

    Nodes are immutable; every transform returns a new tree.
    """

    id: str
    name: str
    children: tuple[TreeNode, ...] = ()
    collapsed: bool = False


@dataclass(frozen=True)
class FlattenedNode:
    """One row of a flattened tree.

    ``index`` is the position among siblings sharing ``parent_id``.
    """

    id: str
    name: str
    children: tuple[TreeNode, ...]
    collapsed: bool
    depth: int
    parent_id: str | None
    index: int


@dataclass(frozen=True)
class Projection:
    """Candidate placement for the item being dragged."""

    depth: int
    parent_id: str | None
