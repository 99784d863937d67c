"""Public package surface for dragtree.

Re-exports the pure tree functions and the drag controller. ``main`` is
imported lazily to keep package imports lightweight.
"""

from __future__ import annotations

from .drag import DragController, DropTargetLocator, RowHitTester
from .tree_model import (
    FlattenedNode,
    Projection,
    TreeNode,
    child_count,
    descendant_ids,
    flatten,
    project,
    rebuild,
    remove_node,
    set_property,
    visible,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "TreeNode",
    "FlattenedNode",
    "Projection",
    "flatten",
    "visible",
    "project",
    "rebuild",
    "descendant_ids",
    "child_count",
    "remove_node",
    "set_property",
    "DragController",
    "DropTargetLocator",
    "RowHitTester",
    "main",
]
