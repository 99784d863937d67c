"""Tree model: flattening, visibility, projection, rebuild, and edits.

Every function here is pure; trees are immutable tuples of ``TreeNode``.
"""

from __future__ import annotations

from .build import rebuild
from .codec import TreeFormatError, load_tree, tree_from_data, tree_to_data
from .descendants import (
    child_count,
    descendant_ids,
    find_item,
    find_node,
    remove_node,
    set_property,
)
from .flatten import flatten, visible
from .moves import apply_projection, subtree_end
from .projection import array_move, drag_depth, index_of, project
from .rendering import format_flat_entry, render_rows
from .types import FlattenedNode, Projection, Tree, TreeNode

__all__ = [
    "Tree",
    "TreeNode",
    "FlattenedNode",
    "Projection",
    "flatten",
    "visible",
    "project",
    "drag_depth",
    "array_move",
    "index_of",
    "rebuild",
    "descendant_ids",
    "child_count",
    "find_item",
    "find_node",
    "remove_node",
    "set_property",
    "apply_projection",
    "subtree_end",
    "TreeFormatError",
    "tree_from_data",
    "tree_to_data",
    "load_tree",
    "format_flat_entry",
    "render_rows",
]
