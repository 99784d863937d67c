"""Conversion between plain JSON-shaped data and ``TreeNode`` trees.

Accepted shape per node: ``{"id": str, "name": str, "children": [...],
"collapsed": bool}``. ``children`` and ``collapsed`` are optional. A legacy
``expanded`` flag is read as the inverse of ``collapsed`` when the latter is
absent.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from .types import Tree, TreeNode


class TreeFormatError(ValueError):
    """Raised when input data does not describe a tree of nodes."""


def _node_from_data(raw: object, where: str) -> TreeNode:
    if not isinstance(raw, dict):
        raise TreeFormatError(f"{where}: expected an object, got {type(raw).__name__}")

    node_id = raw.get("id")
    if isinstance(node_id, int) and not isinstance(node_id, bool):
        node_id = str(node_id)
    if not isinstance(node_id, str) or not node_id:
        raise TreeFormatError(f"{where}: 'id' must be a non-empty string")

    name = raw.get("name", "")
    if not isinstance(name, str):
        raise TreeFormatError(f"{where}: 'name' must be a string")

    if "collapsed" in raw:
        collapsed = raw["collapsed"]
    elif "expanded" in raw:
        collapsed = not raw["expanded"]
    else:
        collapsed = False
    if not isinstance(collapsed, bool):
        raise TreeFormatError(f"{where}: 'collapsed' must be a boolean")

    raw_children = raw.get("children", [])
    if not isinstance(raw_children, list):
        raise TreeFormatError(f"{where}: 'children' must be a list")
    children = tuple(
        _node_from_data(child, f"{where}.children[{idx}]") for idx, child in enumerate(raw_children)
    )
    return TreeNode(id=node_id, name=name, children=children, collapsed=collapsed)


def tree_from_data(data: object) -> Tree:
    """Build a tree from a list of node objects (or a single node object)."""
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise TreeFormatError(f"expected a list of nodes, got {type(data).__name__}")
    return tuple(_node_from_data(raw, f"[{idx}]") for idx, raw in enumerate(data))


def tree_to_data(tree: Tree) -> list[dict[str, object]]:
    """Return the JSON-shaped form of ``tree``."""
    return [
        {
            "id": node.id,
            "name": node.name,
            "children": tree_to_data(node.children),
            "collapsed": node.collapsed,
        }
        for node in tree
    ]


def load_tree(path: Path | str) -> Tree:
    """Read a tree from a JSON file; ``"-"`` reads standard input."""
    try:
        if str(path) == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
        data = json.loads(text)
    except UnicodeDecodeError as exc:
        raise TreeFormatError(f"invalid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TreeFormatError(f"invalid JSON: {exc}") from exc
    return tree_from_data(data)
