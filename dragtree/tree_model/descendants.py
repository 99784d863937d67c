"""Descendant queries and structural edits on immutable trees."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import fields, replace
from typing import Any

from .types import Tree, TreeNode

NODE_PROPERTIES = frozenset(field.name for field in fields(TreeNode))


def find_item(tree: Sequence[TreeNode], node_id: str) -> TreeNode | None:
    """Return the top-level node with ``node_id``; nested nodes are not searched."""
    return next((node for node in tree if node.id == node_id), None)


def find_node(tree: Sequence[TreeNode], node_id: str) -> TreeNode | None:
    """Return the node with ``node_id`` anywhere in ``tree``."""
    for node in tree:
        if node.id == node_id:
            return node
        if node.children:
            found = find_node(node.children, node_id)
            if found is not None:
                return found
    return None


def descendant_ids(tree: Sequence[TreeNode], node_id: str, include_self: bool = False) -> list[str]:
    """Collect ids below ``node_id`` in pre-order, optionally starting with it.

    Returns an empty list when ``node_id`` is not in ``tree``.
    """
    node = find_node(tree, node_id)
    if node is None:
        return []

    ids: list[str] = [node.id] if include_self else []
    seen: set[str] = {node.id}

    def collect(children: Sequence[TreeNode]) -> None:
        for child in children:
            if child.id in seen:
                continue
            seen.add(child.id)
            ids.append(child.id)
            collect(child.children)

    collect(node.children)
    return ids


def _count_descendants(children: Sequence[TreeNode]) -> int:
    return sum(1 + _count_descendants(child.children) for child in children)


def child_count(tree: Sequence[TreeNode], node_id: str) -> int:
    """Count all descendants of ``node_id`` (not only direct children)."""
    node = find_node(tree, node_id)
    return _count_descendants(node.children) if node is not None else 0


def remove_node(tree: Sequence[TreeNode], node_id: str) -> Tree:
    """Return ``tree`` without ``node_id`` and its subtree."""
    kept: list[TreeNode] = []
    for node in tree:
        if node.id == node_id:
            continue
        if node.children:
            pruned = remove_node(node.children, node_id)
            if len(pruned) != len(node.children) or any(
                new is not old for new, old in zip(pruned, node.children)
            ):
                node = replace(node, children=pruned)
        kept.append(node)
    return tuple(kept)


def set_property(
    tree: Sequence[TreeNode],
    node_id: str,
    prop: str,
    updater: Callable[[Any], Any],
) -> Tree:
    """Return ``tree`` with ``prop`` of ``node_id`` replaced by ``updater(old)``.

    Nodes on the path to the target are copied; untouched subtrees are shared.
    An unknown ``node_id`` yields an equal tree.
    """
    if prop not in NODE_PROPERTIES:
        raise ValueError(f"unknown node property: {prop!r}")

    def update(nodes: Sequence[TreeNode]) -> tuple[tuple[TreeNode, ...], bool]:
        out = list(nodes)
        for idx, node in enumerate(nodes):
            if node.id == node_id:
                out[idx] = replace(node, **{prop: updater(getattr(node, prop))})
                return tuple(out), True
            if node.children:
                children, found = update(node.children)
                if found:
                    out[idx] = replace(node, children=children)
                    return tuple(out), True
        return tuple(out), False

    updated, _found = update(tree)
    return updated
