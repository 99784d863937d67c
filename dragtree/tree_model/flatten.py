"""Tree linearization and visible-row filtering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .types import FlattenedNode, TreeNode


def flatten(tree: Sequence[TreeNode]) -> list[FlattenedNode]:
    """Return the pre-order flat sequence of ``tree`` with depth/parent/index."""
    entries: list[FlattenedNode] = []

    def walk(nodes: Sequence[TreeNode], parent_id: str | None, depth: int) -> None:
        for index, node in enumerate(nodes):
            entries.append(
                FlattenedNode(
                    id=node.id,
                    name=node.name,
                    children=node.children,
                    collapsed=node.collapsed,
                    depth=depth,
                    parent_id=parent_id,
                    index=index,
                )
            )
            walk(node.children, node.id, depth + 1)

    walk(tree, None, 0)
    return entries


def visible(flat: Sequence[FlattenedNode], excluded_ids: Iterable[str]) -> list[FlattenedNode]:
    """Drop every row below a collapsed/excluded ancestor.

    Relies on parents preceding children: once a row is dropped its own id
    joins the exclusion set, so deeper descendants go in the same pass.
    """
    excluded = set(excluded_ids)
    rows: list[FlattenedNode] = []
    for entry in flat:
        if entry.parent_id is not None and entry.parent_id in excluded:
            excluded.add(entry.id)
            continue
        rows.append(entry)
    return rows
