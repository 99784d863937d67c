"""Rebuild a nested tree from a flat, parent-before-child sequence."""

from __future__ import annotations

from collections.abc import Sequence

from .types import FlattenedNode, Tree, TreeNode


def rebuild(flat: Sequence[FlattenedNode]) -> Tree:
    """Return the tree described by ``flat``'s ``parent_id`` links.

    Only ``parent_id`` and row order matter; ``depth``/``index`` are ignored.
    Every parent must appear before its children. A row whose parent has not
    been seen yet raises ``ValueError``.
    """
    # ``None`` is the synthetic root whose children become the top level.
    children_by_id: dict[str | None, list[FlattenedNode]] = {None: []}
    for entry in flat:
        siblings = children_by_id.get(entry.parent_id)
        if siblings is None:
            raise ValueError(
                f"row {entry.id!r} precedes its parent {entry.parent_id!r}; "
                "rebuild requires parent-before-child order"
            )
        siblings.append(entry)
        children_by_id[entry.id] = []

    def assemble(entry: FlattenedNode) -> TreeNode:
        return TreeNode(
            id=entry.id,
            name=entry.name,
            children=tuple(assemble(child) for child in children_by_id[entry.id]),
            collapsed=entry.collapsed,
        )

    return tuple(assemble(entry) for entry in children_by_id[None])
