"""Commit a projected drag onto a full flat sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from .projection import index_of
from .types import FlattenedNode, Projection

logger = logging.getLogger(__name__)


def subtree_end(flat: Sequence[FlattenedNode], index: int) -> int:
    """Return the index just past the contiguous subtree rooted at ``flat[index]``."""
    depth = flat[index].depth
    end = index + 1
    while end < len(flat) and flat[end].depth > depth:
        end += 1
    return end


def apply_projection(
    flat: Sequence[FlattenedNode],
    active_id: str,
    over_id: str,
    projection: Projection,
) -> list[FlattenedNode] | None:
    """Return ``flat`` with the active subtree placed at the hover target.

    The active row takes the projected depth/parent and its descendants
    shift by the same depth delta. The subtree travels as one block so every
    parent still precedes its children. The moved row lands where a plain
    array move of the active row to the target's index would put it.

    Returns ``None`` when an id is missing or the target or projected parent
    lies inside the moved subtree.
    """
    active_index = index_of(flat, active_id)
    over_index = index_of(flat, over_id)
    if active_index < 0 or over_index < 0:
        return None

    end = subtree_end(flat, active_index)
    block_ids = {entry.id for entry in flat[active_index + 1 : end]}
    if over_id in block_ids or projection.parent_id == active_id or projection.parent_id in block_ids:
        logger.debug("refusing to move %r into its own subtree", active_id)
        return None

    active = flat[active_index]
    delta = projection.depth - active.depth
    block = [replace(active, depth=projection.depth, parent_id=projection.parent_id)]
    block.extend(replace(entry, depth=entry.depth + delta) for entry in flat[active_index + 1 : end])

    rest = list(flat[:active_index]) + list(flat[end:])
    if over_index == active_index:
        insert_at = active_index
    elif over_index > active_index:
        # Moving down: land right after the target.
        insert_at = over_index - len(block) + 1
    else:
        insert_at = over_index
    return rest[:insert_at] + block + rest[insert_at:]
