"""Depth/parent projection for an in-progress drag.

The projection simulates moving the active row onto the hover target inside a
copy of the flat sequence and derives the depth the pointer's horizontal
offset asks for, clamped to what the new neighbors allow.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from .types import FlattenedNode, Projection

T = TypeVar("T")


def array_move(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """Return a copy of ``items`` with one element moved to ``to_index``."""
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return moved


def drag_depth(offset: float, indent_unit: float) -> int:
    """Convert a horizontal pointer offset into whole indentation levels.

    Halves round away from zero, so ``-25`` at a ``50`` unit is ``-1``.
    """
    if indent_unit <= 0:
        raise ValueError(f"indent_unit must be positive, got {indent_unit!r}")
    levels = offset / indent_unit
    magnitude = abs(levels)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, levels))


def index_of(flat: Sequence[FlattenedNode], entry_id: str | None) -> int:
    """Return the row index for ``entry_id`` or ``-1`` when absent."""
    if entry_id is None:
        return -1
    for idx, entry in enumerate(flat):
        if entry.id == entry_id:
            return idx
    return -1


def clamp_depth(
    requested: int,
    previous_item: FlattenedNode | None,
    next_item: FlattenedNode | None,
) -> int:
    """Clamp ``requested`` between the neighbors' allowed depths."""
    max_depth = previous_item.depth + 1 if previous_item is not None else 0
    min_depth = next_item.depth if next_item is not None else 0
    if requested >= max_depth:
        return max_depth
    if requested < min_depth:
        return min_depth
    return requested


def resolve_parent_id(
    depth: int,
    over_index: int,
    previous_item: FlattenedNode | None,
    simulated: Sequence[FlattenedNode],
) -> str | None:
    """Return the parent implied by placing a row at ``depth`` after ``previous_item``."""
    if depth == 0 or previous_item is None:
        return None
    if depth == previous_item.depth:
        return previous_item.parent_id
    if depth > previous_item.depth:
        return previous_item.id
    for entry in reversed(simulated[:over_index]):
        if entry.depth == depth:
            return entry.parent_id
    return None


def project(
    flat: Sequence[FlattenedNode],
    active_id: str,
    over_id: str,
    offset: float,
    indent_unit: float,
) -> Projection | None:
    """Project the drop depth/parent for ``active_id`` hovering ``over_id``.

    Returns ``None`` when either id is missing from ``flat``. ``flat`` itself
    is never modified.
    """
    active_index = index_of(flat, active_id)
    over_index = index_of(flat, over_id)
    if active_index < 0 or over_index < 0:
        return None

    active_item = flat[active_index]
    simulated = array_move(flat, active_index, over_index)
    previous_item = simulated[over_index - 1] if over_index > 0 else None
    next_item = simulated[over_index + 1] if over_index + 1 < len(simulated) else None

    requested = active_item.depth + drag_depth(offset, indent_unit)
    depth = clamp_depth(requested, previous_item, next_item)
    parent_id = resolve_parent_id(depth, over_index, previous_item, simulated)
    return Projection(depth=depth, parent_id=parent_id)
