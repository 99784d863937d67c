"""Session state owned by one drag controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..tree_model import Tree


@dataclass
class DragSession:
    tree: Tree
    active_id: str | None = None
    over_id: str | None = None
    offset: float = 0.0
    collapsed_ids: set[str] = field(default_factory=set)
    # Collapse state captured at ``start`` and restored when nothing is committed.
    collapsed_before_drag: frozenset[str] | None = None

    @property
    def dragging(self) -> bool:
        return self.active_id is not None
