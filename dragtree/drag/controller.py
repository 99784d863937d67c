"""Drag gesture state machine over an immutable tree.

States are Idle (no active row) and Dragging. ``start`` enters Dragging;
``move`` and ``over`` update the pointer-derived inputs; ``end`` commits the
projected placement (or does nothing when there is none) and ``cancel``
abandons the gesture. Rows and projections are recomputed on every read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..tree_model import (
    FlattenedNode,
    Projection,
    Tree,
    TreeNode,
    apply_projection,
    child_count,
    descendant_ids,
    find_node,
    flatten,
    project,
    rebuild,
    remove_node,
    render_rows,
    set_property,
    visible,
)
from ..ui_theme import UITheme
from .collision import DropTargetLocator
from .state import DragSession

logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT = 50


class DragController:
    """Owns one tree and the transient state of at most one drag gesture.

    A ``start`` while a gesture is already active discards that gesture as
    if ``cancel`` had been called, then begins the new one.
    """

    def __init__(
        self,
        tree: Sequence[TreeNode],
        indent_unit: float = DEFAULT_INDENT_UNIT,
        collapsed_ids: Iterable[str] | None = None,
    ) -> None:
        if indent_unit <= 0:
            raise ValueError(f"indent_unit must be positive, got {indent_unit!r}")
        tree = tuple(tree)
        if collapsed_ids is None:
            collapsed_ids = (entry.id for entry in flatten(tree) if entry.collapsed)
        self.indent_unit = indent_unit
        self.session = DragSession(tree=tree, collapsed_ids=set(collapsed_ids))

    @property
    def tree(self) -> Tree:
        return self.session.tree

    @property
    def active_id(self) -> str | None:
        return self.session.active_id

    @property
    def over_id(self) -> str | None:
        return self.session.over_id

    @property
    def offset(self) -> float:
        return self.session.offset

    @property
    def collapsed_ids(self) -> frozenset[str]:
        return frozenset(self.session.collapsed_ids)

    @property
    def is_dragging(self) -> bool:
        return self.session.dragging

    def rows(self) -> list[FlattenedNode]:
        """Return the visible flat sequence for the current tree and collapse state."""
        return visible(flatten(self.session.tree), self.session.collapsed_ids)

    def active_row(self) -> FlattenedNode | None:
        active_id = self.session.active_id
        if active_id is None:
            return None
        return next((row for row in self.rows() if row.id == active_id), None)

    def projection(self) -> Projection | None:
        """Project the active row onto the hover target, or ``None`` when idle."""
        session = self.session
        if session.active_id is None or session.over_id is None:
            return None
        return project(self.rows(), session.active_id, session.over_id, session.offset, self.indent_unit)

    def active_child_count(self) -> int:
        """Number of descendants travelling with the active row."""
        if self.session.active_id is None:
            return 0
        return child_count(self.session.tree, self.session.active_id)

    # ------------------------------------------------------------------ #
    # Gesture transitions
    # ------------------------------------------------------------------ #

    def start(self, active_id: str) -> bool:
        """Begin dragging ``active_id``; unknown ids leave the controller idle."""
        session = self.session
        if find_node(session.tree, active_id) is None:
            return False
        if session.dragging:
            logger.debug("start(%r) discards active drag of %r", active_id, session.active_id)
            self.cancel()

        session.active_id = active_id
        session.over_id = active_id
        session.offset = 0.0
        session.collapsed_before_drag = frozenset(session.collapsed_ids)
        # The dragged subtree folds into its root row until the drop.
        session.collapsed_ids.update(descendant_ids(session.tree, active_id, include_self=True))
        return True

    def move(self, offset: float) -> bool:
        """Record the horizontal pointer offset measured from the drag start."""
        if not self.session.dragging:
            return False
        self.session.offset = float(offset)
        return True

    def over(self, target_id: str | None) -> bool:
        """Record the current drop target, ``None`` when over nothing."""
        if not self.session.dragging:
            return False
        self.session.over_id = target_id
        return True

    def pointer(self, locator: DropTargetLocator, x: float, y: float) -> bool:
        """Feed one pointer sample through ``locator`` into ``over`` and ``move``."""
        if not self.session.dragging:
            return False
        target_id, offset = locator.locate(x, y)
        self.over(target_id)
        return self.move(offset)

    def end(self) -> bool:
        """Drop the active row at its projection; returns whether the tree changed."""
        session = self.session
        if not session.dragging:
            return False
        active_id = session.active_id
        over_id = session.over_id
        projection = self.projection()

        committed: list[FlattenedNode] | None = None
        if projection is not None and over_id is not None:
            committed = apply_projection(flatten(session.tree), active_id, over_id, projection)
        if committed is None:
            logger.debug("drag of %r ended without a placement", active_id)
            self._restore_collapsed()
            self._reset()
            return False

        moved_ids = descendant_ids(session.tree, active_id, include_self=True)
        new_tree = rebuild(committed)
        changed = new_tree != session.tree
        session.tree = new_tree
        session.collapsed_ids.difference_update(moved_ids)
        logger.debug(
            "dropped %r at depth %d under %r",
            active_id,
            projection.depth,
            projection.parent_id,
        )
        self._reset()
        return changed

    def cancel(self) -> bool:
        """Abandon the gesture; the tree and prior collapse state are kept."""
        if not self.session.dragging:
            return False
        self._restore_collapsed()
        self._reset()
        return True

    def _restore_collapsed(self) -> None:
        before = self.session.collapsed_before_drag
        if before is not None:
            self.session.collapsed_ids = set(before)

    def _reset(self) -> None:
        session = self.session
        session.active_id = None
        session.over_id = None
        session.offset = 0.0
        session.collapsed_before_drag = None

    # ------------------------------------------------------------------ #
    # Collapse state and edits outside a gesture
    # ------------------------------------------------------------------ #

    def toggle_collapsed(self, node_id: str) -> bool:
        """Collapse or expand ``node_id``.

        Collapsing also collapses every descendant; expanding only re-opens
        ``node_id`` itself.
        """
        session = self.session
        if session.dragging or find_node(session.tree, node_id) is None:
            return False
        if node_id in session.collapsed_ids:
            session.collapsed_ids.discard(node_id)
        else:
            session.collapsed_ids.update(descendant_ids(session.tree, node_id, include_self=True))
        return True

    def remove(self, node_id: str) -> bool:
        """Delete ``node_id`` and its subtree; refused while dragging."""
        session = self.session
        if session.dragging:
            return False
        removed = descendant_ids(session.tree, node_id, include_self=True)
        if not removed:
            return False
        session.tree = remove_node(session.tree, node_id)
        session.collapsed_ids.difference_update(removed)
        return True

    def export_tree(self) -> Tree:
        """Return the tree with ``collapsed`` flags matching the session.

        Transient drag folding is not exported.
        """
        session = self.session
        collapsed = session.collapsed_before_drag
        if collapsed is None:
            collapsed = frozenset(session.collapsed_ids)
        tree = session.tree
        for entry in flatten(tree):
            wanted = entry.id in collapsed
            if entry.collapsed != wanted:
                tree = set_property(tree, entry.id, "collapsed", lambda _old, value=wanted: value)
        return tree

    def render_lines(self, theme: UITheme | None = None) -> list[str]:
        """Render visible rows with the active row at its projected depth."""
        return render_rows(
            self.rows(),
            self.session.collapsed_ids,
            active_id=self.session.active_id,
            projection=self.projection(),
            active_badge_count=self.active_child_count(),
            theme=theme,
        )
