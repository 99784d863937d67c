"""Drop-target lookup boundary between pointer events and the controller.

The projector only needs a target id and a horizontal offset. How those are
obtained from raw pointer coordinates is up to the locator.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..tree_model import FlattenedNode


class DropTargetLocator(Protocol):
    def locate(self, x: float, y: float) -> tuple[str | None, float]:
        """Return ``(target_id, horizontal_offset)`` for a pointer position."""
        ...


class RowHitTester:
    """Locate targets in a vertical list of fixed-height rows.

    Pointer rows above or below the list clamp to the first/last row. The
    horizontal offset is measured from the column where the drag began.
    """

    def __init__(
        self,
        rows: Sequence[FlattenedNode],
        origin_x: float,
        row_height: float = 1,
        top: float = 0,
    ) -> None:
        if row_height <= 0:
            raise ValueError(f"row_height must be positive, got {row_height!r}")
        self.rows = list(rows)
        self.origin_x = origin_x
        self.row_height = row_height
        self.top = top

    def row_index_at(self, y: float) -> int | None:
        if not self.rows:
            return None
        idx = int((y - self.top) // self.row_height)
        return max(0, min(idx, len(self.rows) - 1))

    def locate(self, x: float, y: float) -> tuple[str | None, float]:
        idx = self.row_index_at(y)
        target_id = self.rows[idx].id if idx is not None else None
        return target_id, x - self.origin_x
