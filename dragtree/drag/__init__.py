"""Drag gesture handling on top of the pure tree model."""

from __future__ import annotations

from .collision import DropTargetLocator, RowHitTester
from .controller import DEFAULT_INDENT_UNIT, DragController
from .state import DragSession

__all__ = [
    "DEFAULT_INDENT_UNIT",
    "DragController",
    "DragSession",
    "DropTargetLocator",
    "RowHitTester",
]
