"""Formatting helpers for flattened tree rows."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import FlattenedNode, Projection

INDENT = "  "


def format_flat_entry(
    entry: FlattenedNode,
    collapsed_ids: Collection[str],
    depth: int | None = None,
    active: bool = False,
    badge_count: int = 0,
    theme: UITheme | None = None,
) -> str:
    """Render one row as indented ANSI-styled text.

    ``depth`` overrides the row's own depth; the dragged row is drawn at its
    projected depth.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = INDENT * (entry.depth if depth is None else max(0, depth))
    if entry.children:
        marker = "▸ " if entry.id in collapsed_ids else "▾ "
    else:
        marker = "  "
    name_color = active_theme.tree_active if active else active_theme.tree_name
    badge = ""
    if active and badge_count > 0:
        badge = f" {active_theme.tree_badge}[{badge_count}]{reset}"
    return f"{indent}{active_theme.tree_marker}{marker}{reset}{name_color}{entry.name}{reset}{badge}"


def render_rows(
    rows: Sequence[FlattenedNode],
    collapsed_ids: Collection[str],
    active_id: str | None = None,
    projection: Projection | None = None,
    active_badge_count: int = 0,
    theme: UITheme | None = None,
) -> list[str]:
    """Render visible rows, drawing the active row at its projected depth."""
    lines: list[str] = []
    for entry in rows:
        is_active = active_id is not None and entry.id == active_id
        depth = projection.depth if is_active and projection is not None else None
        lines.append(
            format_flat_entry(
                entry,
                collapsed_ids,
                depth=depth,
                active=is_active,
                badge_count=active_badge_count if is_active else 0,
                theme=theme,
            )
        )
    return lines
