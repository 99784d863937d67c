"""Pygments-backed highlighting for JSON tree output."""

from __future__ import annotations

import json

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

FALLBACK_STYLE = "monokai"

_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()
_FORMATTERS: dict[str, TerminalFormatter] = {}


def normalize_style(style: str) -> str:
    """Return ``style`` when pygments knows it, otherwise the fallback style."""
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return FALLBACK_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return FALLBACK_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def format_json(data: object, style: str = FALLBACK_STYLE, no_color: bool = False) -> str:
    """Serialize ``data`` as indented JSON, colorized unless ``no_color``."""
    text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if no_color:
        return text
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_highlight(text, JsonLexer(), formatter)
