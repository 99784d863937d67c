"""Persistent JSON config helpers.

Stores the indentation unit, UI theme, and JSON highlight style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dragtree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_INDENT_UNIT = 50.0
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_indent_unit() -> float:
    """Return the stored indentation unit, or the default when unset/invalid.

    Booleans, non-numbers, and non-positive values are rejected.
    """
    value = load_config().get("indent_unit")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_INDENT_UNIT
    if value <= 0:
        return DEFAULT_INDENT_UNIT
    return float(value)


def save_indent_unit(indent_unit: float) -> None:
    """Persist a positive indentation unit; other values are ignored."""
    if isinstance(indent_unit, bool) or indent_unit <= 0:
        return
    config = load_config()
    config["indent_unit"] = float(indent_unit)
    save_config(config)


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_name(key: str, name: str) -> None:
    stripped = str(name).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_name("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    _save_name("theme", theme_name)


def load_style() -> str:
    """Load the pygments style used for JSON output."""
    return _load_name("style") or DEFAULT_STYLE


def save_style(style: str) -> None:
    """Persist the pygments style used for JSON output."""
    _save_name("style", style)
