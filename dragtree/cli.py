"""Command-line front door for dragtree.

Loads a tree from JSON, optionally replays one drag gesture through the
controller, and prints the visible rows or the resulting tree as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .drag import DragController
from .highlight import format_json
from .runtime import config
from .tree_model import Projection, TreeFormatError, load_tree, tree_to_data
from .ui_theme import available_theme_names, resolve_theme


def _positive_float(value: str) -> float:
    """argparse type for positive numeric values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def format_projection(projection: Projection | None) -> str:
    if projection is None:
        return "projection: none"
    parent = projection.parent_id if projection.parent_id is not None else "-"
    return f"projection: depth={projection.depth} parent={parent}"


def _save_preferences(args: argparse.Namespace) -> None:
    if args.indent_unit is not None:
        config.save_indent_unit(args.indent_unit)
    if args.theme:
        config.save_theme_name(args.theme)
    if args.style:
        config.save_style(args.style)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show a JSON tree as an indented list and replay drag-and-drop moves on it."
    )
    parser.add_argument("path", help="JSON tree file, or '-' for standard input.")
    parser.add_argument("--drag", metavar="ID", help="Id of the node to drag.")
    parser.add_argument("--over", metavar="ID", help="Id of the drop target row.")
    parser.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="Horizontal pointer offset of the drag (same units as --indent-unit).",
    )
    parser.add_argument(
        "--indent-unit",
        type=_positive_float,
        default=None,
        help="Horizontal distance of one nesting level (default: from config, else 50).",
    )
    parser.add_argument("--expand-all", action="store_true", help="Ignore stored collapsed flags.")
    parser.add_argument("--json", action="store_true", help="Print the resulting tree as JSON.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for --json output.")
    parser.add_argument(
        "--save-prefs",
        action="store_true",
        help="Store the given --indent-unit, --theme, and --style as defaults.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--verbose", action="store_true", help="Log drag decisions to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run at most one drag gesture, and print the result."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if (args.drag is None) != (args.over is None):
        parser.error("--drag and --over must be given together")

    if args.path != "-" and not Path(args.path).exists():
        raise SystemExit(f"Path not found: {args.path}")
    try:
        tree = load_tree(args.path)
    except (TreeFormatError, OSError) as exc:
        raise SystemExit(f"Cannot read tree from {args.path}: {exc}") from exc

    indent_unit = args.indent_unit if args.indent_unit is not None else config.load_indent_unit()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    style = args.style or config.load_style()
    if args.save_prefs:
        _save_preferences(args)

    controller = DragController(tree, indent_unit=indent_unit, collapsed_ids=() if args.expand_all else None)
    out: list[str] = []
    if args.drag is not None:
        if not controller.start(args.drag):
            raise SystemExit(f"Unknown node id: {args.drag}")
        controller.over(args.over)
        controller.move(args.offset)
        out.append(format_projection(controller.projection()) + "\n")
        controller.end()

    if args.json:
        out.append(format_json(tree_to_data(controller.export_tree()), style=style, no_color=args.no_color))
    else:
        out.extend(line + "\n" for line in controller.render_lines(theme))
    sys.stdout.write("".join(out))


if __name__ == "__main__":
    main()
