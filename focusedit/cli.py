"""Command-line front door for focusedit.

Parses CLI options, resolves the target path, and projects the tree root.
Then dispatches into the interactive editor runtime.
"""

from __future__ import annotations

import argparse
import os
import stat
import sys

from .app import run_editor
from .document import load_document
from .file_tree_model import ChildMapping, project_directory
from .highlight import highlight, highlight_ansi
from .log import configure_logging
from .tree_model import build_tree_rows, row_label
from .ui_theme import available_theme_names


def _nonnegative_float(value: str) -> float:
    """argparse type for non-negative float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def resolve_target(path: str) -> tuple[str, str | None]:
    """Return ``(tree_root, initial_file)`` for a CLI path.

    A directory is its own root; a file opens inside its parent directory.
    Raises ``OSError`` when the path cannot be stat'ed.
    """
    absolute = os.path.abspath(path)
    if stat.S_ISDIR(os.stat(absolute).st_mode):
        return absolute, None
    return os.path.dirname(absolute), absolute


def format_tree(mapping: ChildMapping) -> str:
    """Render a fully expanded projection as an indented listing."""
    rows = build_tree_rows(mapping, set(mapping.directories()))
    return "".join("  " * row.depth + row_label(row).lstrip() + "\n" for row in rows)


def render_file(path: str, output_format: str, no_color: bool) -> str:
    document = load_document(path)
    if output_format == "markup":
        return highlight(document.text, document.extension)
    return highlight_ansi(document.text, document.extension, no_color=no_color)


def main(default_path: str | None = None) -> None:
    """Parse CLI arguments and launch focusedit on a file or directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Startup path and projection failures exit with a
    message instead of opening the editor.
    """
    parser = argparse.ArgumentParser(description="Edit files from a directory tree in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Directory or file to open. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--autosave-delay",
        type=_nonnegative_float,
        default=None,
        help="Seconds of inactivity before edits are written (default: 0.5).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: WARNING).")
    parser.add_argument("--render", metavar="PATH", help="Print PATH highlighted and exit.")
    parser.add_argument(
        "--format",
        choices=("ansi", "markup"),
        default="ansi",
        help="Output format for --render (default: ansi).",
    )
    parser.add_argument("--tree", action="store_true", help="Print the directory projection and exit.")
    args = parser.parse_args()

    configure_logging(args.log_level)

    if args.render is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --render.")
        try:
            sys.stdout.write(render_file(args.render, args.format, args.no_color))
        except OSError as exc:
            raise SystemExit(f"Cannot read {args.render}: {exc.strerror or exc}") from exc
        return

    if default_path is None:
        default_path = os.getcwd()
    path = args.path or default_path
    try:
        tree_root, initial_file = resolve_target(path)
    except OSError as exc:
        raise SystemExit(f"Path not found: {path}") from exc

    try:
        tree_root, mapping = project_directory(tree_root)
    except OSError as exc:
        raise SystemExit(f"Cannot read directory tree {tree_root}: {exc}") from exc

    if args.tree:
        sys.stdout.write(format_tree(mapping))
        return

    run_editor(
        tree_root,
        mapping,
        initial_file,
        theme_name=args.theme,
        no_color=args.no_color,
        autosave_delay=args.autosave_delay,
    )


if __name__ == "__main__":
    main()
