"""Command-line front door for duopane.

Parses CLI options, resolves the starting directory, and configures logging.
Then dispatches into the interactive browser or a one-shot frame render.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .runtime.app import build_presentation, render_once, run_browser
from .runtime.config import save_theme_name
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duopane",
        description="Browse directories in a terminal with a live preview pane.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to your home directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for file excerpts.")
    parser.add_argument("--no-color", action="store_true", help="Disable all color output.")
    parser.add_argument(
        "--no-highlight",
        action="store_true",
        help="Show file excerpts without syntax coloring.",
    )
    parser.add_argument("--render", action="store_true", help="Print one frame for PATH and exit.")
    parser.add_argument("--cols", type=_positive_int, default=None, help="Frame width for --render.")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Frame height for --render.")
    parser.add_argument("--log-file", metavar="FILE", default=None, help="Write debug log records to FILE.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Attach a debug file handler to the package logger when requested."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("duopane")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def resolve_start_path(raw_path: str | None) -> Path:
    """Return an absolute start directory, exiting when it is not a directory."""
    path = Path(raw_path).expanduser() if raw_path else Path.home()
    path = Path(os.path.abspath(path))
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    return path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch duopane.

    Falls back to a one-shot render when stdin is not a terminal, since raw
    key input is unavailable there.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)
    start_path = resolve_start_path(args.path)

    if args.theme is not None:
        save_theme_name(args.theme)
    presentation = build_presentation(
        theme_name=args.theme,
        style=args.style,
        no_color=args.no_color,
        highlight=False if args.no_highlight else None,
    )

    if args.render or not os.isatty(sys.stdin.fileno()):
        frame = render_once(start_path, presentation, args.cols, args.rows) + "\n"
        sys.stdout.flush()
        sys.stdout.buffer.write(frame.encode("utf-8", errors="replace"))
        sys.stdout.buffer.flush()
        return

    run_browser(start_path, presentation)


if __name__ == "__main__":
    main()
