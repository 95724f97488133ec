"""Runtime composition layer for duopane.

Builds the initial navigation state and presentation settings, then either
runs the interactive loop or renders a single frame for non-tty output.
"""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path

from ..preview import normalize_style
from ..render import build_frame_rows
from ..ui_theme import resolve_theme
from .config import load_highlight_enabled, load_style_name, load_theme_name
from .loop import Presentation, compose_frame, run_main_loop
from .state import NavigationState
from .terminal import TerminalController, terminal_size

logger = logging.getLogger(__name__)


def build_presentation(
    theme_name: str | None = None,
    style: str | None = None,
    no_color: bool = False,
    highlight: bool | None = None,
) -> Presentation:
    """Merge explicit options over persisted config into ``Presentation``."""
    if highlight is None:
        highlight = load_highlight_enabled()
    return Presentation(
        theme=resolve_theme(theme_name or load_theme_name(), no_color=no_color),
        highlight=bool(highlight) and not no_color,
        style=normalize_style(style or load_style_name()),
    )


def render_once(
    start_path: Path,
    presentation: Presentation,
    columns: int | None = None,
    lines: int | None = None,
) -> str:
    """Return one frame for the initial state at ``start_path``."""
    detected_columns, detected_lines = terminal_size()
    state = NavigationState(current_path=start_path)
    context = compose_frame(
        state,
        columns if columns is not None else detected_columns,
        lines if lines is not None else detected_lines,
        presentation,
    )
    return "\n".join(build_frame_rows(context))


def _raise_system_exit(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


def run_browser(start_path: Path, presentation: Presentation) -> None:
    """Run the interactive browser rooted at ``start_path`` until quit.

    SIGTERM is turned into ``SystemExit`` so the raw-mode context manager
    restores the terminal before the process exits.
    """
    state = NavigationState(current_path=start_path)
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    previous_handler = signal.signal(signal.SIGTERM, _raise_system_exit)
    logger.debug("starting browser at %s", start_path)
    try:
        run_main_loop(state, terminal, sys.stdin.fileno(), presentation)
    finally:
        signal.signal(signal.SIGTERM, previous_handler)
        logger.debug("browser stopped at %s", state.current_path)


__all__ = [
    "build_presentation",
    "render_once",
    "run_browser",
]
