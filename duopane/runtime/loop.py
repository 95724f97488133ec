"""Main interactive event loop for the terminal UI.

Single-threaded and synchronous: each iteration redraws when something
changed, then blocks on the next key. The read timeout only exists to notice
terminal resizes and to expire the transient message.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import InputDispatcher, read_key
from ..preview import DEFAULT_STYLE, default_format_mtime, render_preview
from ..render import FrameContext, render_frame
from ..ui_theme import DEFAULT_THEME, UITheme
from .state import NavigationState
from .terminal import terminal_size

logger = logging.getLogger(__name__)

TRANSIENT_MESSAGE_SECONDS = 1.0
KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class Presentation:
    """Presentation-only settings; none of these affect navigation."""

    theme: UITheme = DEFAULT_THEME
    highlight: bool = False
    style: str = DEFAULT_STYLE
    format_mtime: Callable[[float], str] = default_format_mtime


def compose_frame(
    state: NavigationState,
    columns: int,
    lines: int,
    presentation: Presentation,
    message: str | None = None,
) -> FrameContext:
    """Derive entries and preview for the current state and wrap them in a frame."""
    entries = state.entries()
    selected = state.selected_entry(entries)
    preview = render_preview(selected, state.current_path, presentation.format_mtime)
    return FrameContext(
        entries=entries,
        selection_index=state.selection_index,
        preview=preview,
        width=columns,
        height=lines,
        current_path=state.current_path,
        show_hidden=state.show_hidden,
        theme=presentation.theme,
        message=message,
        highlight=presentation.highlight,
        style=presentation.style,
    )


def run_main_loop(
    state: NavigationState,
    terminal,
    stdin_fd: int,
    presentation: Presentation,
    *,
    get_terminal_size: Callable[[], tuple[int, int]] = terminal_size,
    render: Callable[[FrameContext], None] = render_frame,
) -> None:
    """Run the interactive loop until a quit command or interrupt.

    Terminal raw mode is held for the whole loop and restored on every exit
    path, including exceptions raised by rendering or signal handlers.
    """
    dispatcher = InputDispatcher(state)
    message: str | None = None
    message_until = 0.0
    last_size: tuple[int, int] | None = None
    skip_next_lf = False
    dirty = True

    with terminal.raw_mode():
        while True:
            size = get_terminal_size()
            if size != last_size:
                last_size = size
                dirty = True
            if message is not None and time.monotonic() >= message_until:
                message = None
                dirty = True

            if dirty:
                render(compose_frame(state, size[0], size[1], presentation, message))
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                logger.debug("interrupted; leaving main loop")
                break
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            result = dispatcher.handle_key(key)
            if not result.handled:
                continue
            if result.quit:
                break
            if result.message is not None:
                message = result.message
                message_until = time.monotonic() + TRANSIENT_MESSAGE_SECONDS
            dirty = True


__all__ = [
    "KEY_POLL_TIMEOUT_MS",
    "TRANSIENT_MESSAGE_SECONDS",
    "Presentation",
    "compose_frame",
    "run_main_loop",
]
