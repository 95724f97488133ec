"""Rendering engine for the split browser/preview terminal view.

Composes the entry list and preview text into a fixed-height two-column grid
and writes the whole frame at once. Layout is a pure function of its inputs;
only ``render_frame`` touches the terminal.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from ..ansi import clip_ansi_line, pad_to_width, truncate_with_ellipsis
from ..listing import Entry
from ..preview import PreviewResult, colorize_source, sanitize_single_line, sanitize_terminal_text
from ..preview.syntax import DEFAULT_STYLE
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import FOOTER_HELP_TEXT, hidden_status_text

CLEAR_SCREEN = "\033[H\033[J"
LEFT_PANE_PERCENT = 40
CHROME_ROWS = 5
RULE_CHAR = "─"
DIVIDER_CHAR = "│"
SELECTION_MARKER = "▶ "
UNSELECTED_MARKER = "  "
LABEL_MARGIN = 4
PREVIEW_MARGIN = 2


@dataclass
class FrameContext:
    entries: list[Entry]
    selection_index: int
    preview: PreviewResult
    width: int
    height: int
    current_path: Path
    show_hidden: bool
    theme: UITheme = DEFAULT_THEME
    message: str | None = None
    highlight: bool = False
    style: str = DEFAULT_STYLE


def pane_widths(width: int) -> tuple[int, int]:
    """Split ``width`` into left/right column widths around one divider column."""
    left_width = (max(0, width) * LEFT_PANE_PERCENT) // 100
    right_width = max(0, width - left_width - 1)
    return left_width, right_width


def body_row_count(height: int) -> int:
    return max(0, height - CHROME_ROWS)


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def preview_lines(
    preview: PreviewResult,
    *,
    highlight: bool = False,
    style: str = DEFAULT_STYLE,
) -> list[str]:
    """Split preview text into display lines, colorizing the file excerpt if asked."""
    if highlight and preview.source_path is not None and preview.content:
        text = (
            sanitize_terminal_text(preview.head)
            + colorize_source(sanitize_terminal_text(preview.content), preview.source_path, style)
            + sanitize_terminal_text(preview.tail)
        )
    else:
        text = sanitize_terminal_text(preview.text)
    return [line.replace("\r", "") for line in text.split("\n")]


def format_entry_cell(entry: Entry, selected: bool, left_width: int, theme: UITheme) -> str:
    """Render one left-pane cell padded to exactly ``left_width`` columns."""
    label = truncate_with_ellipsis(sanitize_single_line(entry.label), left_width - LABEL_MARGIN)
    if selected:
        cell = clip_ansi_line(SELECTION_MARKER + label, left_width)
        cell = _styled(cell, theme.selected, theme)
    else:
        cell = clip_ansi_line(UNSELECTED_MARKER + label, left_width)
    return pad_to_width(cell, left_width)


def format_preview_cell(line: str, right_width: int, theme: UITheme) -> str:
    """Render one right-pane cell; lines already styled keep their own colors."""
    cell = truncate_with_ellipsis(line, right_width - PREVIEW_MARGIN)
    if "\x1b" in cell:
        return cell + "\033[0m"
    return _styled(cell, theme.preview, theme)


def build_frame_rows(context: FrameContext) -> list[str]:
    """Lay out every row of one frame.

    The frame is header, rule, ``height - 5`` body rows, rule, footer. Body
    rows past the end of either column render blank cells so the grid height
    never changes between frames.
    """
    theme = context.theme
    width = max(0, context.width)
    left_width, right_width = pane_widths(width)
    rule = _styled(RULE_CHAR * width, theme.divider, theme)
    divider = _styled(DIVIDER_CHAR, theme.divider, theme)

    header = f"📂 {sanitize_single_line(str(context.current_path))} [{hidden_status_text(context.show_hidden)}]"
    header = pad_to_width(truncate_with_ellipsis(header, width), width)
    rows = [_styled(header, theme.header, theme), rule]

    lines = preview_lines(context.preview, highlight=context.highlight, style=context.style)
    entries = context.entries
    for row in range(body_row_count(context.height)):
        if row < len(entries):
            left = format_entry_cell(entries[row], row == context.selection_index, left_width, theme)
        else:
            left = " " * left_width
        right = format_preview_cell(lines[row], right_width, theme) if row < len(lines) else ""
        rows.append(f"{left}{divider} {right}")

    rows.append(rule)
    if context.message:
        rows.append(_styled(truncate_with_ellipsis(context.message, width), theme.error, theme))
    else:
        rows.append(_styled(truncate_with_ellipsis(FOOTER_HELP_TEXT, width), theme.footer, theme))
    return rows


def build_frame(context: FrameContext) -> str:
    """Return the full frame text, prefixed with a clear-screen sequence."""
    return CLEAR_SCREEN + "\r\n".join(build_frame_rows(context))


def render_frame(context: FrameContext) -> None:
    """Write one complete frame to stdout in a single write."""
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "CHROME_ROWS",
    "CLEAR_SCREEN",
    "FOOTER_HELP_TEXT",
    "FrameContext",
    "body_row_count",
    "build_frame",
    "build_frame_rows",
    "format_entry_cell",
    "format_preview_cell",
    "pane_widths",
    "preview_lines",
    "render_frame",
]
