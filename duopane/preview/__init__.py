"""Right-pane preview public API.

Exports the preview builder used by the runtime plus the display helpers the
frame renderer applies to preview text.
"""

from __future__ import annotations

from .rendering import (
    DIR_PREVIEW_MAX_CHILDREN,
    EMPTY_FILE_TEXT,
    FILE_PREVIEW_MAX_BYTES,
    FILE_PREVIEW_MAX_CHARS,
    NO_SELECTION_TEXT,
    PARENT_PREVIEW_TEXT,
    TOO_LARGE_TEXT,
    TRUNCATED_TEXT,
    PreviewResult,
    default_format_mtime,
    render_directory_preview,
    render_file_preview,
    render_preview,
)
from .syntax import (
    DEFAULT_STYLE,
    colorize_source,
    normalize_style,
    read_text,
    sanitize_single_line,
    sanitize_terminal_text,
)

__all__ = [
    "DEFAULT_STYLE",
    "DIR_PREVIEW_MAX_CHILDREN",
    "EMPTY_FILE_TEXT",
    "FILE_PREVIEW_MAX_BYTES",
    "FILE_PREVIEW_MAX_CHARS",
    "NO_SELECTION_TEXT",
    "PARENT_PREVIEW_TEXT",
    "TOO_LARGE_TEXT",
    "TRUNCATED_TEXT",
    "PreviewResult",
    "colorize_source",
    "default_format_mtime",
    "normalize_style",
    "read_text",
    "render_directory_preview",
    "render_file_preview",
    "render_preview",
    "sanitize_single_line",
    "sanitize_terminal_text",
]
