"""Build right-pane preview text for the selected entry.

Previews are recomputed synchronously per frame and are bounded in size:
directory previews list at most ``DIR_PREVIEW_MAX_CHILDREN`` children and file
previews include at most ``FILE_PREVIEW_MAX_CHARS`` characters of content.
I/O failures never escape; they become error blocks in the preview text.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..listing import (
    DIR_ICON,
    ERROR_ICON,
    FILE_ICON,
    INACCESSIBLE_ICON,
    Entry,
    EntryKind,
    classify_path,
    enumerate_names,
)
from .syntax import read_text

logger = logging.getLogger(__name__)

DIR_PREVIEW_MAX_CHILDREN = 20
FILE_PREVIEW_MAX_CHARS = 1_000
FILE_PREVIEW_MAX_BYTES = 1_000_000

NO_SELECTION_TEXT = "Select a file or directory to preview"
PARENT_PREVIEW_TEXT = f"{DIR_ICON} Parent directory\nPress Enter to go back"
EMPTY_FILE_TEXT = "(empty file)"
TRUNCATED_TEXT = "\n\n... (file truncated for preview)"
TOO_LARGE_TEXT = f"{ERROR_ICON} File too large to preview (>1MB)"

_CHILD_ICONS = {
    EntryKind.DIRECTORY: DIR_ICON,
    EntryKind.FILE: FILE_ICON,
    EntryKind.INACCESSIBLE: INACCESSIBLE_ICON,
}


@dataclass(frozen=True)
class PreviewResult:
    """Preview block split around the file excerpt.

    ``content`` holds the raw file excerpt (empty for non-file previews) so
    presentation can colorize it without touching the surrounding text.
    """

    head: str
    content: str = ""
    tail: str = ""
    source_path: Path | None = None

    @property
    def text(self) -> str:
        return f"{self.head}{self.content}{self.tail}"


def default_format_mtime(timestamp: float) -> str:
    """Format a modification time using the current locale's conventions."""
    return datetime.fromtimestamp(timestamp).strftime("%c")


def _child_line(directory: Path, name: str) -> str:
    icon = _CHILD_ICONS[classify_path(directory / name)]
    if icon == INACCESSIBLE_ICON:
        return f"{icon}  {name}"
    return f"{icon} {name}"


def render_directory_preview(directory: Path, name: str) -> PreviewResult:
    """Summarize a directory: total raw entry count plus the first children."""
    try:
        children = enumerate_names(directory)
    except OSError as exc:
        logger.debug("directory preview failed for %s: %s", directory, exc)
        return PreviewResult(head=f"{ERROR_ICON} Cannot open directory:\n{exc}")

    lines = [
        f"{DIR_ICON} Directory: {name}",
        "",
        f"Contains: {len(children)} entries",
        "",
    ]
    lines.extend(_child_line(directory, child) for child in children[:DIR_PREVIEW_MAX_CHILDREN])
    remaining = len(children) - DIR_PREVIEW_MAX_CHILDREN
    if remaining > 0:
        lines.append("")
        lines.append(f"... and {remaining} more")
    return PreviewResult(head="\n".join(lines))


def render_file_preview(
    path: Path,
    name: str,
    format_mtime: Callable[[float], str] = default_format_mtime,
) -> PreviewResult:
    """Describe a file and include a bounded excerpt of its text."""
    try:
        info = os.stat(path)
    except OSError as exc:
        logger.debug("file preview stat failed for %s: %s", path, exc)
        return PreviewResult(head=f"{ERROR_ICON} Cannot read file:\n{exc}")

    head = (
        f"{FILE_ICON} File: {name}\n"
        f"Size: {info.st_size} bytes\n"
        f"Modified: {format_mtime(info.st_mtime)}\n\n"
    )
    if info.st_size == 0:
        return PreviewResult(head=head + EMPTY_FILE_TEXT)
    if info.st_size >= FILE_PREVIEW_MAX_BYTES:
        return PreviewResult(head=head + TOO_LARGE_TEXT)

    try:
        text = read_text(path)
    except OSError as exc:
        logger.debug("file preview read failed for %s: %s", path, exc)
        return PreviewResult(head=f"{ERROR_ICON} Cannot read file:\n{exc}")

    tail = TRUNCATED_TEXT if len(text) > FILE_PREVIEW_MAX_CHARS else ""
    return PreviewResult(
        head=head,
        content=text[:FILE_PREVIEW_MAX_CHARS],
        tail=tail,
        source_path=path,
    )


def render_preview(
    entry: Entry | None,
    current_path: Path,
    format_mtime: Callable[[float], str] = default_format_mtime,
) -> PreviewResult:
    """Return the preview block for ``entry`` inside ``current_path``."""
    if entry is None:
        return PreviewResult(head=NO_SELECTION_TEXT)
    if entry.is_parent:
        return PreviewResult(head=PARENT_PREVIEW_TEXT)
    if entry.kind is EntryKind.ERROR:
        return PreviewResult(head=f"{ERROR_ICON} {entry.name}")
    if entry.is_dir:
        return render_directory_preview(current_path / entry.name, entry.name)
    return render_file_preview(current_path / entry.name, entry.name, format_mtime)


__all__ = [
    "DIR_PREVIEW_MAX_CHILDREN",
    "EMPTY_FILE_TEXT",
    "FILE_PREVIEW_MAX_BYTES",
    "FILE_PREVIEW_MAX_CHARS",
    "NO_SELECTION_TEXT",
    "PARENT_PREVIEW_TEXT",
    "TOO_LARGE_TEXT",
    "TRUNCATED_TEXT",
    "PreviewResult",
    "default_format_mtime",
    "render_directory_preview",
    "render_file_preview",
    "render_preview",
]
