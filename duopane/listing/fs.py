"""Filesystem enumeration for the browser pane.

Listing is synchronous and recomputed on every call; nothing is cached across
navigation events. Per-entry classification failures mark just that entry
inaccessible, while a failure to enumerate the directory itself collapses the
listing into a single error row.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import HIDDEN_PREFIX, PARENT_ENTRY, Entry, EntryKind

logger = logging.getLogger(__name__)


def is_root(path: Path) -> bool:
    """Return whether ``path`` is a filesystem root (its own parent)."""
    return path.parent == path


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def classify_path(path: Path) -> EntryKind:
    """Probe one path, following symlinks; probe failures are inaccessible."""
    try:
        mode = os.stat(path).st_mode
    except OSError as exc:
        logger.debug("stat failed for %s: %s", path, exc)
        return EntryKind.INACCESSIBLE
    return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE


def enumerate_names(directory: Path) -> list[str]:
    """Return raw child names in enumeration order; raises ``OSError``."""
    with os.scandir(directory) as entries:
        return [child.name for child in entries]


def list_entries(directory: Path, show_hidden: bool) -> list[Entry]:
    """Build the EntryList for ``directory``.

    The parent row comes first unless ``directory`` is the filesystem root,
    followed by children in enumeration order (no re-sorting). Hidden names
    are dropped unless ``show_hidden`` is set. Never raises.
    """
    try:
        names = enumerate_names(directory)
    except OSError as exc:
        logger.debug("cannot enumerate %s: %s", directory, exc)
        return [Entry(name=str(exc), kind=EntryKind.ERROR)]

    entries: list[Entry] = []
    if not is_root(directory):
        entries.append(PARENT_ENTRY)
    for name in names:
        if not show_hidden and is_hidden(name):
            continue
        entries.append(Entry(name=name, kind=classify_path(directory / name)))
    return entries


__all__ = [
    "classify_path",
    "enumerate_names",
    "is_hidden",
    "is_root",
    "list_entries",
]
