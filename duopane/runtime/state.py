"""Navigation state for the browser and its input-driven transitions.

``NavigationState`` is owned by the event loop and mutated only through the
command methods below. The entry list is never stored: each method that needs
it re-lists the current directory, so filesystem changes between keypresses
are tolerated.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..listing import Entry, list_entries

logger = logging.getLogger(__name__)

DIRECTORY_NOT_FOUND_MESSAGE = "❌ Directory not found"
NOT_A_DIRECTORY_MESSAGE = "❌ Not a directory"


@dataclass
class NavigationState:
    current_path: Path
    selection_index: int = 0
    show_hidden: bool = False

    def entries(self) -> list[Entry]:
        """Return a freshly computed EntryList for the current directory."""
        return list_entries(self.current_path, self.show_hidden)

    def clamp_selection(self, count: int) -> int:
        """Clamp ``selection_index`` into ``[0, count - 1]`` (0 when empty)."""
        self.selection_index = max(0, min(self.selection_index, count - 1))
        return self.selection_index

    def selected_entry(self, entries: list[Entry] | None = None) -> Entry | None:
        """Return the entry under the cursor, or ``None`` for an empty listing."""
        if entries is None:
            entries = self.entries()
        if not entries:
            self.selection_index = 0
            return None
        return entries[self.clamp_selection(len(entries))]

    def move_up(self) -> bool:
        """Move the cursor up one row; returns whether it moved."""
        self.clamp_selection(len(self.entries()))
        if self.selection_index <= 0:
            return False
        self.selection_index -= 1
        return True

    def move_down(self) -> bool:
        """Move the cursor down one row; returns whether it moved."""
        count = len(self.entries())
        self.clamp_selection(count)
        if self.selection_index >= count - 1:
            return False
        self.selection_index += 1
        return True

    def toggle_hidden(self) -> None:
        self.show_hidden = not self.show_hidden
        self.selection_index = 0

    def go_to_parent(self) -> None:
        self.current_path = self.current_path.parent
        self.selection_index = 0

    def enter_directory(self, name: str) -> str | None:
        """Change into ``name`` below the current directory.

        Resolution is lexical (symlinked directories keep their link path).
        Returns ``None`` on success, otherwise a transient error message with
        state left untouched.
        """
        target = Path(os.path.abspath(self.current_path / name))
        try:
            mode = os.stat(target).st_mode
        except OSError as exc:
            logger.debug("cannot enter %s: %s", target, exc)
            return DIRECTORY_NOT_FOUND_MESSAGE
        if not stat.S_ISDIR(mode):
            logger.debug("cannot enter %s: not a directory", target)
            return NOT_A_DIRECTORY_MESSAGE
        self.current_path = target
        self.selection_index = 0
        return None

    def activate(self) -> str | None:
        """Act on the selected entry (Enter).

        The parent row moves up one level, directories are entered, and files
        or error rows leave state unchanged. Returns a transient error message
        when entering a directory fails.
        """
        entry = self.selected_entry()
        if entry is None:
            return None
        if entry.is_parent:
            self.go_to_parent()
            return None
        if entry.is_dir:
            return self.enter_directory(entry.name)
        return None


__all__ = [
    "DIRECTORY_NOT_FOUND_MESSAGE",
    "NOT_A_DIRECTORY_MESSAGE",
    "NavigationState",
]
