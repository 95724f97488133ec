"""Domain datatypes for directory listing entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HIDDEN_PREFIX = "."
PARENT_NAME = ".."

DIR_ICON = "📁"
FILE_ICON = "📄"
INACCESSIBLE_ICON = "⚠️"
ERROR_ICON = "❌"


class EntryKind(Enum):
    """Classification of one navigable listing row."""

    DIRECTORY = "directory"
    FILE = "file"
    INACCESSIBLE = "inaccessible"
    ERROR = "error"


def entry_label(name: str, kind: EntryKind) -> str:
    """Derive the display label for ``name`` from its kind alone."""
    if kind is EntryKind.DIRECTORY:
        if name == PARENT_NAME:
            return f"{DIR_ICON} {PARENT_NAME} (parent directory)"
        return f"{DIR_ICON} {name}/"
    if kind is EntryKind.FILE:
        return f"{FILE_ICON} {name}"
    if kind is EntryKind.INACCESSIBLE:
        return f"{INACCESSIBLE_ICON}  {name}"
    return f"{ERROR_ICON} Error: {name}"


@dataclass(frozen=True)
class Entry:
    """One row of an EntryList.

    For ``EntryKind.ERROR`` rows ``name`` carries the enumeration error text.
    """

    name: str
    kind: EntryKind

    @property
    def label(self) -> str:
        return entry_label(self.name, self.kind)

    @property
    def is_parent(self) -> bool:
        return self.kind is EntryKind.DIRECTORY and self.name == PARENT_NAME

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


PARENT_ENTRY = Entry(name=PARENT_NAME, kind=EntryKind.DIRECTORY)


__all__ = [
    "DIR_ICON",
    "ERROR_ICON",
    "FILE_ICON",
    "HIDDEN_PREFIX",
    "INACCESSIBLE_ICON",
    "PARENT_ENTRY",
    "PARENT_NAME",
    "Entry",
    "EntryKind",
    "entry_label",
]
