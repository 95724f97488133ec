"""Directory listing model for the browser pane.

This package contains non-UI listing primitives:
- entry datatypes with kind-derived display labels
- synchronous, failure-tolerant directory enumeration
"""

from __future__ import annotations

from .fs import classify_path, enumerate_names, is_hidden, is_root, list_entries
from .types import (
    DIR_ICON,
    ERROR_ICON,
    FILE_ICON,
    HIDDEN_PREFIX,
    INACCESSIBLE_ICON,
    PARENT_ENTRY,
    PARENT_NAME,
    Entry,
    EntryKind,
    entry_label,
)

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
    "classify_path",
    "entry_label",
    "enumerate_names",
    "is_hidden",
    "is_root",
    "list_entries",
]
