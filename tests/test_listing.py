"""Tests for directory enumeration, hidden-file policy, and classification."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from duopane.listing import (
    PARENT_ENTRY,
    Entry,
    EntryKind,
    entry_label,
    is_root,
    list_entries,
)


def _names(entries: list[Entry]) -> list[str]:
    return [entry.name for entry in entries]


class EntryLabelTests(unittest.TestCase):
    def test_labels_are_derived_from_name_and_kind(self) -> None:
        self.assertEqual(entry_label("docs", EntryKind.DIRECTORY), "📁 docs/")
        self.assertEqual(entry_label("a.txt", EntryKind.FILE), "📄 a.txt")
        self.assertEqual(entry_label("gone", EntryKind.INACCESSIBLE), "⚠️  gone")
        self.assertEqual(PARENT_ENTRY.label, "📁 .. (parent directory)")
        self.assertEqual(Entry("docs", EntryKind.DIRECTORY).label, entry_label("docs", EntryKind.DIRECTORY))

    def test_parent_entry_flags(self) -> None:
        self.assertTrue(PARENT_ENTRY.is_parent)
        self.assertTrue(PARENT_ENTRY.is_dir)
        self.assertFalse(Entry("docs", EntryKind.DIRECTORY).is_parent)


class ListEntriesTests(unittest.TestCase):
    def test_hidden_entries_follow_show_hidden_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / ".secret").write_text("s", encoding="utf-8")
            (root / "a.txt").write_text("hello", encoding="utf-8")

            hidden_off = list_entries(root, show_hidden=False)
            hidden_on = list_entries(root, show_hidden=True)

        self.assertNotIn(".secret", _names(hidden_off))
        self.assertIn(".secret", _names(hidden_on))
        self.assertTrue(all(not name.startswith(".") for name in _names(hidden_off)[1:]))

    def test_order_follows_enumeration_with_parent_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta", "alpha", "Mid"):
                (root / name).write_text(name, encoding="utf-8")
            expected = [name for name in os.listdir(root)]

            entries = list_entries(root, show_hidden=True)

        self.assertEqual(entries[0], PARENT_ENTRY)
        self.assertEqual(_names(entries)[1:], expected)

    def test_scenario_home_listing_with_and_without_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / ".secret").write_text("s", encoding="utf-8")
            (root / "a.txt").write_text("hello", encoding="utf-8")

            with mock.patch(
                "duopane.listing.fs.enumerate_names",
                return_value=["docs", ".secret", "a.txt"],
            ):
                hidden_off = list_entries(root, show_hidden=False)
                hidden_on = list_entries(root, show_hidden=True)

        self.assertEqual(_names(hidden_off), ["..", "docs", "a.txt"])
        self.assertEqual(_names(hidden_on), ["..", "docs", ".secret", "a.txt"])
        self.assertEqual(hidden_off[1].kind, EntryKind.DIRECTORY)
        self.assertEqual(hidden_off[2].kind, EntryKind.FILE)

    def test_broken_symlink_is_marked_inaccessible_without_aborting(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "ok.txt").write_text("ok", encoding="utf-8")
            os.symlink(root / "missing-target", root / "dangling")

            entries = list_entries(root, show_hidden=False)

        kinds = {entry.name: entry.kind for entry in entries}
        self.assertEqual(kinds["dangling"], EntryKind.INACCESSIBLE)
        self.assertEqual(kinds["ok.txt"], EntryKind.FILE)

    def test_symlink_to_directory_is_classified_as_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "real").mkdir()
            os.symlink(root / "real", root / "link")

            entries = list_entries(root, show_hidden=False)

        kinds = {entry.name: entry.kind for entry in entries}
        self.assertEqual(kinds["link"], EntryKind.DIRECTORY)

    def test_enumeration_failure_returns_single_error_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"

            entries = list_entries(missing, show_hidden=False)

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].kind, EntryKind.ERROR)
        self.assertIn("nope", entries[0].name)
        self.assertTrue(entries[0].label.startswith("❌ Error: "))

    def test_root_directory_has_no_parent_entry(self) -> None:
        root = Path(Path.cwd().anchor)
        self.assertTrue(is_root(root))
        with mock.patch("duopane.listing.fs.enumerate_names", return_value=[]):
            self.assertEqual(list_entries(root, show_hidden=False), [])

    def test_empty_non_root_directory_lists_only_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            entries = list_entries(Path(tmp), show_hidden=True)

        self.assertEqual(entries, [PARENT_ENTRY])


if __name__ == "__main__":
    unittest.main()
