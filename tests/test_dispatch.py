"""Tests for key-to-command dispatch."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from duopane.input import IGNORED, Command, InputDispatcher
from duopane.runtime.state import DIRECTORY_NOT_FOUND_MESSAGE, NavigationState


class InputDispatcherTests(unittest.TestCase):
    def test_recognized_tokens_map_to_commands(self) -> None:
        dispatcher = InputDispatcher(NavigationState(current_path=Path("/tmp")))
        expected = {
            "UP": Command.MOVE_UP,
            "DOWN": Command.MOVE_DOWN,
            "ENTER": Command.ACTIVATE,
            "h": Command.TOGGLE_HIDDEN,
            "H": Command.TOGGLE_HIDDEN,
            "q": Command.QUIT,
            "Q": Command.QUIT,
            "CTRL_C": Command.QUIT,
        }
        for key, command in expected.items():
            with self.subTest(key=key):
                self.assertEqual(dispatcher.command_for_key(key), command)

    def test_unrecognized_keys_are_ignored_without_state_change(self) -> None:
        state = NavigationState(current_path=Path("/tmp"), selection_index=0)
        dispatcher = InputDispatcher(state)

        for key in ("x", "LEFT", "ESC", " ", "j"):
            self.assertIs(dispatcher.handle_key(key), IGNORED)

        self.assertEqual(state.current_path, Path("/tmp"))
        self.assertFalse(state.show_hidden)

    def test_quit_is_reported(self) -> None:
        dispatcher = InputDispatcher(NavigationState(current_path=Path("/tmp")))
        result = dispatcher.handle_key("q")
        self.assertTrue(result.handled)
        self.assertTrue(result.quit)

    def test_moves_and_toggle_update_state(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("", encoding="utf-8")
            (root / ".b").write_text("", encoding="utf-8")
            state = NavigationState(current_path=root)
            dispatcher = InputDispatcher(state)

            self.assertTrue(dispatcher.handle_key("DOWN").handled)
            self.assertEqual(state.selection_index, 1)
            self.assertTrue(dispatcher.handle_key("UP").handled)
            self.assertEqual(state.selection_index, 0)
            dispatcher.handle_key("DOWN")
            dispatcher.handle_key("H")

        self.assertTrue(state.show_hidden)
        self.assertEqual(state.selection_index, 0)

    def test_enter_on_entry_replaced_by_file_only_redraws(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            state = NavigationState(current_path=root, selection_index=1)
            dispatcher = InputDispatcher(state)
            (root / "docs").rmdir()
            (root / "docs").write_text("now a file", encoding="utf-8")

            # Listing reclassifies "docs" as a file, so Enter is a no-op redraw.
            result = dispatcher.handle_key("ENTER")

        self.assertTrue(result.handled)
        self.assertIsNone(result.message)
        self.assertEqual(state.current_path, root)

    def test_activation_failure_message_is_propagated(self) -> None:
        state = NavigationState(current_path=Path("/tmp"))
        dispatcher = InputDispatcher(state)
        state.activate = lambda: DIRECTORY_NOT_FOUND_MESSAGE  # type: ignore[method-assign]

        result = dispatcher.handle_key("ENTER")

        self.assertTrue(result.handled)
        self.assertFalse(result.quit)
        self.assertEqual(result.message, DIRECTORY_NOT_FOUND_MESSAGE)


if __name__ == "__main__":
    unittest.main()
