"""Tests for the interactive main loop.

Keys are scripted through a patched ``read_key`` and frames are captured
through the injected ``render`` callable, so no real terminal is involved.
"""

from __future__ import annotations

import contextlib
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from duopane.runtime.loop import Presentation, compose_frame, run_main_loop
from duopane.runtime.state import DIRECTORY_NOT_FOUND_MESSAGE, NavigationState
from duopane.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


PRESENTATION = Presentation(theme=PLAIN_THEME, format_mtime=lambda _ts: "MTIME")


class RuntimeLoopTests(unittest.TestCase):
    def _run(self, state, keys, sizes=None):
        frames = []
        terminal = _FakeTerminal()
        size_iter = iter(sizes) if sizes is not None else None

        def get_size():
            return next(size_iter) if size_iter is not None else (80, 24)

        with mock.patch("duopane.runtime.loop.read_key", side_effect=keys):
            run_main_loop(
                state,
                terminal,
                0,
                PRESENTATION,
                get_terminal_size=get_size,
                render=frames.append,
            )
        return frames, terminal

    def test_quit_renders_once_and_restores_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            frames, terminal = self._run(NavigationState(current_path=Path(tmp)), ["q"])

        self.assertEqual(len(frames), 1)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_navigation_key_triggers_redraw(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("hello", encoding="utf-8")
            frames, _ = self._run(NavigationState(current_path=root), ["DOWN", "Q"])

        self.assertEqual([frame.selection_index for frame in frames], [0, 1])
        self.assertEqual(frames[1].preview.content, "hello")

    def test_ignored_keys_and_timeouts_do_not_redraw(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            frames, _ = self._run(NavigationState(current_path=Path(tmp)), ["", "x", "LEFT", "", "q"])

        self.assertEqual(len(frames), 1)

    def test_cr_lf_pair_activates_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            state = NavigationState(current_path=root)
            frames, _ = self._run(state, ["DOWN", "ENTER_CR", "ENTER_LF", "q"])

        self.assertEqual(state.current_path, root / "docs")
        self.assertEqual(len(frames), 3)

    def test_lone_lf_activates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            child = Path(tmp) / "child"
            child.mkdir()
            state = NavigationState(current_path=child)
            self._run(state, ["ENTER_LF", "q"])

        self.assertEqual(state.current_path, Path(tmp))

    def test_resize_triggers_redraw_with_new_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            frames, _ = self._run(
                NavigationState(current_path=Path(tmp)),
                ["", "q"],
                sizes=[(80, 24), (120, 40)],
            )

        self.assertEqual([(frame.width, frame.height) for frame in frames], [(80, 24), (120, 40)])

    def test_transient_message_is_shown_then_expires(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            state = NavigationState(current_path=Path(tmp))
            with mock.patch.object(state, "activate", return_value=DIRECTORY_NOT_FOUND_MESSAGE), mock.patch(
                "duopane.runtime.loop.time"
            ) as time_mock:
                time_mock.monotonic.side_effect = [0.0, 0.5, 1.5]
                frames, _ = self._run(state, ["ENTER", "", "q"])

        self.assertEqual(
            [frame.message for frame in frames],
            [None, DIRECTORY_NOT_FOUND_MESSAGE, None],
        )

    def test_keyboard_interrupt_exits_cleanly(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            frames, terminal = self._run(NavigationState(current_path=Path(tmp)), KeyboardInterrupt())

        self.assertEqual(len(frames), 1)
        self.assertEqual(terminal.exited, 1)

    def test_render_failure_still_restores_terminal(self) -> None:
        terminal = _FakeTerminal()
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("duopane.runtime.loop.read_key", return_value="q"):
                with self.assertRaises(RuntimeError):
                    run_main_loop(
                        NavigationState(current_path=Path(tmp)),
                        terminal,
                        0,
                        PRESENTATION,
                        get_terminal_size=lambda: (80, 24),
                        render=mock.Mock(side_effect=RuntimeError("boom")),
                    )

        self.assertEqual(terminal.exited, 1)


class ComposeFrameTests(unittest.TestCase):
    def test_frame_reflects_state_and_presentation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("hi", encoding="utf-8")
            state = NavigationState(current_path=root, selection_index=1, show_hidden=True)

            frame = compose_frame(state, 90, 20, PRESENTATION, message="note")

        self.assertEqual(frame.current_path, root)
        self.assertEqual(frame.selection_index, 1)
        self.assertTrue(frame.show_hidden)
        self.assertEqual(frame.preview.text, "📄 File: a.txt\nSize: 2 bytes\nModified: MTIME\n\nhi")
        self.assertEqual((frame.width, frame.height, frame.message), (90, 20, "note"))
        self.assertIs(frame.theme, PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
