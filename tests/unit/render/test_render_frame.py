"""Frame composition tests for the split tree/editor screen."""

from __future__ import annotations

import unittest

from focusedit.ansi import strip_ansi
from focusedit.document import Document, EditorSession
from focusedit.file_tree_model import ChildMapping
from focusedit.render import (
    clamp_left_width,
    highlighted_lines,
    initial_left_width,
    render_frame,
    render_status,
    scroll_into_view,
)
from focusedit.state import FOCUS_EDITOR, AppState
from focusedit.text_buffer import TextBuffer
from focusedit.tree_model import build_tree_rows
from focusedit.ui_theme import PLAIN_THEME, resolve_theme


def _state(text: str = "", path: str = "/r/main.go") -> AppState:
    mapping = ChildMapping(root="/r", children={"/r": ["/r/main.go", "/r/sub"], "/r/sub": []})
    expanded = {"/r"}
    session = EditorSession(autosave_delay=1.0)
    state = AppState(
        tree_root="/r",
        mapping=mapping,
        expanded=expanded,
        tree_rows=build_tree_rows(mapping, expanded),
        session=session,
        left_width=16,
        right_width=23,
        content_rows=4,
    )
    if text:
        session.document = Document(path=path, text=text, saved_text=text)
        state.buffer = TextBuffer(text)
        state.focus = FOCUS_EDITOR
    return state


class PaneWidthTests(unittest.TestCase):
    def test_clamp_keeps_room_for_editor(self) -> None:
        self.assertEqual(clamp_left_width(100, 5), 12)
        self.assertEqual(clamp_left_width(100, 90), 79)
        self.assertEqual(clamp_left_width(100, 40), 40)

    def test_initial_width_uses_saved_percent(self) -> None:
        self.assertEqual(initial_left_width(100, None), 25)
        self.assertEqual(initial_left_width(100, 40.0), 40)


class RenderFrameTests(unittest.TestCase):
    def test_frame_has_content_rows_plus_status(self) -> None:
        state = _state()
        frame, cursor = render_frame(state, PLAIN_THEME, 40, no_color=True)
        rows = frame.split("\r\n")

        self.assertEqual(len(rows), 5)
        self.assertIsNone(cursor)
        self.assertTrue(rows[0].startswith("▾ /r"))
        self.assertTrue(strip_ansi(rows[1]).startswith("    main.go"))
        self.assertTrue(strip_ansi(rows[2]).startswith("    sub"))
        self.assertEqual(rows[-1].strip(), "focusedit")
        self.assertEqual(len(rows[-1]), 40)

    def test_editor_lines_and_cursor_position(self) -> None:
        state = _state("package main\n\tx := 1\n")
        state.buffer.move_vertical(1)
        state.buffer.move_end()

        frame, cursor = render_frame(state, PLAIN_THEME, 40, no_color=True)
        rows = [strip_ansi(row) for row in frame.split("\r\n")]

        self.assertIn("│package main", rows[0])
        # The tab expands to the next 8-column stop.
        self.assertIn("│        x := 1", rows[1])
        self.assertEqual(cursor, (2, 16 + 2 + 14))
        self.assertIn("/r/main.go", rows[-1])
        self.assertIn("2:8", rows[-1])

    def test_dirty_marker_and_status_message(self) -> None:
        state = _state("a\n")
        state.session.edit("b\n", now=1.0)
        self.assertIn("[+]", render_status(state, PLAIN_THEME, 60))

        state.status_message = "Saved"
        status = render_status(state, PLAIN_THEME, 60)
        self.assertIn("Saved", status)
        self.assertNotIn("1:1", status)

    def test_long_line_scrolls_horizontally_with_cursor(self) -> None:
        state = _state("x" * 60 + "\n")
        state.buffer.move_end()

        scroll_into_view(state)

        self.assertEqual(state.editor_left, 60 - state.right_width + 1)

    def test_vertical_scroll_follows_cursor(self) -> None:
        state = _state("\n".join(str(i) for i in range(20)))
        state.buffer.move_vertical(10)

        frame, cursor = render_frame(state, PLAIN_THEME, 40, no_color=True)

        self.assertEqual(state.editor_top, 7)
        self.assertEqual(cursor, (4, 16 + 2))
        self.assertIn("│10", strip_ansi(frame.split("\r\n")[3]))

    def test_syntax_colors_reach_the_editor_pane(self) -> None:
        state = _state('{"ok": true}\n', path="/r/data.json")
        frame, _cursor = render_frame(state, resolve_theme("default"), 60)
        self.assertIn("38;2;255;165;0", frame)

    def test_highlight_cache_tracks_buffer_text(self) -> None:
        state = _state("var a\n")
        first = highlighted_lines(state, no_color=True)
        self.assertIs(highlighted_lines(state, no_color=True), first)
        state.buffer.insert("x")
        self.assertEqual(highlighted_lines(state, no_color=True)[0], "xvar a")

    def test_carriage_returns_are_not_drawn(self) -> None:
        state = _state("a\r\nb\r\n", path="/r/notes.txt")
        lines = highlighted_lines(state, no_color=True)
        self.assertEqual(lines, ["a", "b", ""])


if __name__ == "__main__":
    unittest.main()
