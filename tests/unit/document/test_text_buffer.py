from __future__ import annotations

import unittest

from focusedit.text_buffer import TextBuffer


class TextBufferTests(unittest.TestCase):
    def test_text_round_trips_trailing_newline_and_crlf(self) -> None:
        source = "a\r\nb\n\n"
        buffer = TextBuffer(source)
        self.assertEqual(buffer.text, source)
        self.assertEqual(buffer.lines, ["a\r", "b", "", ""])

    def test_insert_and_newline_split_the_line(self) -> None:
        buffer = TextBuffer("hello world")
        buffer.col = 5
        buffer.newline()
        buffer.insert("!")
        self.assertEqual(buffer.text, "hello\n! world")
        self.assertEqual((buffer.row, buffer.col), (1, 1))

    def test_insert_with_embedded_newlines(self) -> None:
        buffer = TextBuffer("ab")
        buffer.col = 1
        buffer.insert("1\n2\n3")
        self.assertEqual(buffer.text, "a1\n2\n3b")
        self.assertEqual((buffer.row, buffer.col), (2, 1))

    def test_backspace_joins_with_previous_line(self) -> None:
        buffer = TextBuffer("ab\ncd")
        buffer.row = 1
        buffer.col = 0
        self.assertTrue(buffer.backspace())
        self.assertEqual(buffer.text, "abcd")
        self.assertEqual((buffer.row, buffer.col), (0, 2))

    def test_backspace_at_start_of_buffer_is_noop(self) -> None:
        buffer = TextBuffer("ab")
        self.assertFalse(buffer.backspace())
        self.assertEqual(buffer.text, "ab")

    def test_delete_joins_with_next_line(self) -> None:
        buffer = TextBuffer("ab\ncd")
        buffer.move_end()
        self.assertTrue(buffer.delete())
        self.assertEqual(buffer.text, "abcd")
        buffer.move_end()
        self.assertFalse(buffer.delete())

    def test_vertical_motion_remembers_preferred_column(self) -> None:
        buffer = TextBuffer("long line\nx\nanother line")
        buffer.move_end()
        buffer.move_vertical(1)
        self.assertEqual((buffer.row, buffer.col), (1, 1))
        buffer.move_vertical(1)
        self.assertEqual((buffer.row, buffer.col), (2, 9))
        buffer.move_vertical(10)
        self.assertEqual(buffer.row, 2)
        buffer.move_vertical(-10)
        self.assertEqual(buffer.row, 0)

    def test_horizontal_motion_wraps_across_lines(self) -> None:
        buffer = TextBuffer("ab\ncd")
        buffer.move_end()
        buffer.move_right()
        self.assertEqual((buffer.row, buffer.col), (1, 0))
        buffer.move_left()
        self.assertEqual((buffer.row, buffer.col), (0, 2))
        buffer.move_home()
        buffer.move_left()
        self.assertEqual((buffer.row, buffer.col), (0, 0))

    def test_set_text_resets_cursor(self) -> None:
        buffer = TextBuffer("abc\ndef")
        buffer.move_vertical(1)
        buffer.move_end()
        buffer.set_text("new")
        self.assertEqual((buffer.row, buffer.col, buffer.text), (0, 0, "new"))


if __name__ == "__main__":
    unittest.main()
