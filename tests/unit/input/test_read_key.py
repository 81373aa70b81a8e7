"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and editing sequences, control keys, and
multi-byte UTF-8 text.
"""

from __future__ import annotations

import os
import time
import unittest

from focusedit import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [input_mod.read_key(self.read_fd, timeout_ms=20) for _ in range(count)]

    def test_timeout_without_input_returns_empty(self) -> None:
        self.assertEqual(input_mod.read_key(self.read_fd, timeout_ms=0), "")

    def test_single_escape_returns_without_second_keypress(self) -> None:
        os.write(self.write_fd, b"\x1b")
        started = time.monotonic()
        key = input_mod.read_key(self.read_fd, timeout_ms=20)
        self.assertEqual(key, "ESC")
        self.assertLess(time.monotonic() - started, 0.2)

    def test_escape_does_not_swallow_following_key(self) -> None:
        self.assertEqual(self._keys(b"\x1ba", 2), ["ESC", "a"])

    def test_arrow_and_ss3_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1bOC\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_tilde_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[3~\x1b[5~\x1b[6~\x1b[1~\x1b[4~", 5),
            ["DELETE", "PAGE_UP", "PAGE_DOWN", "HOME", "END"],
        )

    def test_modified_arrow_maps_to_plain_arrow(self) -> None:
        self.assertEqual(self._keys(b"\x1b[1;5C", 1), ["RIGHT"])

    def test_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"\x11\x13\x12\t\x7f\r\x01", 7),
            ["CTRL_Q", "CTRL_S", "CTRL_R", "TAB", "BACKSPACE", "ENTER", "CTRL_A"],
        )

    def test_multibyte_utf8_is_one_key(self) -> None:
        self.assertEqual(self._keys("é漢".encode("utf-8"), 2), ["é", "漢"])


if __name__ == "__main__":
    unittest.main()
