"""Line-based edit buffer with a single cursor for the editor pane."""

from __future__ import annotations


class TextBuffer:
    """Lines split on ``\\n`` so ``text`` round-trips the loaded content exactly."""

    def __init__(self, text: str = "") -> None:
        self.lines: list[str] = text.split("\n")
        self.row = 0
        self.col = 0
        self.preferred_col = 0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.row]

    def set_text(self, text: str) -> None:
        self.lines = text.split("\n")
        self.row = 0
        self.col = 0
        self.preferred_col = 0

    def _clamp_col(self) -> None:
        self.col = max(0, min(self.preferred_col, len(self.current_line)))

    def insert(self, chars: str) -> None:
        if not chars:
            return
        if "\n" in chars:
            first, *rest = chars.split("\n")
            self.insert(first)
            for part in rest:
                self.newline()
                self.insert(part)
            return
        line = self.current_line
        self.lines[self.row] = line[: self.col] + chars + line[self.col :]
        self.col += len(chars)
        self.preferred_col = self.col

    def newline(self) -> None:
        line = self.current_line
        self.lines[self.row] = line[: self.col]
        self.lines.insert(self.row + 1, line[self.col :])
        self.row += 1
        self.col = 0
        self.preferred_col = 0

    def backspace(self) -> bool:
        if self.col > 0:
            line = self.current_line
            self.lines[self.row] = line[: self.col - 1] + line[self.col :]
            self.col -= 1
            self.preferred_col = self.col
            return True
        if self.row == 0:
            return False
        previous = self.lines[self.row - 1]
        self.lines[self.row - 1] = previous + self.lines.pop(self.row)
        self.row -= 1
        self.col = len(previous)
        self.preferred_col = self.col
        return True

    def delete(self) -> bool:
        line = self.current_line
        if self.col < len(line):
            self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
            return True
        if self.row + 1 >= len(self.lines):
            return False
        self.lines[self.row] = line + self.lines.pop(self.row + 1)
        return True

    def move_left(self) -> None:
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = len(self.current_line)
        self.preferred_col = self.col

    def move_right(self) -> None:
        if self.col < len(self.current_line):
            self.col += 1
        elif self.row + 1 < len(self.lines):
            self.row += 1
            self.col = 0
        self.preferred_col = self.col

    def move_vertical(self, delta: int) -> None:
        self.row = max(0, min(len(self.lines) - 1, self.row + delta))
        self._clamp_col()

    def move_home(self) -> None:
        self.col = 0
        self.preferred_col = 0

    def move_end(self) -> None:
        self.col = len(self.current_line)
        self.preferred_col = self.col
