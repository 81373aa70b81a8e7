"""Frame composition for the split tree/editor screen.

A frame is ``content_rows`` rows of ``tree | editor`` followed by one status
row. Rendering is pure: it reads ``AppState`` and returns the frame text plus
the terminal cursor position.
"""

from __future__ import annotations

from .ansi import char_display_width, pad_to_width, slice_ansi_line
from .highlight import highlight_ansi
from .state import FOCUS_EDITOR, FOCUS_TREE, AppState
from .tree_model import row_label
from .ui_theme import UITheme

APP_TITLE = "focusedit"
DIVIDER = "│"
MIN_LEFT_WIDTH = 12
MIN_RIGHT_WIDTH = 20
DEFAULT_LEFT_PERCENT = 25.0


def clamp_left_width(columns: int, left_width: int) -> int:
    upper = max(1, columns - MIN_RIGHT_WIDTH - 1)
    lower = min(MIN_LEFT_WIDTH, upper)
    return max(lower, min(upper, left_width))


def initial_left_width(columns: int, percent: float | None) -> int:
    ratio = (percent if percent is not None else DEFAULT_LEFT_PERCENT) / 100.0
    return clamp_left_width(columns, int(columns * ratio))


def highlighted_lines(state: AppState, no_color: bool) -> list[str]:
    """Return ANSI editor lines for the buffer, cached on the buffer text."""
    document = state.session.document
    if document is None:
        return []
    text = state.buffer.text
    key = (document.extension, text)
    if state.highlighted_key != key:
        # Carriage returns would move the terminal cursor; they are not drawn.
        display_text = text.replace("\r", "")
        state.highlighted_lines = highlight_ansi(display_text, document.extension, no_color=no_color).split("\n")
        state.highlighted_key = key
    return state.highlighted_lines


def _cursor_column(line: str, col: int) -> int:
    width = 0
    for ch in line[:col].replace("\r", ""):
        width += char_display_width(ch, width)
    return width


def scroll_into_view(state: AppState) -> None:
    """Adjust tree and editor viewports so the selection and cursor are visible."""
    rows = max(1, state.content_rows)
    if state.selected_idx < state.tree_start:
        state.tree_start = state.selected_idx
    elif state.selected_idx >= state.tree_start + rows:
        state.tree_start = state.selected_idx - rows + 1
    state.tree_start = max(0, min(state.tree_start, max(0, len(state.tree_rows) - rows)))

    buffer = state.buffer
    if buffer.row < state.editor_top:
        state.editor_top = buffer.row
    elif buffer.row >= state.editor_top + rows:
        state.editor_top = buffer.row - rows + 1
    cursor_x = _cursor_column(buffer.current_line, buffer.col)
    width = max(1, state.right_width)
    if cursor_x < state.editor_left:
        state.editor_left = cursor_x
    elif cursor_x >= state.editor_left + width:
        state.editor_left = cursor_x - width + 1


def _tree_row_text(state: AppState, idx: int, theme: UITheme) -> str:
    if idx >= len(state.tree_rows):
        return " " * state.left_width
    row = state.tree_rows[idx]
    label = "  " * row.depth + row_label(row)
    color = theme.tree_dir if row.path in state.mapping else theme.tree_file
    if idx == state.selected_idx:
        if state.focus == FOCUS_TREE:
            return f"{theme.reverse}{pad_to_width(label, state.left_width)}{theme.reset}"
        color = theme.tree_focus_marker
    return f"{color}{pad_to_width(label, state.left_width)}{theme.reset}"


def _editor_row_text(lines: list[str], idx: int, state: AppState, theme: UITheme) -> str:
    if idx >= len(lines):
        return ""
    visible = slice_ansi_line(lines[idx], state.editor_left, state.right_width)
    return f"{visible}{theme.reset}" if visible else ""


def render_status(state: AppState, theme: UITheme, columns: int) -> str:
    document = state.session.document
    title = document.path if document is not None else APP_TITLE
    marker = " [+]" if state.session.pending() else ""
    left = f" {title}{marker}"
    if state.status_message:
        color = theme.status_error if state.status_is_error else theme.status_ok
        left = f"{left}  {color}{state.status_message}{theme.reset}"
    elif document is not None and state.focus == FOCUS_EDITOR:
        position = f"  {state.buffer.row + 1}:{state.buffer.col + 1}"
        left = f"{left}{theme.status_dirty if marker else ''}{position}{theme.reset}"
    return pad_to_width(left, columns)


def render_frame(state: AppState, theme: UITheme, columns: int, no_color: bool = False) -> tuple[str, tuple[int, int] | None]:
    """Compose one full frame and the 1-based cursor position for the editor."""
    scroll_into_view(state)
    lines = highlighted_lines(state, no_color)
    out: list[str] = []
    for screen_row in range(state.content_rows):
        tree_part = _tree_row_text(state, state.tree_start + screen_row, theme)
        editor_part = _editor_row_text(lines, state.editor_top + screen_row, state, theme)
        out.append(f"{tree_part}{theme.divider}{DIVIDER}{theme.reset}{editor_part}\x1b[K\r\n")
    out.append(render_status(state, theme, columns))

    cursor: tuple[int, int] | None = None
    if state.focus == FOCUS_EDITOR and state.session.document is not None:
        buffer = state.buffer
        cursor_x = _cursor_column(buffer.current_line, buffer.col) - state.editor_left
        cursor = (buffer.row - state.editor_top + 1, state.left_width + 2 + cursor_x)
    return "".join(out), cursor


__all__ = [
    "APP_TITLE",
    "clamp_left_width",
    "highlighted_lines",
    "initial_left_width",
    "render_frame",
    "render_status",
    "scroll_into_view",
]
