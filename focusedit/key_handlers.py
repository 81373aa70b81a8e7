"""Key dispatch for the tree pane, the editor pane, and global shortcuts.

Handlers mutate ``AppState`` in place and mark it dirty when a redraw is
needed. Filesystem failures end up in the status row, never as exceptions.
"""

from __future__ import annotations

import logging
import os
import stat

from . import config
from .file_tree_model import project_directory
from .render import clamp_left_width
from .state import FOCUS_EDITOR, FOCUS_TREE, AppState
from .tree_model import build_tree_rows, toggle_expanded

logger = logging.getLogger(__name__)

STATUS_SECONDS = 4.0
ERROR_STATUS_SECONDS = 8.0
PANE_WIDTH_STEP = 2


def set_status(state: AppState, message: str, now: float, *, error: bool = False) -> None:
    state.status_message = message
    state.status_is_error = error
    state.status_message_until = now + (ERROR_STATUS_SECONDS if error else STATUS_SECONDS)
    state.dirty = True


def rebuild_tree_rows(state: AppState) -> None:
    selected = state.tree_rows[state.selected_idx].path if state.tree_rows else None
    state.tree_rows = build_tree_rows(state.mapping, state.expanded)
    state.selected_idx = 0
    if selected is not None:
        for idx, row in enumerate(state.tree_rows):
            if row.path == selected:
                state.selected_idx = idx
                break
    state.dirty = True


def reload_tree(state: AppState, now: float) -> bool:
    """Re-project the tree root wholesale; keep the old mapping on failure."""
    try:
        root, mapping = project_directory(state.tree_root)
    except OSError as exc:
        logger.warning("cannot reload %s: %s", state.tree_root, exc)
        set_status(state, f"Cannot reload {state.tree_root}: {exc.strerror or exc}", now, error=True)
        return False
    state.tree_root = root
    state.mapping = mapping
    state.expanded = {node for node in state.expanded if node in mapping}
    state.expanded.add(root)
    rebuild_tree_rows(state)
    set_status(state, "Tree reloaded", now)
    return True


def open_path(state: AppState, path: str, now: float) -> bool:
    """Open ``path`` into the editor pane. Errors leave the current document untouched."""
    error = state.session.open(path)
    if error is not None:
        set_status(state, error, now, error=True)
        return False
    document = state.session.document
    if document is None:
        return False
    state.buffer.set_text(document.text)
    state.editor_top = 0
    state.editor_left = 0
    state.focus = FOCUS_EDITOR
    state.dirty = True
    return True


def activate_selection(state: AppState, now: float) -> bool:
    if not state.tree_rows:
        return False
    row = state.tree_rows[state.selected_idx]
    try:
        mode = os.stat(row.path).st_mode
    except OSError as exc:
        set_status(state, f"Cannot open {row.path}: {exc.strerror or exc}", now, error=True)
        return False
    if stat.S_ISDIR(mode):
        if toggle_expanded(state.expanded, row.path, state.mapping):
            rebuild_tree_rows(state)
            return True
        return False
    return open_path(state, row.path, now)


def move_tree_selection(state: AppState, delta: int) -> bool:
    if not state.tree_rows:
        return False
    target = max(0, min(len(state.tree_rows) - 1, state.selected_idx + delta))
    if target == state.selected_idx:
        return False
    state.selected_idx = target
    state.dirty = True
    return True


def collapse_or_parent(state: AppState) -> bool:
    row = state.tree_rows[state.selected_idx]
    if row.expanded:
        toggle_expanded(state.expanded, row.path, state.mapping)
        rebuild_tree_rows(state)
        return True
    parent = os.path.dirname(row.path)
    for idx, candidate in enumerate(state.tree_rows):
        if candidate.path == parent:
            state.selected_idx = idx
            state.dirty = True
            return True
    return False


def adjust_left_pane_width(state: AppState, delta: int) -> bool:
    """Resize the tree pane and persist the new width as a percentage."""
    columns = state.left_width + state.right_width + 1
    left_width = clamp_left_width(columns, state.left_width + delta)
    if left_width == state.left_width:
        return False
    state.left_width = left_width
    state.right_width = max(1, columns - left_width - 1)
    config.save_left_pane_percent(columns, left_width)
    state.dirty = True
    return True


def handle_tree_key(key: str, state: AppState, now: float) -> bool:
    if key == "<":
        return adjust_left_pane_width(state, -PANE_WIDTH_STEP)
    if key == ">":
        return adjust_left_pane_width(state, PANE_WIDTH_STEP)
    if key == "UP":
        return move_tree_selection(state, -1)
    if key == "DOWN":
        return move_tree_selection(state, 1)
    if key == "PAGE_UP":
        return move_tree_selection(state, -state.content_rows)
    if key == "PAGE_DOWN":
        return move_tree_selection(state, state.content_rows)
    if key == "HOME":
        return move_tree_selection(state, -len(state.tree_rows))
    if key == "END":
        return move_tree_selection(state, len(state.tree_rows))
    if key in {"ENTER", "RIGHT"}:
        row = state.tree_rows[state.selected_idx] if state.tree_rows else None
        if key == "RIGHT" and row is not None and row.expanded:
            return move_tree_selection(state, 1)
        return activate_selection(state, now)
    if key == "LEFT":
        return collapse_or_parent(state)
    return False


def _after_edit(state: AppState, now: float) -> None:
    state.session.edit(state.buffer.text, now)
    state.dirty = True


def handle_editor_key(key: str, state: AppState, now: float) -> bool:
    if state.session.document is None:
        return False
    buffer = state.buffer
    if key == "LEFT":
        buffer.move_left()
    elif key == "RIGHT":
        buffer.move_right()
    elif key == "UP":
        buffer.move_vertical(-1)
    elif key == "DOWN":
        buffer.move_vertical(1)
    elif key == "PAGE_UP":
        buffer.move_vertical(-state.content_rows)
    elif key == "PAGE_DOWN":
        buffer.move_vertical(state.content_rows)
    elif key == "HOME":
        buffer.move_home()
    elif key == "END":
        buffer.move_end()
    elif key == "ENTER":
        buffer.newline()
        _after_edit(state, now)
    elif key == "TAB":
        buffer.insert("\t")
        _after_edit(state, now)
    elif key == "BACKSPACE":
        if buffer.backspace():
            _after_edit(state, now)
    elif key == "DELETE":
        if buffer.delete():
            _after_edit(state, now)
    elif len(key) == 1 and key.isprintable():
        buffer.insert(key)
        _after_edit(state, now)
    else:
        return False
    state.dirty = True
    return True


def save_now(state: AppState, now: float) -> bool:
    if state.session.document is None:
        return False
    error = state.session.flush()
    if error is not None:
        set_status(state, error, now, error=True)
        return False
    set_status(state, f"Saved {state.session.title}", now)
    return True


def request_quit(state: AppState, now: float) -> None:
    """Flush and quit; a failed flush needs a second Ctrl-Q to discard."""
    if state.quit_armed:
        state.quit_requested = True
        return
    error = state.session.flush()
    if error is None:
        state.quit_requested = True
        return
    state.quit_armed = True
    set_status(state, f"{error} (Ctrl-Q again to quit without saving)", now, error=True)


def handle_key(key: str, state: AppState, now: float) -> bool:
    """Dispatch one key token. Returns whether anything changed."""
    if key != "CTRL_Q":
        state.quit_armed = False
    if key == "CTRL_Q":
        request_quit(state, now)
        return True
    if key == "CTRL_S":
        return save_now(state, now)
    if key == "CTRL_R":
        return reload_tree(state, now)
    if key == "TAB" and state.focus == FOCUS_TREE:
        if state.session.document is None:
            return False
        state.focus = FOCUS_EDITOR
        state.dirty = True
        return True
    if key == "ESC":
        if state.focus == FOCUS_EDITOR:
            state.focus = FOCUS_TREE
            state.dirty = True
            return True
        return False
    if state.focus == FOCUS_TREE:
        return handle_tree_key(key, state, now)
    return handle_editor_key(key, state, now)
