"""Interactive editor bootstrap and main event loop.

Everything runs on one thread: the loop draws when state is dirty, waits for
a key with a timeout bounded by the next autosave/status deadline, and
dispatches it. Autosaves are debounced through ``EditorSession``.
"""

from __future__ import annotations

import logging
import shutil
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from . import config
from .document import DEFAULT_AUTOSAVE_DELAY, EditorSession
from .file_tree_model import ChildMapping
from .input import read_key
from .key_handlers import handle_key, open_path, set_status
from .render import clamp_left_width, initial_left_width, render_frame
from .state import AppState
from .terminal import TerminalController
from .tree_model import build_tree_rows
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)

IDLE_TIMEOUT_MS = 250


@dataclass(frozen=True)
class RuntimeLoopDeps:
    """Injected IO used by ``run_main_loop`` so tests can drive it without a tty."""

    read_key: Callable[[int, int | None], str]
    clock: Callable[[], float]
    terminal_size: Callable[[], tuple[int, int]]


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size((80, 24))
    return size.columns, size.lines


DEFAULT_DEPS = RuntimeLoopDeps(read_key=read_key, clock=time.monotonic, terminal_size=_terminal_size)


def build_state(
    tree_root: str,
    mapping: ChildMapping,
    autosave_delay: float = DEFAULT_AUTOSAVE_DELAY,
) -> AppState:
    expanded = {tree_root}
    return AppState(
        tree_root=tree_root,
        mapping=mapping,
        expanded=expanded,
        tree_rows=build_tree_rows(mapping, expanded),
        session=EditorSession(autosave_delay),
    )


def _next_timeout_ms(state: AppState, now: float) -> int:
    deadlines = [now + IDLE_TIMEOUT_MS / 1000.0]
    flush_at = state.session.next_flush_at()
    if flush_at is not None:
        deadlines.append(flush_at)
    if state.status_message:
        deadlines.append(state.status_message_until)
    return max(0, int((min(deadlines) - now) * 1000))


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    theme_name: str | None = None,
    no_color: bool = False,
    deps: RuntimeLoopDeps = DEFAULT_DEPS,
) -> None:
    """Run the interactive loop until a quit is requested."""
    theme = resolve_theme(theme_name, no_color=no_color)
    last_columns = -1

    with terminal.raw_mode():
        while not state.quit_requested:
            columns, lines = deps.terminal_size()
            now = deps.clock()

            if columns != last_columns:
                state.left_width = clamp_left_width(columns, state.left_width)
                last_columns = columns
                state.dirty = True
            state.right_width = max(1, columns - state.left_width - 1)
            content_rows = max(1, lines - 1)
            if content_rows != state.content_rows:
                state.content_rows = content_rows
                state.dirty = True

            if state.status_message and now >= state.status_message_until:
                state.status_message = ""
                state.dirty = True

            was_pending = state.session.pending()
            flush_error = state.session.flush_if_due(now)
            if flush_error is not None:
                set_status(state, flush_error, now, error=True)
            elif was_pending and not state.session.pending():
                state.dirty = True

            if state.dirty:
                frame, cursor = render_frame(state, theme, columns, no_color=no_color)
                terminal.write_frame(frame, cursor)
                state.dirty = False

            key = deps.read_key(stdin_fd, _next_timeout_ms(state, now))
            if not key:
                continue
            handle_key(key, state, deps.clock())


def run_editor(
    tree_root: str,
    mapping: ChildMapping,
    initial_file: str | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    autosave_delay: float | None = None,
) -> None:
    """Launch the terminal editor over an already-built projection."""
    if autosave_delay is None:
        autosave_delay = config.load_autosave_delay()
    if autosave_delay is None:
        autosave_delay = DEFAULT_AUTOSAVE_DELAY
    if theme_name is None:
        theme_name = config.load_theme_name()

    state = build_state(tree_root, mapping, autosave_delay)
    columns, _lines = _terminal_size()
    state.left_width = initial_left_width(columns, config.load_left_pane_percent())
    if initial_file is not None:
        open_path(state, initial_file, time.monotonic())

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    logger.info("editing %s", tree_root)
    try:
        run_main_loop(state, terminal, stdin_fd, theme_name, no_color)
    finally:
        if not state.quit_armed:
            error = state.session.flush()
            if error is not None:
                logger.error("unsaved changes lost: %s", error)
