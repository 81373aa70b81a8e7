from __future__ import annotations

from dataclasses import dataclass, field

from .document import EditorSession
from .file_tree_model import ChildMapping
from .text_buffer import TextBuffer
from .tree_model import TreeRow

FOCUS_TREE = "tree"
FOCUS_EDITOR = "editor"


@dataclass
class AppState:
    tree_root: str
    mapping: ChildMapping
    expanded: set[str]
    tree_rows: list[TreeRow]
    session: EditorSession
    buffer: TextBuffer = field(default_factory=TextBuffer)
    focus: str = FOCUS_TREE
    selected_idx: int = 0
    tree_start: int = 0
    editor_top: int = 0
    editor_left: int = 0
    left_width: int = 30
    right_width: int = 50
    content_rows: int = 23
    status_message: str = ""
    status_is_error: bool = False
    status_message_until: float = 0.0
    quit_armed: bool = False
    quit_requested: bool = False
    dirty: bool = True
    highlighted_key: tuple[str, str] | None = None
    highlighted_lines: list[str] = field(default_factory=list)
