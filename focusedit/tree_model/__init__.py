"""Tree-pane row model built on top of the directory child mapping."""

from __future__ import annotations

from .rows import BRANCH_COLLAPSED, BRANCH_EXPANDED, TreeRow, build_tree_rows, row_label, toggle_expanded

__all__ = [
    "BRANCH_COLLAPSED",
    "BRANCH_EXPANDED",
    "TreeRow",
    "build_tree_rows",
    "row_label",
    "toggle_expanded",
]
