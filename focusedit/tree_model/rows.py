"""Flatten a child mapping into the visible rows of the tree pane."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..file_tree_model import ChildMapping

BRANCH_COLLAPSED = "▸"
BRANCH_EXPANDED = "▾"


@dataclass(frozen=True)
class TreeRow:
    """One rendered row in the tree pane."""

    path: str
    depth: int
    is_branch: bool
    expanded: bool = False


def build_tree_rows(mapping: ChildMapping, expanded: set[str]) -> list[TreeRow]:
    """Build visible rows depth-first, descending only into expanded branches."""
    rows: list[TreeRow] = []

    def walk(node: str, depth: int) -> None:
        is_branch = mapping.is_branch(node)
        is_open = is_branch and node in expanded
        rows.append(TreeRow(node, depth, is_branch, is_open))
        if not is_open:
            return
        for child in mapping.children_of(node):
            walk(child, depth + 1)

    walk(mapping.root, 0)
    return rows


def toggle_expanded(expanded: set[str], node: str, mapping: ChildMapping) -> bool:
    """Flip expansion for a branch node. Returns ``False`` for leaves."""
    if not mapping.is_branch(node):
        return False
    if node in expanded:
        expanded.discard(node)
    else:
        expanded.add(node)
    return True


def row_label(row: TreeRow) -> str:
    name = row.path if row.depth == 0 else os.path.basename(row.path)
    if not row.is_branch:
        return f"  {name}"
    marker = BRANCH_EXPANDED if row.expanded else BRANCH_COLLAPSED
    return f"{marker} {name}"
