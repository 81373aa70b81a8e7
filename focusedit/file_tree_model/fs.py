"""Filesystem walk that projects a directory into a child mapping."""

from __future__ import annotations

import logging
import os

from .types import ChildMapping

HIDDEN_PREFIX = "."
DEPENDENCY_CACHE_DIR = "node_modules"

logger = logging.getLogger(__name__)


def is_skipped_name(name: str) -> bool:
    """Return whether an entry name is excluded from projections."""
    return name.startswith(HIDDEN_PREFIX) or name == DEPENDENCY_CACHE_DIR


def _scan_sorted(directory: str) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def project_directory(root_path: str | os.PathLike[str]) -> tuple[str, ChildMapping]:
    """Walk ``root_path`` once and map every directory to its visible children.

    Returns ``(absolute_root, mapping)``. Entries are visited in lexical name
    order per directory; hidden entries and ``node_modules`` are dropped along
    with their subtrees. Symlinked directories are listed but not descended.

    Any ``OSError`` raised while scanning aborts the whole projection.
    """
    absolute_root = os.path.abspath(os.fspath(root_path))
    mapping = ChildMapping(root=absolute_root)

    pending = [absolute_root]
    while pending:
        directory = pending.pop()
        subdirectories: list[str] = []
        for entry in _scan_sorted(directory):
            if is_skipped_name(entry.name):
                continue
            child_path = os.path.join(directory, entry.name)
            mapping.children[directory].append(child_path)
            if entry.is_dir(follow_symlinks=False):
                mapping.children[child_path] = []
                subdirectories.append(child_path)
        # Reversed so the stack pops subdirectories in name order.
        pending.extend(reversed(subdirectories))

    logger.debug("projected %s: %d directories", absolute_root, len(mapping.children))
    return absolute_root, mapping


__all__ = [
    "DEPENDENCY_CACHE_DIR",
    "HIDDEN_PREFIX",
    "is_skipped_name",
    "project_directory",
]
