"""Domain model for the filesystem-to-tree projection.

This package contains non-UI tree primitives:
- the child-mapping datatype keyed by absolute path strings
- the one-shot directory walk that builds it
"""

from __future__ import annotations

from .fs import DEPENDENCY_CACHE_DIR, HIDDEN_PREFIX, is_skipped_name, project_directory
from .types import ChildMapping

__all__ = [
    "ChildMapping",
    "DEPENDENCY_CACHE_DIR",
    "HIDDEN_PREFIX",
    "is_skipped_name",
    "project_directory",
]
