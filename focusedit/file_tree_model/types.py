"""Domain datatypes for the directory child mapping."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ChildMapping:
    """Directory path -> ordered absolute child paths for one projection root.

    Node identity is the absolute path string. Every visited directory has an
    entry, possibly empty; files only ever appear as values.
    """

    root: str
    children: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.children.setdefault(self.root, [])

    def __contains__(self, node: object) -> bool:
        return node in self.children

    def children_of(self, node: str) -> list[str]:
        """Return the child list for ``node`` (empty when ``node`` is unmapped)."""
        return self.children.get(node, [])

    def is_branch(self, node: str) -> bool:
        """Return whether ``node`` is mapped and has at least one child."""
        return bool(self.children.get(node))

    def directories(self) -> list[str]:
        return list(self.children)


__all__ = ["ChildMapping"]
