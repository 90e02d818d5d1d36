from __future__ import annotations

"""
Repository Tree Data Models.

Provides the recursive node types used to represent the tracked files of a
repository as a hierarchy. A node is either a leaf (FileNode) or a
container (DirectoryNode) keyed by single path segments.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """Represents a leaf entry (tracked file) in the repository tree."""


@dataclass
class DirectoryNode:
    """
    Represents a directory entry in the repository tree.

    Attributes:
        children: Mapping of path segment to child node. Keys are unique
                  among siblings; iteration order is not meaningful, use
                  sorted_children() for presentation order.
    """
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def sorted_children(self) -> Iterator[Tuple[str, "TreeNode"]]:
        """Yield (name, node) pairs in ascending lexicographic name order."""
        for name in sorted(self.children):
            yield name, self.children[name]

    def __len__(self) -> int:
        return len(self.children)


TreeNode = Union[FileNode, DirectoryNode]
