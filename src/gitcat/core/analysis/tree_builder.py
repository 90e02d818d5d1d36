from __future__ import annotations

"""
Repository Tree Builder.

Converts the flat, slash-separated path list reported by git into a
hierarchical DirectoryNode. Empty segments (leading, trailing or doubled
separators) are collapsed; a path made only of separators is ignored.
"""

import logging
from typing import Iterable, List

from gitcat.domain.errors import TreeConflictError
from gitcat.domain.tree_models import DirectoryNode, FileNode

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(paths: Iterable[str]) -> DirectoryNode:
    """
    Build the repository tree from repository-relative file paths.

    Every segment but the last becomes (or reuses) a DirectoryNode; the last
    segment is inserted as a FileNode. Inserting the same path twice is a
    no-op.

    Args:
        paths: Repository-relative paths using '/' as separator.

    Returns:
        DirectoryNode: The root of the tree (empty for an empty input).

    Raises:
        TreeConflictError: If a path descends through a segment that an
                           earlier path recorded as a file.
    """
    root = DirectoryNode()

    for path in paths:
        segments = _split_segments(path)
        if not segments:
            logger.debug(f"Skipping path without segments: {path!r}")
            continue

        current = root
        for segment in segments[:-1]:
            current = _get_or_create_directory(current, segment, path)

        # An existing directory of the same name wins over a file entry
        current.children.setdefault(segments[-1], FileNode())

    return root


def flatten_tree(tree: DirectoryNode, prefix: str = "") -> List[str]:
    """
    Expand a tree back into its file paths, depth-first in sorted order.

    Directories left without files contribute nothing.
    """
    paths: List[str] = []
    for name, node in tree.sorted_children():
        full = f"{prefix}{name}"
        if isinstance(node, DirectoryNode):
            paths.extend(flatten_tree(node, full + PATH_SEPARATOR))
        else:
            paths.append(full)
    return paths

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _split_segments(path: str) -> List[str]:
    """Split a path on '/' dropping empty segments."""
    return [s for s in path.split(PATH_SEPARATOR) if s]


def _get_or_create_directory(parent: DirectoryNode, segment: str, path: str) -> DirectoryNode:
    """Descend into the named child directory, creating it when absent."""
    node = parent.children.get(segment)
    if node is None:
        node = DirectoryNode()
        parent.children[segment] = node
        return node

    if isinstance(node, DirectoryNode):
        return node

    raise TreeConflictError(path, segment)
