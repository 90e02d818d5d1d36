from __future__ import annotations

"""
Tree Renderer.

Converts a DirectoryNode into indented lines with box-drawing connectors
(├──, └──). Lines are produced as rich Text objects so directories can be
styled; render_plain() strips styling for logs and tests.
"""

from typing import List

from rich.text import Text

from gitcat.domain.constants import (
    CONNECTOR_LAST,
    CONNECTOR_MIDDLE,
    PREFIX_BLANK,
    PREFIX_CONTINUE,
    STYLES,
)
from gitcat.domain.tree_models import DirectoryNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        tree: DirectoryNode,
        lines: List[Text],
        prefix: str = "",
        directory_style: str = STYLES["directory"],
) -> None:
    """
    Recursively transform the tree into a list of styled lines.

    Children are visited in ascending name order. The last sibling gets the
    closing connector and its descendants a blank prefix extension; other
    siblings extend the prefix with a vertical bar.

    Args:
        tree: Directory whose children are rendered.
        lines: Accumulator list for output lines.
        prefix: Indentation prefix for the current recursion level.
        directory_style: rich style applied to directory names.
    """
    entries = list(tree.sorted_children())
    total = len(entries)

    for i, (name, node) in enumerate(entries):
        is_last = (i == total - 1)
        connector = CONNECTOR_LAST if is_last else CONNECTOR_MIDDLE

        line = Text(f"{prefix}{connector}")
        if isinstance(node, DirectoryNode):
            line.append(name, style=directory_style)
            lines.append(line)
            new_prefix = prefix + (PREFIX_BLANK if is_last else PREFIX_CONTINUE)
            render_tree_structure(node, lines, prefix=new_prefix, directory_style=directory_style)
        else:
            line.append(name)
            lines.append(line)


def render_plain(tree: DirectoryNode, prefix: str = "") -> List[str]:
    """Render the tree as unstyled strings."""
    lines: List[Text] = []
    render_tree_structure(tree, lines, prefix=prefix)
    return [line.plain for line in lines]
