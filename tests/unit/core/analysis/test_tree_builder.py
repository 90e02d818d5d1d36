from __future__ import annotations

"""
Unit tests for the Repository Tree Builder.

Verifies the hierarchy produced from flat git paths, idempotent insertion,
the empty-segment collapse policy and file/directory conflicts.
"""

import random

import pytest

from gitcat.core.analysis.tree_builder import build_tree, flatten_tree
from gitcat.domain.errors import TreeConflictError
from gitcat.domain.tree_models import DirectoryNode, FileNode


def test_build_mixed_depth_paths() -> None:
    """Nested and root-level files land in the right directories."""
    tree = build_tree(["a/b.txt", "a/c.txt", "d.txt"])

    assert set(tree.children) == {"a", "d.txt"}
    assert isinstance(tree.children["a"], DirectoryNode)
    assert isinstance(tree.children["d.txt"], FileNode)

    a = tree.children["a"]
    assert set(a.children) == {"b.txt", "c.txt"}
    assert all(isinstance(n, FileNode) for n in a.children.values())


def test_build_empty_input_gives_empty_root() -> None:
    tree = build_tree([])
    assert isinstance(tree, DirectoryNode)
    assert len(tree) == 0


def test_single_segment_goes_under_root() -> None:
    tree = build_tree(["Makefile"])
    assert list(tree.children) == ["Makefile"]
    assert isinstance(tree.children["Makefile"], FileNode)


def test_duplicate_paths_are_idempotent() -> None:
    tree = build_tree(["x.txt", "x.txt"])
    assert list(tree.children) == ["x.txt"]

    nested = build_tree(["d/x.txt", "d/x.txt"])
    assert list(nested.children["d"].children) == ["x.txt"]


def test_deep_path_creates_each_level() -> None:
    tree = build_tree(["a/b/c/d/e.py"])
    node = tree
    for name in ["a", "b", "c", "d"]:
        node = node.children[name]
        assert isinstance(node, DirectoryNode)
    assert isinstance(node.children["e.py"], FileNode)


def test_shared_directories_are_reused() -> None:
    tree = build_tree(["src/app/main.py", "src/app/util.py", "src/lib.py"])
    src = tree.children["src"]
    assert set(src.children) == {"app", "lib.py"}
    assert set(src.children["app"].children) == {"main.py", "util.py"}


def test_flatten_restores_input_regardless_of_order() -> None:
    paths = [
        "README.md",
        "src/gitcat/main.py",
        "src/gitcat/core/report.py",
        "tests/conftest.py",
        "tests/unit/test_a.py",
        ".gitignore",
    ]
    shuffled = list(paths)
    random.Random(7).shuffle(shuffled)

    flat = flatten_tree(build_tree(shuffled))

    assert sorted(flat) == sorted(paths)
    assert len(flat) == len(set(flat))


def test_flatten_is_depth_first_sorted() -> None:
    flat = flatten_tree(build_tree(["d.txt", "a/c.txt", "a/b.txt"]))
    assert flat == ["a/b.txt", "a/c.txt", "d.txt"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/lead.txt", ["lead.txt"]),
        ("trail/", ["trail"]),
        ("a//b.txt", ["a/b.txt"]),
    ],
)
def test_empty_segments_are_collapsed(raw: str, expected: list) -> None:
    assert flatten_tree(build_tree([raw])) == expected


def test_separator_only_paths_are_ignored() -> None:
    tree = build_tree(["", "/", "//", "ok.txt"])
    assert list(tree.children) == ["ok.txt"]


def test_file_then_directory_of_same_name_conflicts() -> None:
    with pytest.raises(TreeConflictError) as exc:
        build_tree(["a", "a/b.txt"])
    assert exc.value.segment == "a"
    assert exc.value.path == "a/b.txt"


def test_directory_wins_over_later_file_of_same_name() -> None:
    tree = build_tree(["a/b.txt", "a"])
    assert isinstance(tree.children["a"], DirectoryNode)
    assert flatten_tree(tree) == ["a/b.txt"]
