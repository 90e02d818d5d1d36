from __future__ import annotations

"""
Repository Snapshot Model.

Immutable result of querying a repository once: the tracked paths, the
untracked and ignored counts, and the name of the repository root.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RepositorySnapshot:
    """
    Point-in-time view of a repository, produced fresh on every run.

    Attributes:
        tracked: Repository-relative paths under version control.
        untracked_count: Paths present but neither tracked nor ignored.
        ignored_count: Paths excluded by ignore rules.
        root_name: Final segment of the repository top-level directory.
    """
    tracked: Tuple[str, ...]
    untracked_count: int
    ignored_count: int
    root_name: str

    @property
    def tracked_count(self) -> int:
        return len(self.tracked)

    def is_tracked(self, path: str) -> bool:
        """Exact, case-sensitive membership test against the tracked paths."""
        return path in self.tracked
