from __future__ import annotations

"""
Git Repository Query Service.

Thin wrapper over the git executable. Each query spawns one blocking
subprocess, captures its line-oriented output and converts a non-zero exit
status into a GitCommandError carrying the failing subcommand and its
trimmed error stream.
"""

import logging
import os
import subprocess
from typing import Callable, List, Optional, Sequence

from gitcat.domain.constants import (
    DEFAULT_GIT_EXECUTABLE,
    GIT_INSIDE_WORK_TREE,
    GIT_LS_IGNORED,
    GIT_LS_TRACKED,
    GIT_LS_UNTRACKED,
    GIT_SHOW_TOPLEVEL,
)
from gitcat.domain.errors import GitCommandError, NotARepositoryError
from gitcat.domain.snapshot import RepositorySnapshot

logger = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]

# -----------------------------------------------------------------------------
# SERVICE
# -----------------------------------------------------------------------------

class GitRepository:
    """
    Query facade for the repository containing a working directory.

    Args:
        git_executable: Name or path of the git binary.
        cwd: Directory the commands run in. Defaults to the process cwd.
        runner: subprocess.run compatible callable, injectable for tests.
    """

    def __init__(
            self,
            git_executable: str = DEFAULT_GIT_EXECUTABLE,
            cwd: Optional[str] = None,
            runner: Optional[Runner] = None,
    ):
        self.git_executable = git_executable
        self.cwd = cwd
        self._runner: Runner = runner or subprocess.run

    # --- Low-level execution ---

    def run(self, args: Sequence[str]) -> str:
        """
        Execute a git subcommand and return its decoded standard output.

        Raises:
            GitCommandError: If git cannot be spawned or exits non-zero.
        """
        cmd = [self.git_executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            proc = self._runner(cmd, cwd=self.cwd, capture_output=True, check=False)
        except OSError as e:
            raise GitCommandError(args, None, f"failed to run {self.git_executable}: {e}") from e

        stdout = _decode(proc.stdout)
        if proc.returncode != 0:
            raise GitCommandError(args, proc.returncode, _decode(proc.stderr))

        logger.debug(f"git {' '.join(args)} exited 0 ({len(stdout)} chars)")
        return stdout

    def run_entries(self, args: Sequence[str]) -> List[str]:
        """Execute a NUL-terminated (-z) git listing and return its non-empty entries."""
        return [entry for entry in self.run(args).split("\0") if entry]

    # --- Queries ---

    def verify_inside_repository(self) -> None:
        """
        Ensure the working directory belongs to a git work tree.

        Raises:
            NotARepositoryError: If git reports no enclosing work tree.
            GitCommandError: If the git executable itself cannot be run.
        """
        try:
            out = self.run(GIT_INSIDE_WORK_TREE).strip()
        except GitCommandError as e:
            if e.returncode is None:
                raise
            raise NotARepositoryError(str(e)) from e

        # Inside the .git directory git answers "false" with status 0
        if out != "true":
            raise NotARepositoryError(f"not inside a work tree (git answered {out!r})")

    def list_tracked(self) -> List[str]:
        return self.run_entries(GIT_LS_TRACKED)

    def count_untracked(self) -> int:
        return len(self.run_entries(GIT_LS_UNTRACKED))

    def count_ignored(self) -> int:
        return len(self.run_entries(GIT_LS_IGNORED))

    def root_name(self) -> str:
        """Final segment of the repository top-level directory, or '.'."""
        top = self.run(GIT_SHOW_TOPLEVEL).strip()
        name = os.path.basename(os.path.normpath(top)) if top else ""
        return name or "."

    def snapshot(self) -> RepositorySnapshot:
        """Run every query once, in order, and bundle the results."""
        return RepositorySnapshot(
            tracked=tuple(self.list_tracked()),
            untracked_count=self.count_untracked(),
            ignored_count=self.count_ignored(),
            root_name=self.root_name(),
        )

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
