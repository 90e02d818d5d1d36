from __future__ import annotations

"""
Domain Error Hierarchy.

All failures the CLI controller knows how to report derive from
GitcatError. Anything else is treated as a crash by the global supervisor.
"""

from typing import Optional, Sequence, Tuple


class GitcatError(Exception):
    """Base class for reportable application failures."""


class NotARepositoryError(GitcatError):
    """The working directory is not inside a git work tree."""


class GitCommandError(GitcatError):
    """
    A git subcommand could not be run or exited with a non-zero status.

    Attributes:
        args_: The git arguments (without the executable).
        returncode: Process exit status, or None if the process never started.
        stderr: Trimmed error stream of the failing command.
    """

    def __init__(self, args: Sequence[str], returncode: Optional[int], stderr: str):
        self.args_: Tuple[str, ...] = tuple(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        super().__init__(f"git {' '.join(self.args_)} failed: {self.stderr}")


class ReadmeReadError(GitcatError):
    """A tracked readme could not be read from disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"failed to read {path}: {reason}")


class TreeConflictError(GitcatError):
    """A path descends through a segment already recorded as a file."""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(f"'{segment}' is a file but '{path}' uses it as a directory")
