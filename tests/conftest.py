from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides an in-memory repository double and a capturing console.
3. Resets process-wide state (message locale, logging) between tests.
"""

import io
import os
import sys
from typing import Callable, Optional, Sequence

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from gitcat.domain.errors import GitCommandError, NotARepositoryError  # noqa: E402
from gitcat.domain.snapshot import RepositorySnapshot  # noqa: E402
from gitcat.infra.console import create_console  # noqa: E402
from gitcat.infra.logging import shutdown_logging  # noqa: E402
from gitcat.utils.i18n import i18n  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FakeRepository:
    """In-memory stand-in for GitRepository."""

    def __init__(
            self,
            tracked: Sequence[str] = (),
            untracked: int = 0,
            ignored: int = 0,
            root_name: str = "repo",
            inside: bool = True,
            cwd: Optional[str] = None,
            fail_with: Optional[GitCommandError] = None,
    ):
        self.tracked = tuple(tracked)
        self.untracked = untracked
        self.ignored = ignored
        self.name = root_name
        self.inside = inside
        self.cwd = cwd
        self.fail_with = fail_with
        self.snapshot_calls = 0

    def verify_inside_repository(self) -> None:
        if not self.inside:
            raise NotARepositoryError("not a git repository")

    def snapshot(self) -> RepositorySnapshot:
        self.snapshot_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return RepositorySnapshot(
            tracked=self.tracked,
            untracked_count=self.untracked,
            ignored_count=self.ignored,
            root_name=self.name,
        )


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore the default locale and tear down logging after each test."""
    yield
    if i18n.locale != "en":
        i18n.load_locale("en")
    shutdown_logging()


@pytest.fixture
def fake_repo_factory() -> Callable[..., FakeRepository]:
    """Return the FakeRepository constructor."""
    return FakeRepository


@pytest.fixture
def output_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def plain_console(output_buffer):
    """A colourless console writing into output_buffer."""
    return create_console(color=False, file=output_buffer)
