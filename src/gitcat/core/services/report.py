from __future__ import annotations

"""
Report Assembler.

Composes the repository preview: root heading, tree of tracked files,
summary counts and, optionally, the root readme. The repository check runs
before anything is printed so a failing run leaves stdout empty.
"""

import logging
import os
from typing import List, Optional, Protocol

from rich.console import Console
from rich.text import Text

from gitcat.core.analysis.tree_builder import build_tree
from gitcat.core.analysis.tree_renderer import render_tree_structure
from gitcat.domain.config import ReportConfig
from gitcat.domain.constants import STYLES, SUMMARY_GLYPH
from gitcat.domain.errors import ReadmeReadError
from gitcat.domain.snapshot import RepositorySnapshot
from gitcat.utils.i18n import i18n

logger = logging.getLogger(__name__)


class RepositoryQuery(Protocol):
    cwd: Optional[str]

    def verify_inside_repository(self) -> None: ...

    def snapshot(self) -> RepositorySnapshot: ...


# -----------------------------------------------------------------------------
# ASSEMBLER
# -----------------------------------------------------------------------------

class ReportAssembler:
    """
    Orchestrates one report run against a repository.

    Args:
        repository: Query facade (GitRepository or a test double).
        console: Destination for the report.
        config: Run configuration.
    """

    def __init__(self, repository: RepositoryQuery, console: Console, config: ReportConfig):
        self.repository = repository
        self.console = console
        self.config = config

    def run(self) -> RepositorySnapshot:
        """
        Produce the full report.

        Raises:
            NotARepositoryError: Before any output, when outside a repository.
            GitCommandError: When any git query fails.
            ReadmeReadError: When a tracked readme cannot be read.
        """
        self.repository.verify_inside_repository()
        snapshot = self.repository.snapshot()
        logger.info(
            f"Snapshot of '{snapshot.root_name}': {snapshot.tracked_count} tracked, "
            f"{snapshot.untracked_count} untracked, {snapshot.ignored_count} ignored"
        )

        # Readme is read up front so an I/O failure aborts before any output
        readme = self._load_readme(snapshot) if self.config.show_readme else None

        self.console.print(Text(snapshot.root_name, style=STYLES["heading"]))
        for line in self.render_tree(snapshot):
            self.console.print(line)

        self.console.print()
        self._print_summary(snapshot)

        if self.config.show_readme:
            self._print_readme(readme)

        return snapshot

    def render_tree(self, snapshot: RepositorySnapshot) -> List[Text]:
        lines: List[Text] = []
        render_tree_structure(build_tree(snapshot.tracked), lines)
        return lines

    # --- Sections ---

    def _print_summary(self, snapshot: RepositorySnapshot) -> None:
        rows = [
            ("tracked", "report.summary.tracked", snapshot.tracked_count),
            ("untracked", "report.summary.untracked", snapshot.untracked_count),
            ("ignored", "report.summary.ignored", snapshot.ignored_count),
        ]
        for style_key, msg_key, count in rows:
            self.console.print(Text.assemble(
                (SUMMARY_GLYPH, STYLES[style_key]),
                " ",
                i18n.t(msg_key, count=count),
            ))

    def _print_readme(self, content: Optional[str]) -> None:
        name = self.config.readme_name
        self.console.print()
        if content is None:
            self.console.print(Text(i18n.t("report.readme.not_found", name=name), style=STYLES["muted"]))
            return

        self.console.print(Text(i18n.t("report.readme.separator", name=name), style=STYLES["muted"]))
        # Raw write: rich would expand tabs and strip carriage returns
        self.console.file.write(content)
        self.console.file.write("\n")

    def _load_readme(self, snapshot: RepositorySnapshot) -> Optional[str]:
        """Return the readme content, or None when it is not tracked."""
        name = self.config.readme_name
        if not snapshot.is_tracked(name):
            logger.debug(f"{name} is not tracked; skipping")
            return None

        path = os.path.join(self.repository.cwd or os.curdir, name)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadmeReadError(name, str(e)) from e
