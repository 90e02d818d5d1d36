from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide identifiers, the git subcommands used to
query a repository, and the visual vocabulary (glyphs and styles) of the
report.
"""

from typing import Dict, Tuple

APP_NAME = "gitcat"
APP_VERSION = "0.1.0"

DEFAULT_README_NAME = "README.md"
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES: Tuple[str, ...] = ("en", "es")

# -----------------------------------------------------------------------------
# GIT QUERIES
# -----------------------------------------------------------------------------

GIT_INSIDE_WORK_TREE: Tuple[str, ...] = ("rev-parse", "--is-inside-work-tree")
GIT_SHOW_TOPLEVEL: Tuple[str, ...] = ("rev-parse", "--show-toplevel")
# -z: NUL-terminated, unquoted paths (core.quotePath would C-quote non-ASCII)
GIT_LS_TRACKED: Tuple[str, ...] = ("ls-files", "-z")
GIT_LS_UNTRACKED: Tuple[str, ...] = ("ls-files", "-z", "--others", "--exclude-standard")
GIT_LS_IGNORED: Tuple[str, ...] = ("ls-files", "-z", "--others", "-i", "--exclude-standard")

# -----------------------------------------------------------------------------
# PRESENTATION
# -----------------------------------------------------------------------------

CONNECTOR_MIDDLE = "├── "
CONNECTOR_LAST = "└── "
PREFIX_CONTINUE = "│   "
PREFIX_BLANK = "    "

SUMMARY_GLYPH = "●"

STYLES: Dict[str, str] = {
    "heading": "bold cyan",
    "directory": "bold cyan",
    "tracked": "green",
    "untracked": "yellow",
    "ignored": "bright_black",
    "muted": "dim",
    "error": "bold red",
}
