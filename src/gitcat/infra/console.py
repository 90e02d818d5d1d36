from __future__ import annotations

"""
Terminal Output Infrastructure.

Builds the rich Console instances used for the report (stdout) and for
user-facing errors (stderr). Styling is emitted only when colour is allowed
and the target stream is a terminal; markup, emoji codes and highlighting
are disabled so repository content is printed as-is.
"""

import sys
from typing import IO, Optional

from rich.console import Console


def create_console(
        color: bool = True,
        file: Optional[IO[str]] = None,
        stderr: bool = False,
) -> Console:
    """
    Create a console for plain-text reporting.

    Args:
        color: Allow ANSI styling when the stream is a terminal.
        file: Explicit target stream (tests pass a StringIO).
        stderr: Target sys.stderr instead of sys.stdout when file is None.

    Returns:
        Console: Configured rich console.
    """
    if file is None:
        file = sys.stderr if stderr else sys.stdout

    return Console(
        file=file,
        color_system="auto" if color else None,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
