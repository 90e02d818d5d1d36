from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides for the report.
"""

import argparse
from typing import Any, Dict

from gitcat.domain.constants import APP_NAME, APP_VERSION, SUPPORTED_LOCALES
from gitcat.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the gitcat CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    # --- Report content ---
    p.add_argument(
        "--readme",
        action="store_true",
        help=i18n.t("cli.args.readme"),
    )

    # --- Presentation ---
    p.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help=i18n.t("cli.args.no_color"),
    )
    p.add_argument(
        "--lang",
        dest="language",
        choices=SUPPORTED_LOCALES,
        default=None,
        help=i18n.t("cli.args.lang"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
        help=i18n.t("cli.args.version"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into ReportConfig overrides.

    Flags that were not given map to None (or are omitted) so lower
    configuration layers keep their values.
    """
    overrides: Dict[str, Any] = {}

    if args.readme:
        overrides["show_readme"] = True
    if args.no_color:
        overrides["color"] = False
    overrides["language"] = args.language

    return overrides
