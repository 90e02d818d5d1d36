from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one run: argument parsing, logging bootstrap, configuration
resolution, report assembly and error presentation. This is the only layer
that turns GitcatError into an exit status.
"""

import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.text import Text

from gitcat.core.services.git_query import GitRepository
from gitcat.core.services.report import ReportAssembler, RepositoryQuery
from gitcat.domain.config import ReportConfig, resolve_config
from gitcat.domain.constants import STYLES
from gitcat.domain.errors import GitcatError, NotARepositoryError
from gitcat.infra.console import create_console
from gitcat.infra.logging import LoggingConfig, configure_logging, get_logger
from gitcat.interface.cli import args as cli_args
from gitcat.utils.i18n import i18n

logger = get_logger(__name__)

RepositoryFactory = Callable[[ReportConfig], RepositoryQuery]

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        *,
        repository_factory: Optional[RepositoryFactory] = None,
        stdout: Optional[Console] = None,
        stderr: Optional[Console] = None,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.
        repository_factory: Builds the repository facade from the config.
        stdout: Console for the report.
        stderr: Console for error messages.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only, report owns stdout)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration: defaults, environment, flags
    config = resolve_config(cli_args.args_to_overrides(args))
    logger.debug(f"Resolved configuration: {config}")
    if config.language != i18n.locale:
        i18n.load_locale(config.language)

    out = stdout or create_console(color=config.color)
    err = stderr or create_console(color=config.color, stderr=True)

    factory = repository_factory or _default_repository
    assembler = ReportAssembler(factory(config), out, config)

    # 4. Report
    try:
        assembler.run()
    except NotARepositoryError as e:
        logger.debug(f"Repository check failed: {e}")
        _print_error(err, i18n.t("cli.errors.not_a_repo"))
        return EXIT_FAILURE
    except GitcatError as e:
        logger.debug(f"Run aborted: {e}")
        _print_error(err, i18n.t("cli.errors.failed", error=str(e)))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        err.print(i18n.t("cli.status.interrupted"))
        return EXIT_INTERRUPTED

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _default_repository(config: ReportConfig) -> GitRepository:
    return GitRepository(git_executable=config.git_executable)


def _print_error(console: Console, message: str) -> None:
    console.print(Text.assemble((i18n.t("cli.errors.label"), STYLES["error"]), " ", message))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
