from __future__ import annotations

"""
Runtime Configuration Domain.

Defines the immutable ReportConfig consumed by the report assembler and
resolves it from three layers: built-in defaults, process environment, and
command-line overrides. Nothing is persisted between runs.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from gitcat.domain.constants import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_LOCALE,
    DEFAULT_README_NAME,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENVIRONMENT KEYS
# -----------------------------------------------------------------------------

ENV_GIT_EXECUTABLE = "GITCAT_GIT"
ENV_LANGUAGE = "GITCAT_LANG"
ENV_NO_COLOR = "NO_COLOR"

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportConfig:
    """
    Behavioural switches for a single report run.

    Attributes:
        show_readme: Append the root readme content to the report.
        color: Allow terminal styling (still dropped for non-terminals).
        git_executable: Name or path of the git binary.
        readme_name: Repository-root file shown by show_readme.
        language: Message catalogue locale.
    """
    show_readme: bool = False
    color: bool = True
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    readme_name: str = DEFAULT_README_NAME
    language: str = DEFAULT_LOCALE


def get_default_config() -> ReportConfig:
    """Return the built-in configuration."""
    return ReportConfig()


def config_from_env(
        base: ReportConfig,
        environ: Optional[Mapping[str, str]] = None,
) -> ReportConfig:
    """
    Layer environment variables on top of a base configuration.

    Args:
        base: Configuration to start from.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        ReportConfig: The environment-adjusted configuration.
    """
    env = os.environ if environ is None else environ
    updates: Dict[str, Any] = {}

    git_exe = env.get(ENV_GIT_EXECUTABLE, "").strip()
    if git_exe:
        updates["git_executable"] = git_exe

    lang = env.get(ENV_LANGUAGE, "").strip()
    if lang:
        updates["language"] = lang

    # https://no-color.org: presence with any non-empty value disables colour
    if env.get(ENV_NO_COLOR):
        updates["color"] = False

    if updates:
        logger.debug(f"Environment overrides applied: {sorted(updates)}")
    return replace(base, **updates)


def merge_overrides(base: ReportConfig, overrides: Mapping[str, Any]) -> ReportConfig:
    """
    Merge known, non-None override values into the configuration.

    Unknown keys are dropped so external sources cannot pollute the schema.
    """
    known = {f.name for f in fields(ReportConfig)}
    updates = {k: v for k, v in overrides.items() if k in known and v is not None}
    return replace(base, **updates)


def resolve_config(
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
) -> ReportConfig:
    """Resolve defaults, environment and overrides, in that order."""
    conf = config_from_env(get_default_config(), environ)
    if overrides:
        conf = merge_overrides(conf, overrides)
    return conf
