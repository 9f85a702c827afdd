"""
High-level orchestration for git-follow.

This module is responsible for:
  - checking that we run inside a repository,
  - diverting to --total when requested,
  - binding --branch/--tag to a refspec,
  - validating the pathspec at that refspec, and
  - assembling and running the git-log command line.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from .actions import Outcome, show_total
from .config import Config, ConfigResolver, Settings, load_settings
from .errors import InvalidPathspecError, InvalidRepositoryError, UsageError
from .git_adapter import RepositoryInspector, run_log
from .options import LINE_LOG_OPTIONS, render_options
from .refspec import bind_refspec
from .validators import is_pathspec, is_repo

LOG = logging.getLogger(__name__)


def bind_refs(config: Config, inspector: RepositoryInspector) -> Optional[str]:
    """
    Bind every --branch/--tag request in order and return the refspec.
    """

    refspec: Optional[str] = None
    for kind, ref in config.refs:
        refspec = bind_refspec(kind, ref, refspec, inspector)
    return refspec


def build_log_command(
    config: Config,
    settings: Settings,
    refspec: Optional[str] = None,
) -> List[str]:
    """
    Assemble the git-log argument vector for a validated Config.
    """

    line_log = any(option in LINE_LOG_OPTIONS for option in config.options)

    argv = ["git"]
    if settings.pager_disabled and not config.force_pager:
        argv.append("--no-pager")
    argv += ["log", f"--format={settings.log_format}"]

    if "no-renames" not in config.options and not line_log:
        argv.append("--follow")

    argv.extend(settings.diff_args)
    argv.extend(render_options(config.options, config.pathspec))

    if refspec is not None:
        argv.append(refspec)

    # The pathspec is already part of the -L fragment.
    if not line_log:
        argv += ["--", config.pathspec]

    return argv


def prepare(config: Config, inspector: RepositoryInspector) -> List[str]:
    """
    Validate the invocation and return the git-log command to run.
    """

    refspec = bind_refs(config, inspector)

    if config.pathspec is None:
        raise UsageError("missing pathspec")

    ref = refspec or "HEAD"
    if not is_pathspec(inspector, ref, config.pathspec):
        raise InvalidPathspecError(config.pathspec)

    settings = load_settings(ConfigResolver(inspector))
    return build_log_command(config, settings, refspec)


def run_follow(config: Config, inspector: RepositoryInspector) -> Outcome:
    """
    Entry point for the main CLI command.

    Returns an Outcome; for a git-log run the output is empty and the
    exit code is git's own.
    """

    LOG.debug("Starting git-follow with config: %s", config)

    if not is_repo(inspector):
        raise InvalidRepositoryError(os.getcwd())

    if config.total:
        return show_total(config, inspector)

    argv = prepare(config, inspector)
    LOG.info("Following %s", config.pathspec)
    return Outcome(output="", exit_code=run_log(argv))
