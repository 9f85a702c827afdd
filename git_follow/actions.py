"""
Side-exit actions: --total and --version.

Handlers return an Outcome instead of printing and exiting; the CLI
writes the output and exits with the given code.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import __version__
from .config import Config
from .errors import UsageError
from .git_adapter import RepositoryInspector


@dataclass
class Outcome:
    """Text to print and the process exit code for a finished action."""

    output: str
    exit_code: int = 0


def show_total(config: Config, inspector: RepositoryInspector) -> Outcome:
    """
    Count the commits that touched the pathspec.

    Renames are followed unless --no-renames/-O appears anywhere on the
    command line. An explicit --total argument takes precedence over
    the trailing pathspec.
    """

    if "--no-renames" in config.argv or "-O" in config.argv:
        mode = "--no-renames"
    else:
        mode = "--follow"

    path = config.total_pathspec or config.pathspec
    if path is None and config.argv:
        path = config.argv[-1]
    if path is None or path.startswith("-"):
        raise UsageError("--total requires a pathspec")

    hashes = inspector.log_hashes([mode], path)
    return Outcome(output=f"{len(hashes)}\n")


def show_version() -> Outcome:
    return Outcome(output=f"{__version__}\n")
