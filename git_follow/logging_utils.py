"""
Logging helpers for git-follow.

Only the ``git_follow`` package logger is configured, so running
git-follow as a library leaves the host application's root logger
alone. Records go to stderr and never mix with git-log or --total output
on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "git-follow: %(levelname)s %(name)s: %(message)s"


def verbosity_level(verbosity: int) -> int:
    """
    Map a -v count to a logging level.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """

    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger at the requested level.

    Calling this again replaces the handler installed by a previous call.
    """

    logger = logging.getLogger("git_follow")
    logger.setLevel(verbosity_level(verbosity))
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, "_git_follow", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._git_follow = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
