"""
Configuration model for git-follow.

The CLI constructs a Config instance and passes it down into the
orchestration logic so option and refspec state never lives in module
globals. Persistent settings come from ``follow.*`` git config keys,
resolved through ConfigResolver, with GIT_FOLLOW_* environment variables
taking precedence.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import ConfigError
from .git_adapter import RepositoryInspector

LOG = logging.getLogger(__name__)

_FORMAT_PARTS = {
    "hash": "%C(bold cyan)%h%Creset",
    "tree": "%C(bold magenta)%t%Creset",
    "name": "%C(bold blue)%an%Creset",
    "email": "%C(bold yellow)%ae%Creset",
    "time": "%C(bold green)%cr%Creset",
}

DEFAULT_LOG_FORMAT = (
    f"{_FORMAT_PARTS['hash']} ({_FORMAT_PARTS['tree']}) - %s - "
    f"{_FORMAT_PARTS['name']} <{_FORMAT_PARTS['email']}> [{_FORMAT_PARTS['time']}]"
)

DEFAULT_DIFF_MODE = "inline"

DIFF_MODES: Dict[str, Tuple[str, ...]] = {
    "inline": (),
    "word": ("--word-diff=plain",),
    "color": ("--word-diff=color",),
}

_TRUE_VALUES = {"true", "yes", "on", "1"}


@dataclass
class Config:
    """
    Everything one git-follow invocation was asked to do.

    ``options`` maps log option names to their effective argument in
    command-line order; ``refs`` holds (kind, name) pairs from --branch
    and --tag in the order they were given.
    """

    pathspec: Optional[str] = None
    options: Dict[str, object] = field(default_factory=dict)
    refs: List[Tuple[str, str]] = field(default_factory=list)
    force_pager: bool = False
    total: bool = False
    total_pathspec: Optional[str] = None
    version: bool = False
    verbosity: int = 0
    argv: List[str] = field(default_factory=list)


@dataclass
class Settings:
    """
    Effective follow.* settings for a run.
    """

    log_format: str = DEFAULT_LOG_FORMAT
    diff_mode: str = DEFAULT_DIFF_MODE
    pager_disabled: bool = False

    @property
    def diff_args(self) -> Tuple[str, ...]:
        return DIFF_MODES[self.diff_mode]


class ConfigResolver:
    """
    Look up layered ``follow.*`` keys in git config.

    A key/qualifier pair is tried as ``follow.<key>.<qualifier>`` first
    and as ``follow.<key><qualifier>`` second. Nothing is cached.
    """

    def __init__(self, inspector: RepositoryInspector) -> None:
        self.inspector = inspector

    def _names(self, key: str, qualifier: str) -> Tuple[str, str]:
        return f"follow.{key}.{qualifier}", f"follow.{key}{qualifier}"

    def has(self, key: str, qualifier: str) -> bool:
        return any(
            self.inspector.read_config(name) is not None
            for name in self._names(key, qualifier)
        )

    def get(self, key: str, qualifier: str) -> Optional[str]:
        for name in self._names(key, qualifier):
            value = self.inspector.read_config(name)
            if value is not None:
                return value.rstrip("\n")
        return None


def _is_true(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


def load_settings(
    resolver: ConfigResolver,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Resolve settings from the environment, then git config, then defaults.
    """

    if environ is None:
        environ = os.environ

    log_format = environ.get("GIT_FOLLOW_LOG_FORMAT") or resolver.get("log", "format")
    diff_mode = environ.get("GIT_FOLLOW_DIFF_MODE") or resolver.get("diff", "mode")

    if "GIT_FOLLOW_NO_PAGER" in environ:
        pager_disabled = _is_true(environ["GIT_FOLLOW_NO_PAGER"])
    else:
        pager_disabled = _is_true(resolver.get("pager", "disabled"))

    diff_mode = diff_mode or DEFAULT_DIFF_MODE
    if diff_mode not in DIFF_MODES:
        raise ConfigError(
            f"unknown diff mode {diff_mode!r}; expected one of: {', '.join(DIFF_MODES)}"
        )

    settings = Settings(
        log_format=log_format or DEFAULT_LOG_FORMAT,
        diff_mode=diff_mode,
        pager_disabled=pager_disabled,
    )
    LOG.debug("Resolved settings: %s", settings)
    return settings
