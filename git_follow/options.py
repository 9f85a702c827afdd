"""
Translation of git-follow options into git-log arguments.

Each log option is resolved to an effective argument (set_args), stored
in an ordered options map, pruned against the options it supersedes
(prune_conflicts) and finally rendered into git-log argv tokens
(format_option).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, MutableMapping, Optional, Sequence, Tuple

from .validators import is_int


@dataclass(frozen=True)
class OptionSpec:
    """
    Static description of one git-follow option.

    ``min_args``/``max_args`` give the number of arguments consumed;
    ``log_option`` is False for options that steer git-follow itself
    and never reach git-log; ``uses_pathspec`` marks options whose
    rendered form embeds the pathspec.
    """

    name: str
    short: str
    min_args: int = 0
    max_args: int = 0
    log_option: bool = True
    uses_pathspec: bool = False

    @property
    def flags(self) -> Tuple[str, str]:
        return f"-{self.short}", f"--{self.name}"


OPTIONS: Tuple[OptionSpec, ...] = (
    OptionSpec("branch", "b", 1, 1, log_option=False),
    OptionSpec("first", "f"),
    OptionSpec("func", "F", 1, 1, uses_pathspec=True),
    OptionSpec("last", "l", 0, 1),
    OptionSpec("lines", "L", 1, 2, uses_pathspec=True),
    OptionSpec("no-merges", "M"),
    OptionSpec("no-patch", "N"),
    OptionSpec("no-renames", "O"),
    OptionSpec("pager", "p", log_option=False),
    OptionSpec("pickaxe", "P", 1, 1),
    OptionSpec("range", "r", 1, 2),
    OptionSpec("reverse", "R"),
    OptionSpec("tag", "t", 1, 1, log_option=False),
    OptionSpec("total", "T", 0, 1, log_option=False),
    OptionSpec("version", "V", log_option=False),
)

OPTIONS_BY_NAME: Dict[str, OptionSpec] = {spec.name: spec for spec in OPTIONS}

# Fallback arguments for options given without one.
DEFAULT_ARGS: Dict[str, object] = {
    "last": "1",
}

# Options each option supersedes; the later one on the command line wins.
CONFLICTS: Dict[str, Tuple[str, ...]] = {
    "first": ("last",),
    "last": ("first",),
}

# git-log -L refuses --follow and a trailing pathspec.
LINE_LOG_OPTIONS = frozenset(spec.name for spec in OPTIONS if spec.uses_pathspec)


def set_args(
    option: str,
    arg: object,
    options: MutableMapping[str, object],
    defaults: Mapping[str, object] = DEFAULT_ARGS,
) -> None:
    """
    Store the given argument for ``option``, or its default when empty.

    A later call for the same option overwrites the earlier value.
    """

    options[option] = arg if arg else defaults.get(option)


def prune_conflicts(
    option: str,
    conflicts: Mapping[str, Sequence[str]],
    options: MutableMapping[str, object],
) -> None:
    """Remove every option superseded by ``option`` from ``options``."""

    for superseded in conflicts.get(option, ()):
        options.pop(superseded, None)


def resolve_range(start: str, end: Optional[str] = None) -> str:
    """
    Return a ``start..end`` revision range for git-log.

    A missing end defaults to HEAD. A purely numeric bound is taken as a
    reflog offset on the current branch (``@{n}``).
    """

    # TODO: accept a refname in front of a numeric offset, e.g.
    # --branch master --range 3 5 or --range master 3 5.
    if end is None or end == "":
        end = "HEAD"
    if is_int(start):
        start = f"@{{{start}}}"
    if is_int(end):
        end = f"@{{{end}}}"
    return f"{start}..{end}"


def _pair(value: object) -> Tuple[str, Optional[str]]:
    if isinstance(value, (list, tuple)):
        first = value[0] if value else ""
        second = value[1] if len(value) > 1 else None
        return first, second
    return str(value), None


def format_option(option: str, value: object, pathspec: Optional[str]) -> List[str]:
    """
    Render one option and its effective argument as git-log argv tokens.
    """

    if option == "first":
        return ["--diff-filter=A"]
    if option == "func":
        return [f"-L:{value}:{pathspec}"]
    if option == "last":
        # A zero count means "not given", as an empty one does.
        if not value or value == "0":
            value = DEFAULT_ARGS["last"]
        return [f"--max-count={value}"]
    if option == "lines":
        start, end = _pair(value)
        if not end:
            return ["-L", f"{start}:{pathspec}"]
        return ["-L", f"{start},{end}:{pathspec}"]
    if option == "pickaxe":
        return [f"-S{value}"]
    if option == "range":
        start, end = _pair(value)
        return [resolve_range(start, end)]
    return [f"--{option}"]


def render_options(options: Mapping[str, object], pathspec: Optional[str]) -> List[str]:
    """Render every entry of ``options`` in insertion order."""

    argv: List[str] = []
    for option, value in options.items():
        argv.extend(format_option(option, value, pathspec))
    return argv
