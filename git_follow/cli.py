"""
Command-line interface for git-follow.

This module is responsible for argument parsing and delegating to the
orchestration in the command module. It is the only place that prints
results and decides the process exit status.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from .actions import show_version
from .command import run_follow
from .config import Config
from .errors import GitFollowError, InvalidRepositoryError, UsageError
from .git_adapter import GitInspector
from .logging_utils import configure_logging
from .options import (
    CONFLICTS,
    DEFAULT_ARGS,
    OPTIONS,
    OPTIONS_BY_NAME,
    prune_conflicts,
    set_args,
)
from .validators import is_int

USAGE_SYNOPSIS = """
  Usage: git follow [OPTIONS] [--] pathspec

  Options:

    --branch,     -b <branchref>             Show commits for pathspec, specific to a branch.
    --first,      -f                         Show first commit where Git initiated tracking of pathspec.
    --func,       -F <funcname>              Show commits which affected function <funcname> in pathspec.
    --last,       -l [<count>]               Show last <count> commits which affected pathspec. Omitting <count> defaults to last commit.
    --lines,      -L <start> [<end>]         Show commits which affected lines <start> through <end> in pathspec. Omitting <end> defaults to EOF.
    --no-merges,  -M                         Show commits which have a maximum of one parent. See --no-merges of git-log(1).
    --no-patch,   -N                         Suppress diff output. See --no-patch of git-log(1).
    --no-renames, -O                         Disable rename detection. See --no-renames of git-log(1).
    --pager,      -p                         Force pager when invoking git-log(1). Overrides follow.pager.disabled config value.
    --pickaxe,    -P <string>                Show commits which change the number of occurrences of <string> in pathspec. See -S of git-log(1).
    --range,      -r <startref> [<endref>]   Show commits in range <startref> to <endref> which affected pathspec. Omitting <endref> defaults to HEAD. See gitrevisions(1).
    --reverse,    -R                         Show commits in reverse chronological order. See --walk-reflogs of git-log(1).
    --tag,        -t <tagref>                Show commits for pathspec, specific to a tag.
    --total,      -T                         Show total number of commits for pathspec.
    --version,    -V                         Show current release version.
"""

_NARGS = {
    (0, 0): 0,
    (0, 1): "?",
    (1, 1): None,
    (1, 2): "+",
}


class LogOptionAction(argparse.Action):
    """
    Record a git-log option in the ordered options map.

    Values beyond the option's arity are kept aside so that a pathspec
    swallowed by a variable-arity option can be reclaimed afterwards.
    """

    def __init__(self, option_strings, dest, option_name, max_args, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.option_name = option_name
        self.max_args = max_args

    def __call__(self, parser, namespace, values, option_string=None):
        if self.nargs == 0:
            arg = True
        elif isinstance(values, list) and self.nargs == "+":
            # One spare token may be the pathspec; more is an error.
            if len(values) > self.max_args + 1:
                parser.error(f"{option_string} takes at most {self.max_args} arguments")
            arg = tuple(values)
        else:
            arg = values

        set_args(self.option_name, arg, namespace.options, DEFAULT_ARGS)
        prune_conflicts(self.option_name, CONFLICTS, namespace.options)

        if self.nargs in ("?", "+"):
            namespace.variadic.append(self.option_name)


class RefAction(argparse.Action):
    """Queue a --branch/--tag request for binding after parsing."""

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.refs.append((self.dest, values))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git follow",
        usage="git follow [OPTIONS] [--] pathspec",
        description="Follow lifetime changes of a pathspec in Git.",
        add_help=False,
    )

    parser.add_argument("pathspec", nargs="?", help="Path whose history to show.")

    for spec in OPTIONS:
        if spec.name in ("branch", "tag"):
            parser.add_argument(*spec.flags, dest=spec.name, action=RefAction)
        elif spec.log_option:
            parser.add_argument(
                *spec.flags,
                dest="options",
                action=LogOptionAction,
                option_name=spec.name,
                max_args=spec.max_args,
                nargs=_NARGS[(spec.min_args, spec.max_args)],
                default=argparse.SUPPRESS,
            )

    parser.add_argument(*OPTIONS_BY_NAME["pager"].flags, dest="force_pager", action="store_true")
    parser.add_argument(*OPTIONS_BY_NAME["total"].flags, nargs="?", const=True, default=False)
    parser.add_argument(*OPTIONS_BY_NAME["version"].flags, action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def _reclaim_pathspec(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """
    Move a token swallowed by --last/--lines/--range back to the pathspec.
    """

    for name in reversed(args.variadic):
        if name not in args.options:
            continue

        value = args.options[name]
        if name == "last":
            # Malformed counts go to git as given once a pathspec is known.
            if value is None or is_int(value) or args.pathspec is not None:
                continue
            spare, kept = value, None
        else:
            values = list(value)
            if len(values) > 2:
                if args.pathspec is not None:
                    parser.error(f"unexpected argument {values[2]!r} for --{name}")
                spare, kept = values[2], tuple(values[:2])
            elif len(values) == 2 and args.pathspec is None:
                if name == "lines" and is_int(values[1]):
                    continue
                spare, kept = values[1], tuple(values[:1])
            else:
                continue

        args.pathspec = spare
        set_args(name, kept, args.options, DEFAULT_ARGS)
        return


def parse_config(argv: Optional[List[str]] = None) -> Tuple[Config, bool]:
    """
    Parse ``argv`` into a Config; the second value reports --help.
    """

    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    namespace = argparse.Namespace(options={}, refs=[], variadic=[])
    args = parser.parse_args(argv, namespace=namespace)
    _reclaim_pathspec(parser, args)

    config = Config(
        pathspec=args.pathspec,
        options=args.options,
        refs=args.refs,
        force_pager=args.force_pager,
        total=args.total is not False,
        total_pathspec=args.total if isinstance(args.total, str) else None,
        version=args.version,
        verbosity=args.verbose,
        argv=list(argv),
    )
    return config, args.help


def main(argv: Optional[List[str]] = None) -> int:
    config, show_help = parse_config(argv)

    if show_help:
        print(USAGE_SYNOPSIS)
        return 0

    configure_logging(verbosity=config.verbosity)

    try:
        if config.version:
            outcome = show_version()
        else:
            outcome = run_follow(config, GitInspector())
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except InvalidRepositoryError as exc:
        print(str(exc), file=sys.stderr)
        print(exc.hint, file=sys.stderr)
        return 1
    except UsageError as exc:
        print(f"git-follow: error: {exc}", file=sys.stderr)
        print(USAGE_SYNOPSIS, file=sys.stderr)
        return 2
    except GitFollowError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    sys.stdout.write(outcome.output)
    return outcome.exit_code


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
