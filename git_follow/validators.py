"""
Predicates used to validate git-follow input.

The repository checks delegate to a RepositoryInspector and always
answer with a boolean.
"""

from __future__ import annotations

import re
from typing import Optional

from .git_adapter import RepositoryInspector

_INT_RE = re.compile(r"[0-9]+")


def is_int(value: Optional[str]) -> bool:
    """
    Return True if ``value`` is a non-empty run of decimal digits.

    Signs and surrounding whitespace are rejected.
    """

    if value is None:
        return False
    return _INT_RE.fullmatch(value) is not None


def is_pathspec(inspector: RepositoryInspector, ref: str, path: str) -> bool:
    """Return True if ``path`` exists as an object at ``ref``."""

    return inspector.object_exists(ref, path)


def is_repo(inspector: RepositoryInspector) -> bool:
    """Return True if the current directory is inside a Git work tree."""

    return inspector.is_inside_work_tree()
