"""
Binding of --branch/--tag values to a single refspec.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .errors import RefConflictError, InvalidRefError
from .git_adapter import RepositoryInspector

LOG = logging.getLogger(__name__)

_ESCAPE_RE = re.compile(r"\033\[\d*(;\d*)*m")

REF_KINDS = ("branch", "tag")


def list_refspecs(kind: str, inspector: RepositoryInspector) -> List[str]:
    """
    Return the cleaned-up names git lists for ``kind``.

    Branches include remote-tracking branches. Current-ref markers and
    colour escapes are removed and each entry is left-trimmed.
    """

    refs = inspector.list_refs(kind)
    if kind == "branch":
        refs += inspector.list_refs(kind, remote=True)

    refs = refs.replace("*", "")
    refs = _ESCAPE_RE.sub("", refs)

    return [entry.lstrip() for entry in refs.split("\n") if entry.lstrip()]


def bind_refspec(
    kind: str,
    ref: str,
    refspec: Optional[str],
    inspector: RepositoryInspector,
) -> str:
    """
    Validate ``ref`` as a ``kind`` and return it as the bound refspec.

    ``refspec`` is the currently bound value; binding a second ref in
    the same invocation is an error whether or not ``ref`` exists.
    """

    if refspec is not None:
        raise RefConflictError()

    if kind not in REF_KINDS:
        raise ValueError(f"unknown ref kind: {kind}")

    refspecs = list_refspecs(kind, inspector)
    LOG.debug("Known %s refs: %s", kind, refspecs)

    if ref not in refspecs:
        raise InvalidRefError(kind, ref)

    return ref
