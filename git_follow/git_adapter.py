"""
Git integration for git-follow.

All questions git-follow asks about the repository (is this a work tree,
does a ref or an object exist, what does a config key hold) go through a
RepositoryInspector. GitInspector answers them by shelling out to the
git CLI; tests substitute a fake implementation.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .errors import GitError

LOG = logging.getLogger(__name__)


def _run_git(
    args: Sequence[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.

    Raises GitError when git cannot be executed or exits non-zero.
    """

    cmd = ["git", *args]
    LOG.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:  # noqa: BLE001
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        LOG.debug("git stderr: %s", completed.stderr)
        stderr = completed.stderr.strip()
        message = f"git command failed: {' '.join(cmd)}"
        if stderr:
            message = f"{message}: {stderr}"
        raise GitError(message)

    return completed


def run_log(argv: Sequence[str], cwd: Optional[str] = None) -> int:
    """
    Execute a fully assembled git-log command line.

    Output goes straight to the terminal (and git's pager); the exit
    status of git is returned unchanged.
    """

    LOG.debug("Running git-log: %s", " ".join(argv))
    try:
        completed = subprocess.run(list(argv), cwd=cwd, check=False)
    except OSError as exc:  # noqa: BLE001
        raise GitError(f"failed to execute git: {exc}") from exc
    return completed.returncode


class RepositoryInspector(ABC):
    """
    Abstract interface for the yes/no questions asked of a repository.
    """

    @abstractmethod
    def is_inside_work_tree(self) -> bool:
        """Return True if the current location is inside a work tree."""

    @abstractmethod
    def object_exists(self, ref: str, path: str) -> bool:
        """Return True if ``path`` names an object at ``ref``."""

    @abstractmethod
    def list_refs(self, kind: str, remote: bool = False) -> str:
        """
        Return the raw listing for ``kind`` ("branch" or "tag").

        The listing is returned as git prints it, including current-ref
        markers and colour escapes; callers are responsible for cleaning
        it up. ``remote`` selects remote-tracking branches.
        """

    @abstractmethod
    def read_config(self, name: str) -> Optional[str]:
        """Return the raw value of git config key ``name``, or None."""

    @abstractmethod
    def log_hashes(self, args: Sequence[str], pathspec: str) -> List[str]:
        """Return abbreviated hashes of commits touching ``pathspec``."""


class GitInspector(RepositoryInspector):
    """
    RepositoryInspector backed by the git executable.
    """

    def __init__(self, cwd: Optional[str] = None) -> None:
        self.cwd = cwd

    def is_inside_work_tree(self) -> bool:
        try:
            _run_git(["rev-parse", "--is-inside-work-tree"], cwd=self.cwd)
        except GitError:
            return False
        return True

    def object_exists(self, ref: str, path: str) -> bool:
        try:
            _run_git(["cat-file", "-e", f"{ref}:{path}"], cwd=self.cwd)
        except GitError:
            return False
        return True

    def list_refs(self, kind: str, remote: bool = False) -> str:
        if remote:
            args = [kind, "-r"]
        else:
            args = [kind, "--list"]
        try:
            return _run_git(args, cwd=self.cwd).stdout
        except GitError as exc:
            LOG.debug("Could not list %s refs: %s", kind, exc)
            return ""

    def read_config(self, name: str) -> Optional[str]:
        # git config exits 1 for a missing key; that is an answer, not a failure.
        try:
            return _run_git(["config", name], cwd=self.cwd).stdout
        except GitError:
            return None

    def log_hashes(self, args: Sequence[str], pathspec: str) -> List[str]:
        output = _run_git(
            ["log", *args, "--format=%h", "--", pathspec],
            cwd=self.cwd,
        ).stdout
        return [line for line in output.splitlines() if line.strip()]
