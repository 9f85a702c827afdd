"""
Custom exception types used across git-follow.

Each error keeps the offending value as an attribute so the CLI can
decide how to report it; the user-facing text is only produced when the
exception is rendered with str().
"""

from __future__ import annotations

INVALID_REPO_HINT = (
    "FYI: If you don't want to change directories, you can run "
    "'git -C /path/to/repository follow ...'"
)


class GitFollowError(Exception):
    """Base class for all git-follow specific errors."""


class GitError(GitFollowError):
    """Raised when git operations fail."""


class UsageError(GitFollowError):
    """Raised when the command line cannot be turned into a git-log call."""


class ConfigError(GitFollowError):
    """Raised when a follow.* setting holds an unusable value."""


class RefConflictError(GitFollowError):
    """Raised when more than one --branch/--tag option is given."""

    def __str__(self) -> str:
        return "Only one --branch or one --tag option can be specified at a time."


class InvalidRefError(GitFollowError):
    """Raised when a branch or tag is not present in the repository."""

    def __init__(self, kind: str, ref: str) -> None:
        super().__init__(kind, ref)
        self.kind = kind
        self.ref = ref

    def __str__(self) -> str:
        return f"{self.ref} is not a valid {self.kind}."


class InvalidRepositoryError(GitFollowError):
    """Raised when the current directory is not inside a work tree."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path
        self.hint = INVALID_REPO_HINT

    def __str__(self) -> str:
        return f"{self.path} is not a Git repository."


class InvalidPathspecError(GitFollowError):
    """Raised when the pathspec does not exist at the selected ref."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"{self.path} is not a valid pathspec."
