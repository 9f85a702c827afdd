from typing import Dict, List, Optional, Sequence

import pytest

from git_follow.git_adapter import RepositoryInspector


class FakeInspector(RepositoryInspector):
    """
    In-memory RepositoryInspector that records the calls it receives.
    """

    def __init__(
        self,
        *,
        inside: bool = True,
        objects: Sequence[str] = (),
        branches: str = "",
        remote_branches: str = "",
        tags: str = "",
        config: Optional[Dict[str, str]] = None,
        hashes: Sequence[str] = (),
    ):
        self.inside = inside
        self.objects = set(objects)
        self.branches = branches
        self.remote_branches = remote_branches
        self.tags = tags
        self.config = dict(config or {})
        self.hashes = list(hashes)
        self.calls: List[tuple] = []

    def is_inside_work_tree(self) -> bool:
        self.calls.append(("is_inside_work_tree",))
        return self.inside

    def object_exists(self, ref: str, path: str) -> bool:
        self.calls.append(("object_exists", ref, path))
        return f"{ref}:{path}" in self.objects

    def list_refs(self, kind: str, remote: bool = False) -> str:
        self.calls.append(("list_refs", kind, remote))
        if kind == "tag":
            return self.tags
        return self.remote_branches if remote else self.branches

    def read_config(self, name: str) -> Optional[str]:
        self.calls.append(("read_config", name))
        return self.config.get(name)

    def log_hashes(self, args: Sequence[str], pathspec: str) -> List[str]:
        self.calls.append(("log_hashes", list(args), pathspec))
        return list(self.hashes)


@pytest.fixture
def make_inspector():
    return FakeInspector
