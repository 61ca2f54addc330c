"""In-memory VCS backends for tests."""

from pathlib import Path

from remote_url.core.exceptions import UnsupportedVCSError
from remote_url.vcs.base import VCSBackend


class FakeVCSBackend(VCSBackend):
    """In-memory VCS backend; records every query it answers."""

    name = "git"

    def __init__(
        self,
        root: str = "/srv/site",
        remotes: dict[str, str] | None = None,
        branch: str | None = "main",
        head_commit: str | None = "0123456789abcdef0123456789abcdef01234567",
        tracked: set[str] | None = None,
        cwd: str | Path | None = None,
        timeout: float = 10.0,
        **_: object,
    ) -> None:
        super().__init__(cwd=root, timeout=timeout)
        self.root = root
        self.remotes = {} if remotes is None else remotes
        self.branch = branch
        self.head_commit = head_commit
        self.tracked = set() if tracked is None else tracked
        self.calls: list[str] = []

    def probe_root(self) -> Path | None:
        self.calls.append("probe_root")
        return Path(self.root) if self.root else None

    def get_remote_url(self, remote: str) -> str | None:
        self.calls.append("get_remote_url")
        return self.remotes.get(remote)

    def get_current_branch(self) -> str | None:
        self.calls.append("get_current_branch")
        return self.branch

    def get_head_commit(self) -> str | None:
        self.calls.append("get_head_commit")
        return self.head_commit

    def resolve_tracked_path(self, absolute_path: str | Path) -> str | None:
        self.calls.append("resolve_tracked_path")
        absolute_path = str(absolute_path)
        prefix = self.root.rstrip("/") + "/"
        if not absolute_path.startswith(prefix):
            return None
        relative = absolute_path[len(prefix):]
        return relative if relative in self.tracked else None


class FakeMercurialBackend(FakeVCSBackend):
    """Detected like Mercurial; remote queries are unsupported."""

    name = "mercurial"

    def get_remote_url(self, remote: str) -> str | None:
        raise UnsupportedVCSError(self.name, "remote URL lookup")


def backend_factory(backend: VCSBackend):
    """Wrap a prebuilt backend so the locator can 'construct' it."""
    return lambda cwd=None, timeout=10.0: backend
