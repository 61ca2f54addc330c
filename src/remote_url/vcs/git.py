"""Git backend using subprocess."""

import os
from pathlib import Path

import structlog

from remote_url.core.exceptions import VCSProbeError
from remote_url.vcs.base import VCSBackend

logger = structlog.get_logger(__name__)


class GitBackend(VCSBackend):
    """Queries a Git working tree through the git CLI.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    name = "git"
    binary = "git"

    def probe_root(self) -> Path | None:
        try:
            root = self._run("rev-parse", "--show-toplevel")
        except VCSProbeError as e:
            logger.debug("git probe failed", cwd=str(self.cwd), error=e.message)
            return None
        return Path(root) if root else None

    def get_remote_url(self, remote: str) -> str | None:
        # `git config --get` exits 1 when the key is missing
        try:
            url = self._run("config", "--get", f"remote.{remote}.url")
        except VCSProbeError as e:
            logger.debug("git remote lookup failed", remote=remote, error=e.message)
            return None
        return url or None

    def get_current_branch(self) -> str | None:
        # Fails on a detached HEAD
        try:
            branch = self._run("symbolic-ref", "--short", "HEAD")
        except VCSProbeError as e:
            logger.debug("git symbolic-ref failed", error=e.message, **e.details)
            return None
        return branch or None

    def get_head_commit(self) -> str | None:
        try:
            commit = self._run("rev-parse", "--verify", "HEAD")
        except VCSProbeError as e:
            logger.debug("git rev-parse HEAD failed", error=e.message)
            return None
        return commit or None

    def resolve_tracked_path(self, absolute_path: str | Path) -> str | None:
        """Ask git whether a file is tracked at HEAD.

        Returns the path relative to the repository root, or None for
        untracked files and paths outside the repository.
        """
        # Resolve only the directory so a tracked symlink keeps its own name
        absolute_path = os.fspath(absolute_path)
        real_path = os.path.join(
            os.path.realpath(os.path.dirname(absolute_path)),
            os.path.basename(absolute_path),
        )
        try:
            output = self._run(
                "ls-tree", "-z", "--full-name", "--name-only", "HEAD", real_path
            )
        except VCSProbeError as e:
            logger.debug("git ls-tree failed", path=real_path, error=e.message)
            return None

        # -z keeps non-ASCII names unquoted
        entries = [entry for entry in output.split("\0") if entry]
        return entries[0] if entries else None
