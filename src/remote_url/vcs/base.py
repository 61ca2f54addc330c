"""Base interface for version-control backends."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from remote_url.core.exceptions import UnsupportedVCSError, VCSProbeError

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class VCSBackend(ABC):
    """Narrow interface to a VCS command-line tool.

    Every query runs one external process from ``cwd``. Subclasses only
    implement the queries their VCS supports; the others raise
    ``UnsupportedVCSError``.
    """

    name: str = ""
    binary: str | None = None

    def __init__(self, cwd: str | Path | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._cwd = Path(cwd).resolve() if cwd is not None else Path.cwd()
        self._timeout = timeout

    @property
    def cwd(self) -> Path:
        return self._cwd

    @property
    def timeout(self) -> float:
        return self._timeout

    def _run(self, *args: str) -> str:
        """Run the VCS binary and return stripped stdout.

        Raises VCSProbeError on a non-zero exit, a missing binary or a timeout.
        """
        if self.binary is None:
            raise VCSProbeError(f"{self.name} has no command-line binary")
        command = [self.binary, *args]
        try:
            result = subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
            )
        except subprocess.CalledProcessError as e:
            raise VCSProbeError(
                f"{self.binary} exited with status {e.returncode}",
                details={"command": command, "stderr": (e.stderr or "").strip()},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise VCSProbeError(
                f"{self.binary} timed out after {self._timeout}s",
                details={"command": command},
            ) from e
        except OSError as e:
            raise VCSProbeError(
                f"Cannot run {self.binary}: {e}",
                details={"command": command},
            ) from e
        return result.stdout.strip()

    @abstractmethod
    def probe_root(self) -> Path | None:
        """Return the repository root containing ``cwd``, or None."""

    def get_remote_url(self, remote: str) -> str | None:
        """Return the configured URL of a named remote, or None."""
        raise UnsupportedVCSError(self.name, "remote URL lookup")

    def get_current_branch(self) -> str | None:
        """Return the short symbolic name of the current head, or None."""
        raise UnsupportedVCSError(self.name, "branch lookup")

    def get_head_commit(self) -> str | None:
        """Return the commit id of the current head, or None."""
        raise UnsupportedVCSError(self.name, "commit lookup")

    def resolve_tracked_path(self, absolute_path: str | Path) -> str | None:
        """Return the repo-relative path of a tracked file, or None."""
        raise UnsupportedVCSError(self.name, "tracked path lookup")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cwd={str(self._cwd)!r})"
