"""Mercurial backend (repository detection only)."""

from pathlib import Path

import structlog

from remote_url.core.exceptions import VCSProbeError
from remote_url.vcs.base import VCSBackend

logger = structlog.get_logger(__name__)


class MercurialBackend(VCSBackend):
    """Detects Mercurial working trees via ``hg root``.

    Remote, branch and tracked-path queries are not implemented.
    """

    name = "mercurial"
    binary = "hg"

    def probe_root(self) -> Path | None:
        try:
            root = self._run("root")
        except VCSProbeError as e:
            logger.debug("hg probe failed", cwd=str(self.cwd), error=e.message)
            return None
        return Path(root).resolve() if root else None
