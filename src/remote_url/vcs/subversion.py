"""Subversion placeholder backend."""

from pathlib import Path

from remote_url.vcs.base import VCSBackend


class SubversionBackend(VCSBackend):
    """Recognized by name but never detected."""

    name = "subversion"
    binary = "svn"

    def probe_root(self) -> Path | None:
        return None
