"""VCS integration module for remote-url."""

from remote_url.vcs.base import VCSBackend
from remote_url.vcs.git import GitBackend
from remote_url.vcs.locator import SUPPORTED_VCS, VCSLocation, locate
from remote_url.vcs.mercurial import MercurialBackend
from remote_url.vcs.subversion import SubversionBackend

__all__ = [
    "SUPPORTED_VCS",
    "GitBackend",
    "MercurialBackend",
    "SubversionBackend",
    "VCSBackend",
    "VCSLocation",
    "locate",
]
