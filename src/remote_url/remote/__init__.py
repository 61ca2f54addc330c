"""Remote URL parsing and resolution."""

from remote_url.remote.parser import parse_remote_url
from remote_url.remote.resolver import read_remote, resolve_branch, resolve_remote

__all__ = ["parse_remote_url", "read_remote", "resolve_branch", "resolve_remote"]
