"""Resolver services for remote-url."""

from remote_url.services.page_resolver import PageUrlResolver, initialize
from remote_url.services.plugin import RemoteUrlPlugin

__all__ = [
    "PageUrlResolver",
    "RemoteUrlPlugin",
    "initialize",
]
