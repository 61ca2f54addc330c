"""remote-url: hosting-service links for files tracked in a VCS."""

from remote_url.core.models import ResolverConfig, UrlSet
from remote_url.services import PageUrlResolver, RemoteUrlPlugin, initialize

__version__ = "0.1.0"

__all__ = [
    "PageUrlResolver",
    "RemoteUrlPlugin",
    "ResolverConfig",
    "UrlSet",
    "initialize",
]
