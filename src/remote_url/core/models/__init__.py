"""Domain models for remote-url."""

from remote_url.core.models.config import ResolverConfig
from remote_url.core.models.remote import ParsedRemoteUrl, Protocol, RemoteDescriptor
from remote_url.core.models.template import ServiceTemplate
from remote_url.core.models.urls import UrlSet

__all__ = [
    "ParsedRemoteUrl",
    "Protocol",
    "RemoteDescriptor",
    "ResolverConfig",
    "ServiceTemplate",
    "UrlSet",
]
