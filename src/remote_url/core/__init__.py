"""Core domain models and exceptions for remote-url."""

from remote_url.core.exceptions import (
    ConfigurationError,
    RemoteResolutionError,
    RemoteURLError,
    RemoteURLParseError,
    UnknownServiceError,
    UnsupportedVCSError,
    VCSProbeError,
)
from remote_url.core.models import (
    ParsedRemoteUrl,
    Protocol,
    RemoteDescriptor,
    ResolverConfig,
    ServiceTemplate,
    UrlSet,
)

__all__ = [
    # Models
    "ParsedRemoteUrl",
    "Protocol",
    "RemoteDescriptor",
    "ResolverConfig",
    "ServiceTemplate",
    "UrlSet",
    # Exceptions
    "RemoteURLError",
    "ConfigurationError",
    "UnknownServiceError",
    "RemoteResolutionError",
    "RemoteURLParseError",
    "UnsupportedVCSError",
    "VCSProbeError",
]
