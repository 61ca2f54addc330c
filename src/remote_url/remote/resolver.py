"""Resolves the remote descriptor of the current repository."""

import structlog

from remote_url.core.exceptions import RemoteResolutionError
from remote_url.core.models.remote import ParsedRemoteUrl, Protocol, RemoteDescriptor
from remote_url.remote.parser import parse_remote_url
from remote_url.vcs.base import VCSBackend

logger = structlog.get_logger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def read_remote(backend: VCSBackend, remote_name: str = "origin") -> ParsedRemoteUrl:
    """Read and parse the URL configured for ``remote_name``."""
    raw_url = backend.get_remote_url(remote_name)
    if not raw_url:
        raise RemoteResolutionError(
            f"Remote {remote_name!r} is not configured",
            details={"remote": remote_name, "vcs": backend.name},
        )
    return parse_remote_url(raw_url)


def resolve_branch(backend: VCSBackend) -> str:
    """Return the current branch, or the HEAD commit on a detached HEAD."""
    branch = backend.get_current_branch()
    if branch:
        return branch

    commit = backend.get_head_commit()
    if commit:
        logger.warning(
            "HEAD is detached, linking to commit instead of a branch",
            commit=commit,
        )
        return commit

    raise RemoteResolutionError(
        "Cannot determine the current branch or commit",
        details={"vcs": backend.name},
    )


def web_port(parsed: ParsedRemoteUrl) -> int | None:
    """Port to keep in web links.

    Only http(s) remotes carry a web port; ssh and git ports belong to
    other daemons. Default ports are dropped.
    """
    if parsed.port is None or parsed.protocol not in _DEFAULT_PORTS:
        return None
    if parsed.port == _DEFAULT_PORTS[parsed.protocol]:
        return None
    return parsed.port


def resolve_remote(
    backend: VCSBackend,
    remote_name: str = "origin",
    use_https: bool = True,
    parsed: ParsedRemoteUrl | None = None,
) -> RemoteDescriptor:
    """Build the RemoteDescriptor for ``remote_name``.

    Raises RemoteResolutionError if the remote is missing or unparsable,
    or if no branch can be determined; UnsupportedVCSError for backends
    other than git.
    """
    if parsed is None:
        parsed = read_remote(backend, remote_name)
    if not parsed.resource:
        raise RemoteResolutionError(
            f"Remote {remote_name!r} has no host to link to",
            details={"remote": remote_name},
        )

    descriptor = RemoteDescriptor(
        protocol=Protocol.HTTPS if use_https else Protocol.HTTP,
        host=parsed.resource,
        port=web_port(parsed),
        path_to_repo=parsed.full_name,
        branch=resolve_branch(backend),
    )
    logger.debug(
        "Remote resolved",
        remote=remote_name,
        base_url=descriptor.base_url,
        path_to_repo=descriptor.path_to_repo,
        branch=descriptor.branch,
    )
    return descriptor
