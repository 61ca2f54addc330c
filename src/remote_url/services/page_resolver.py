"""Per-page URL resolution service."""

from collections.abc import Mapping
from pathlib import Path

import structlog
from pydantic import ValidationError

from remote_url.core.exceptions import ConfigurationError
from remote_url.core.models.config import ResolverConfig
from remote_url.core.models.remote import RemoteDescriptor
from remote_url.core.models.template import ServiceTemplate
from remote_url.core.models.urls import UrlSet
from remote_url.hosting.detector import detect_service
from remote_url.hosting.templates import build_url_set, merge_templates
from remote_url.remote.resolver import read_remote, resolve_remote
from remote_url.vcs.base import VCSBackend
from remote_url.vcs.locator import BackendFactory, locate

logger = structlog.get_logger(__name__)


class PageUrlResolver:
    """Maps absolute source-file paths to their hosting-service links.

    Holds only state fixed at initialization. A resolver without a
    backend is disabled and returns None for every file without running
    any VCS command.
    """

    def __init__(
        self,
        backend: VCSBackend | None,
        remote: RemoteDescriptor | None = None,
        service: str | None = None,
        templates: Mapping[str, ServiceTemplate] | None = None,
        vcs: str | None = None,
        root: Path | None = None,
    ) -> None:
        if backend is not None and (remote is None or service is None):
            raise ValueError("An enabled resolver needs a remote and a service")
        self._backend = backend
        self._remote = remote
        self._service = service
        self._templates = merge_templates(None) if templates is None else templates
        self._vcs = vcs if vcs is not None else (backend.name if backend else None)
        self._root = root

    @classmethod
    def disabled(cls, vcs: str | None = None) -> "PageUrlResolver":
        return cls(backend=None, vcs=vcs)

    @property
    def enabled(self) -> bool:
        return self._backend is not None

    @property
    def vcs(self) -> str | None:
        return self._vcs

    @property
    def root(self) -> Path | None:
        return self._root

    @property
    def remote(self) -> RemoteDescriptor | None:
        return self._remote

    @property
    def service(self) -> str | None:
        return self._service

    def repo_relative_path(self, absolute_path: str | Path) -> str | None:
        """Path of a tracked file relative to the repository root."""
        if self._backend is None:
            return None
        return self._backend.resolve_tracked_path(absolute_path)

    def for_file(self, absolute_path: str | Path) -> UrlSet | None:
        """Return the links for a file, or None if it is not tracked.

        Raises UnknownServiceError if the configured service has no template.
        """
        relative_path = self.repo_relative_path(absolute_path)
        if not relative_path:
            return None
        return build_url_set(self._service, self._remote, relative_path, self._templates)

    def __repr__(self) -> str:
        if not self.enabled:
            return f"PageUrlResolver(disabled, vcs={self._vcs!r})"
        return (
            f"PageUrlResolver(vcs={self._vcs!r}, service={self._service!r}, "
            f"base_url={self._remote.base_url!r}, branch={self._remote.branch!r})"
        )


def _coerce_config(config: ResolverConfig | Mapping | None) -> ResolverConfig:
    if config is None:
        return ResolverConfig()
    if isinstance(config, ResolverConfig):
        return config
    try:
        return ResolverConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid remote-url options: {e}", details={"errors": e.errors()}
        ) from e


def initialize(
    config: ResolverConfig | Mapping | None = None,
    backends: Mapping[str, BackendFactory] | None = None,
) -> PageUrlResolver:
    """Detect the VCS, resolve the remote and return a PageUrlResolver.

    Returns a disabled resolver when no supported VCS is found. Raises
    RemoteResolutionError or UnsupportedVCSError when the repository is
    found but its remote cannot be resolved.
    """
    config = _coerce_config(config)

    location = locate(
        config.vcs, cwd=config.cwd, timeout=config.process_timeout, backends=backends
    )
    if not location.ok:
        logger.warning(
            "No supported VCS detected, remote URLs disabled",
            vcs=location.vcs,
            cwd=config.cwd,
        )
        return PageUrlResolver.disabled(vcs=location.vcs)

    backend = location.backend
    templates = merge_templates(config.templates)

    parsed = read_remote(backend, config.remote)
    if config.service:
        service = config.service
    else:
        service = detect_service(parsed.source, parsed.resource, known=templates)
    remote = resolve_remote(backend, config.remote, config.https, parsed=parsed)

    logger.info(
        "Remote URL resolver initialized",
        vcs=location.vcs,
        root=str(location.root),
        service=service,
        base_url=remote.base_url,
        branch=remote.branch,
    )
    return PageUrlResolver(
        backend=backend,
        remote=remote,
        service=service,
        templates=templates,
        vcs=location.vcs,
        root=location.root,
    )
