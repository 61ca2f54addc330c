"""Detects which VCS manages a working tree."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

import structlog

from remote_url.vcs.base import DEFAULT_TIMEOUT, VCSBackend
from remote_url.vcs.git import GitBackend
from remote_url.vcs.mercurial import MercurialBackend
from remote_url.vcs.subversion import SubversionBackend

logger = structlog.get_logger(__name__)

BackendFactory = Callable[..., VCSBackend]

# Probe order for auto-detection
SUPPORTED_VCS: dict[str, BackendFactory] = {
    "git": GitBackend,
    "mercurial": MercurialBackend,
    "subversion": SubversionBackend,
}


@dataclass(frozen=True)
class VCSLocation:
    """Outcome of VCS detection.

    ``vcs`` is kept even when ``ok`` is False, for diagnostics.
    ``backend`` is bound to the repository root when ``ok`` is True.
    """

    vcs: str | None
    ok: bool
    root: Path | None = None
    backend: VCSBackend | None = None


def locate(
    explicit_vcs: str | None = None,
    cwd: str | Path | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    backends: Mapping[str, BackendFactory] | None = None,
) -> VCSLocation:
    """Find the VCS and repository root for ``cwd``.

    With ``explicit_vcs`` only that VCS is probed; otherwise every
    supported VCS is probed in order and the first hit wins. Probe
    failures are never raised.
    """
    backends = SUPPORTED_VCS if backends is None else backends

    if explicit_vcs:
        factory = backends.get(explicit_vcs)
        if factory is None:
            logger.warning(
                "Unrecognized VCS", vcs=explicit_vcs, supported=list(backends)
            )
            return VCSLocation(vcs=explicit_vcs, ok=False)
        return _probe(explicit_vcs, factory, cwd, timeout)

    for name, factory in backends.items():
        location = _probe(name, factory, cwd, timeout)
        if location.ok:
            return location

    logger.debug("No supported VCS detected", cwd=str(cwd or Path.cwd()))
    return VCSLocation(vcs=None, ok=False)


def _probe(
    name: str, factory: BackendFactory, cwd: str | Path | None, timeout: float
) -> VCSLocation:
    root = factory(cwd=cwd, timeout=timeout).probe_root()
    if root is None:
        return VCSLocation(vcs=name, ok=False)

    logger.debug("VCS detected", vcs=name, root=str(root))
    # Later queries run from the root so they do not depend on cwd
    return VCSLocation(
        vcs=name,
        ok=True,
        root=root,
        backend=factory(cwd=root, timeout=timeout),
    )
