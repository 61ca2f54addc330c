"""Hosting service detection from a remote host."""

import re
from collections.abc import Iterable

import structlog

from remote_url.hosting.templates import BUILTIN_TEMPLATES

logger = structlog.get_logger(__name__)

KNOWN_DOMAINS = {
    "github.com": "github",
    "gitlab.com": "gitlab",
    "bitbucket.org": "bitbucket",
}

FALLBACK_SERVICE = "gitlab"

_SUBDOMAIN_RE = re.compile(r"^(\w+)\.", re.ASCII)


def detect_service(
    source: str,
    resource: str | None = None,
    known: Iterable[str] | None = None,
) -> str:
    """Infer the hosting service for a remote.

    ``source`` is matched against the public hosting domains. Otherwise the
    leading subdomain label of ``resource`` is used when it names a known
    template, e.g. ``gitlab.example.org`` -> ``gitlab``. Anything else
    falls back to gitlab, since self-hosted GitLab instances often have no
    telling subdomain.
    """
    if source in KNOWN_DOMAINS:
        return KNOWN_DOMAINS[source]

    resource = resource if resource is not None else source
    known = set(BUILTIN_TEMPLATES if known is None else known)

    match = _SUBDOMAIN_RE.match(resource)
    if match and match.group(1).lower() in known:
        return match.group(1).lower()

    logger.info(
        "Hosting service not recognized, using fallback",
        host=resource,
        service=FALLBACK_SERVICE,
    )
    return FALLBACK_SERVICE
