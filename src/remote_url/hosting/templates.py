"""URL templates for hosting services.

Each service maps to a ServiceTemplate holding the path tag of every link
kind. gitlab shares github's template object; both use the same routes.
"""

import posixpath
from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from remote_url.core.exceptions import UnknownServiceError
from remote_url.core.models.remote import RemoteDescriptor
from remote_url.core.models.template import ServiceTemplate
from remote_url.core.models.urls import UrlSet

GITHUB_TEMPLATE = ServiceTemplate(
    view="blob",
    raw="raw",
    edit="edit",
    blame="blame",
    history="commits",
)

BITBUCKET_TEMPLATE = ServiceTemplate(
    view="src",
    raw="raw",
    edit="src",
    blame="annotate",
    history="history-node",
    edit_query="?mode=edit&spa=0",
)

BUILTIN_TEMPLATES: Mapping[str, ServiceTemplate] = MappingProxyType(
    {
        "github": GITHUB_TEMPLATE,
        "gitlab": GITHUB_TEMPLATE,
        "bitbucket": BITBUCKET_TEMPLATE,
    }
)

# Reserved characters left as-is in the path; "?" and "#" are escaped
# because they would start a query or fragment.
_PATH_SAFE = "/;,:@&=+$!*'()"


def merge_templates(
    custom: Mapping[str, ServiceTemplate] | None = None,
) -> Mapping[str, ServiceTemplate]:
    """Return the built-in templates overlaid with custom ones."""
    if not custom:
        return BUILTIN_TEMPLATES
    merged = dict(BUILTIN_TEMPLATES)
    merged.update({name.lower(): template for name, template in custom.items()})
    return MappingProxyType(merged)


def encode_path(*segments: str) -> str:
    """Join segments into one absolute URL path and percent-encode it.

    The joined path is encoded once so "/" inside a segment stays a
    separator. Duplicate slashes collapse and the result has exactly one
    leading slash.
    """
    joined = "/".join(segment for segment in segments if segment)
    normalized = posixpath.normpath("/" + joined).lstrip("/")
    return quote("/" + normalized, safe=_PATH_SAFE)


def get_template(
    service_id: str, templates: Mapping[str, ServiceTemplate] | None = None
) -> ServiceTemplate:
    templates = BUILTIN_TEMPLATES if templates is None else templates
    try:
        return templates[service_id]
    except KeyError:
        raise UnknownServiceError(service_id, list(templates)) from None


def build_url_set(
    service_id: str,
    remote: RemoteDescriptor,
    file_path: str,
    templates: Mapping[str, ServiceTemplate] | None = None,
) -> UrlSet:
    """Build the view/raw/edit/blame/history links for a repo-relative file.

    Raises UnknownServiceError if ``service_id`` has no template.
    """
    template = get_template(service_id, templates)
    base_url = remote.base_url

    def link(tag: str) -> str:
        return base_url + encode_path(remote.path_to_repo, tag, remote.branch, file_path)

    return UrlSet(
        view=link(template.view),
        raw=link(template.raw),
        edit=link(template.edit) + template.edit_query,
        blame=link(template.blame),
        history=link(template.history),
    )
