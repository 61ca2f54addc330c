"""Hosting service detection and URL templates."""

from remote_url.hosting.detector import FALLBACK_SERVICE, detect_service
from remote_url.hosting.templates import (
    BITBUCKET_TEMPLATE,
    BUILTIN_TEMPLATES,
    GITHUB_TEMPLATE,
    build_url_set,
    encode_path,
    merge_templates,
)

__all__ = [
    "BITBUCKET_TEMPLATE",
    "BUILTIN_TEMPLATES",
    "FALLBACK_SERVICE",
    "GITHUB_TEMPLATE",
    "build_url_set",
    "detect_service",
    "encode_path",
    "merge_templates",
]
