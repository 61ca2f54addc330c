"""Site generator plugin entry point."""

from collections.abc import Mapping, MutableMapping
from typing import Any

from remote_url.core.models.config import ResolverConfig
from remote_url.services.page_resolver import PageUrlResolver, initialize

PAGE_PATH_FIELD = "file_path"
PAGE_RESULT_FIELD = "remote_url"


class RemoteUrlPlugin:
    """Attaches hosting-service links to page data.

    Pages are mappings or objects exposing ``file_path``; the links are
    stored under ``remote_url`` as a plain dict, or None for pages whose
    source file is not tracked.
    """

    name = "remote-url"

    def __init__(
        self,
        options: ResolverConfig | Mapping | None = None,
        resolver: PageUrlResolver | None = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else initialize(options)

    @property
    def resolver(self) -> PageUrlResolver:
        return self._resolver

    def extend_page_data(self, page: Any) -> None:
        if isinstance(page, Mapping):
            file_path = page.get(PAGE_PATH_FIELD)
        else:
            file_path = getattr(page, PAGE_PATH_FIELD, None)

        url_set = self._resolver.for_file(file_path) if file_path else None
        value = url_set.model_dump() if url_set is not None else None

        if isinstance(page, MutableMapping):
            page[PAGE_RESULT_FIELD] = value
        else:
            setattr(page, PAGE_RESULT_FIELD, value)
