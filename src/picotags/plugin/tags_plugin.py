"""Tags plugin for flat-file CMS page pipelines.

Pages declare a comma-separated ``Tags`` header listing the labels that apply
to them, and optionally a ``Filter`` header. When the page being served has a
filter, only pages carrying at least one of its labels are exposed to the
template as ``filtered_pages``. A page without a filter gets the unfiltered
page collection.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from picotags.logging import get_logger
from picotags.plugin.types import PagesLoadedResult, RequestState, TagsPluginConfig
from picotags.tags import Page, filter_pages, is_normalized, normalize_labels, page_labels


class TagsPlugin:
    """Parses ``Tags``/``Filter`` headers and derives the filtered page set.

    The instance only carries configuration. Everything derived for a request
    is returned to the caller, so one plugin can serve concurrent requests.
    """

    def __init__(
        self,
        config: TagsPluginConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or TagsPluginConfig()
        self._logger = logger or get_logger("picotags.plugin")

    @property
    def config(self) -> TagsPluginConfig:
        return self._config

    def on_header_fields_requested(self) -> dict[str, str]:
        """Meta keys to extract, mapped to the header names authors write."""

        return {
            "tags": self._config.tags_header,
            "filter": self._config.filter_header,
        }

    def on_meta_parsed(self, meta: Mapping[str, Any]) -> dict[str, Any]:
        """Return the normalized ``tags`` and ``filter`` fields of one page."""

        return {
            "tags": normalize_labels(meta.get("tags")),
            "filter": normalize_labels(meta.get("filter")),
        }

    def on_pages_loaded(
        self,
        pages: Mapping[str, Page],
        current_page: Page | None,
        previous_page: Page | None = None,
        next_page: Page | None = None,
    ) -> PagesLoadedResult:
        """Normalize tags on every page, then filter for the current page.

        ``previous_page`` and ``next_page`` are part of the hook signature but
        do not affect the result.
        """

        normalized = {
            page_id: self._with_normalized_tags(page) for page_id, page in pages.items()
        }

        filtered: dict[str, Page] = {}
        page_tags: tuple[str, ...] = ()
        if current_page:
            page_tags = tuple(page_labels(current_page))
            filter_labels = page_labels(current_page, "filter")
            if filter_labels:
                filtered = filter_pages(normalized, filter_labels)
                self._logger.debug(
                    "Filter %s matched %s of %s page(s).",
                    filter_labels,
                    len(filtered),
                    len(normalized),
                )
        self._logger.debug("Normalized tags on %s page(s).", len(normalized))

        return PagesLoadedResult(
            pages=normalized,
            state=RequestState(filtered_pages=filtered, page_tags=page_tags),
        )

    def on_render_data_requested(self, state: RequestState) -> dict[str, Any]:
        """Template variables to add; empty values are left out."""

        variables: dict[str, Any] = {}
        if state.filtered_pages:
            variables[self._config.filtered_pages_variable] = dict(
                state.filtered_pages
            )
        if state.page_tags:
            variables[self._config.page_tags_variable] = list(state.page_tags)
        return variables

    @staticmethod
    def _with_normalized_tags(page: Page) -> Page:
        if not isinstance(page, Mapping):
            return page
        meta = page.get("meta")
        if not isinstance(meta, Mapping):
            return {**page, "meta": {"tags": []}}
        tags = meta.get("tags")
        if is_normalized(tags) and all(isinstance(label, str) for label in tags):
            return page
        return {**page, "meta": {**meta, "tags": normalize_labels(tags)}}
