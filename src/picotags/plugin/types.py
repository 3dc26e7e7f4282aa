"""Plugin dataclasses and the hook contract."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from picotags.tags import Page


# --- Config. ---
@dataclass(frozen=True, slots=True)
class TagsPluginConfig:
    """Header names and template variable names used by the tags plugin."""

    tags_header: str = "Tags"
    filter_header: str = "Filter"
    filtered_pages_variable: str = "filtered_pages"
    page_tags_variable: str = "page_tags"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> TagsPluginConfig:
        def _get_str(key: str, default: str) -> str:
            value = settings.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            return default

        return cls(
            tags_header=_get_str("tags_header", "Tags"),
            filter_header=_get_str("filter_header", "Filter"),
            filtered_pages_variable=_get_str(
                "filtered_pages_variable", "filtered_pages"
            ),
            page_tags_variable=_get_str("page_tags_variable", "page_tags"),
        )


# --- Request state. ---
@dataclass(frozen=True, slots=True)
class RequestState:
    """Values derived for a single request; discarded after rendering."""

    filtered_pages: Mapping[str, Page] = field(default_factory=dict)
    page_tags: tuple[str, ...] = ()

    @property
    def is_filtered(self) -> bool:
        return bool(self.filtered_pages)


@dataclass(frozen=True, slots=True)
class PagesLoadedResult:
    pages: dict[str, Page]
    state: RequestState


class PagePlugin(Protocol):
    """Hooks a host pipeline calls, in this order, for every request."""

    def on_header_fields_requested(self) -> dict[str, str]: ...

    def on_meta_parsed(self, meta: Mapping[str, Any]) -> dict[str, Any]: ...

    def on_pages_loaded(
        self,
        pages: Mapping[str, Page],
        current_page: Page | None,
        previous_page: Page | None = None,
        next_page: Page | None = None,
    ) -> PagesLoadedResult: ...

    def on_render_data_requested(self, state: RequestState) -> dict[str, Any]: ...
