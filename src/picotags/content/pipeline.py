from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from picotags.content.repository import ContentRepository
from picotags.content.types import RenderResult
from picotags.errors import PageNotFoundError
from picotags.logging import get_logger
from picotags.plugin import PagePlugin
from picotags.tags import Page
from picotags.utils.meta import map_headers, parse_meta_block


class PagePipeline:
    """ページ読み込みからテンプレート変数生成までをプラグインのフックで繋ぐ。"""

    def __init__(
        self,
        repository: ContentRepository,
        plugin: PagePlugin,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._plugin = plugin
        self._logger = logger or get_logger("picotags.pipeline")

    def load_pages(self) -> dict[str, Page]:
        headers = self._plugin.on_header_fields_requested()
        pages: dict[str, Page] = {}
        for path in self._repository.list_pages():
            page_id = self._repository.page_id(path)
            raw_meta, body = parse_meta_block(self._repository.read(path))
            meta = map_headers(raw_meta, headers)
            meta.update(self._plugin.on_meta_parsed(meta))
            pages[page_id] = {
                "id": page_id,
                "title": meta.get("title") or page_id,
                "path": str(path),
                "meta": meta,
                "content": body,
            }
        self._logger.info(
            "Loaded %s page(s) from %s", len(pages), self._repository.config.root_dir
        )
        return pages

    def run(
        self, current_id: str, pages: Mapping[str, Page] | None = None
    ) -> RenderResult:
        """Run the page-collection and render-data hooks for one request."""

        if pages is None:
            pages = self.load_pages()
        page_ids = list(pages)
        if current_id not in pages:
            raise PageNotFoundError(current_id)

        index = page_ids.index(current_id)
        previous_id = page_ids[index - 1] if index > 0 else None
        next_id = page_ids[index + 1] if index + 1 < len(page_ids) else None

        loaded = self._plugin.on_pages_loaded(
            pages,
            pages[current_id],
            pages[previous_id] if previous_id is not None else None,
            pages[next_id] if next_id is not None else None,
        )
        merged = loaded.pages
        current_page = merged[current_id]

        variables: dict[str, Any] = {
            "pages": merged,
            "current_page": current_page,
            "previous_page": merged.get(previous_id) if previous_id is not None else None,
            "next_page": merged.get(next_id) if next_id is not None else None,
        }
        variables.update(self._plugin.on_render_data_requested(loaded.state))
        return RenderResult(
            pages=merged,
            current_page=current_page,
            state=loaded.state,
            variables=variables,
        )
