"""コンテンツ読み込みとリクエスト処理のデータクラス"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from picotags.errors import MissingSettingError
from picotags.plugin import RequestState
from picotags.tags import Page


# --- Config. ---
@dataclass(frozen=True, slots=True)
class ContentRepositoryConfig:
    """Markdownページの読み込みに必要な設定値を束ねる。"""

    root_dir: Path
    encoding: str = "utf-8"
    pattern: str = "*.md"

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "root_dir", Path(self.root_dir).expanduser())

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ContentRepositoryConfig:
        content_dir = settings.get("content_dir")
        if not content_dir:
            raise MissingSettingError("content_dir")
        encoding = str(settings.get("content_encoding", "utf-8") or "utf-8")
        pattern = str(settings.get("content_pattern", "*.md") or "*.md")
        return cls(root_dir=Path(content_dir), encoding=encoding, pattern=pattern)


# --- Results. ---
@dataclass(frozen=True, slots=True)
class RenderResult:
    """One request's pages, derived state and template variables."""

    pages: dict[str, Page]
    current_page: Page
    state: RequestState
    variables: dict[str, Any] = field(default_factory=dict)

    @property
    def visible_pages(self) -> dict[str, Page]:
        """The filtered set when one was exposed, otherwise every page."""

        if self.state.filtered_pages:
            return dict(self.state.filtered_pages)
        return dict(self.pages)
