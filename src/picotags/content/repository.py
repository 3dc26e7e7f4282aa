from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from picotags.content.types import ContentRepositoryConfig
from picotags.errors import ContentRepositoryError


@dataclass(slots=True)
class ContentRepository:
    """コンテンツディレクトリ配下のMarkdownページを読み込む。"""

    config: ContentRepositoryConfig

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ContentRepository:
        return cls(ContentRepositoryConfig.from_settings(settings))

    def list_pages(self) -> Iterable[Path]:
        """ページファイル一覧を返す。ディレクトリが無ければ空。"""

        root = self.config.root_dir
        if not root.exists():
            return ()
        return sorted(path for path in root.rglob(self.config.pattern) if path.is_file())

    def page_id(self, path: Path) -> str:
        """``blog/first.md`` → ``blog/first``"""

        relative = path.relative_to(self.config.root_dir)
        return relative.with_suffix("").as_posix()

    def read(self, path: str | Path) -> str:
        target = Path(path)
        if not target.is_absolute():
            target = self.config.root_dir / target
        try:
            return target.read_text(encoding=self.config.encoding)
        except FileNotFoundError as exc:
            raise ContentRepositoryError(f"Page not found: {target}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentRepositoryError(f"Failed to read page: {target}") from exc
