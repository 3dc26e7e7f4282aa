"""picotags public API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from picotags.plugin import PagesLoadedResult, RequestState, TagsPlugin
from picotags.tags import filter_pages, normalize_labels, parse_tags

try:
    __version__ = version("picotags")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

__all__ = [
    "PagesLoadedResult",
    "RequestState",
    "TagsPlugin",
    "__version__",
    "filter_pages",
    "normalize_labels",
    "parse_tags",
]
