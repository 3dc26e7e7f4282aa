"""Page filtering by label intersection."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from picotags.tags.parser import normalize_labels

Page = Mapping[str, Any]


def page_labels(page: Any, field: str = "tags") -> list[str]:
    """Return the labels stored under ``page["meta"][field]``.

    Pages without a meta mapping, or without the field, have no labels.
    """

    if not isinstance(page, Mapping):
        return []
    meta = page.get("meta")
    if not isinstance(meta, Mapping):
        return []
    return normalize_labels(meta.get(field))


def has_any_label(page: Any, labels: Sequence[str]) -> bool:
    wanted = {label for label in labels if isinstance(label, str)}
    return any(label in wanted for label in page_labels(page))


def filter_pages(
    pages: Mapping[str, Page], filter_labels: Sequence[str]
) -> dict[str, Page]:
    """Select the pages tagged with at least one of ``filter_labels``.

    An empty filter selects every page. The collection's order is kept and
    labels are compared case-sensitively.
    """

    if not filter_labels:
        return dict(pages)
    return {
        page_id: page
        for page_id, page in pages.items()
        if has_any_label(page, filter_labels)
    }
