from .filter import Page, filter_pages, has_any_label, page_labels
from .parser import is_normalized, normalize_labels, parse_tags

__all__ = [
    "Page",
    "filter_pages",
    "has_any_label",
    "is_normalized",
    "normalize_labels",
    "page_labels",
    "parse_tags",
]
