"""Tag header parsing."""

from __future__ import annotations

from typing import Any

TAG_SEPARATOR = ","


def parse_tags(raw: Any) -> list[str]:
    """Split a comma-separated header value into trimmed labels.

    Anything that is not a non-empty string yields no labels. Empty tokens
    produced by consecutive or trailing separators are kept as ``""``.

    >>> parse_tags("a, b,c")
    ['a', 'b', 'c']
    >>> parse_tags("a,,b")
    ['a', '', 'b']
    """

    if not isinstance(raw, str) or len(raw) <= 0:
        return []
    return [token.strip() for token in raw.split(TAG_SEPARATOR)]


def is_normalized(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def normalize_labels(value: Any) -> list[str]:
    """Return ``value`` as a label list, parsing it only when it is not one yet.

    Elements of an existing list that are not strings are dropped.
    """

    if is_normalized(value):
        return [label for label in value if isinstance(label, str)]
    return parse_tags(value)
