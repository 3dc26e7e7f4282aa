from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_DELIMITER = "---"


def parse_meta_block(text: str) -> tuple[dict[str, str], str]:
    """Split a leading ``---`` block of ``Key: value`` lines from the body."""

    if not text.startswith(_DELIMITER):
        return {}, text
    lines = text.splitlines()
    try:
        end_idx = [line.strip() for line in lines[1:]].index(_DELIMITER) + 1
    except ValueError:
        return {}, text
    meta: dict[str, str] = {}
    for line in lines[1:end_idx]:
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if key:
            meta[key] = value.strip()
    body = "\n".join(lines[end_idx + 1 :])
    return meta, body


def map_headers(raw: Mapping[str, str], headers: Mapping[str, str]) -> dict[str, Any]:
    """Map header names to meta keys.

    ``headers`` maps meta key to header name (``{"tags": "Tags"}``). Header
    names match case-insensitively. Registered keys missing from ``raw`` are
    set to ``""``; other fields are kept under their lowercased name unless
    that name is a registered key.
    """

    by_header = {name.lower(): key for key, name in headers.items()}
    meta: dict[str, Any] = {key: "" for key in headers}
    for name, value in raw.items():
        key = by_header.get(name.lower())
        if key is None:
            key = name.lower()
            if key in headers:
                continue
        meta[key] = value
    return meta
