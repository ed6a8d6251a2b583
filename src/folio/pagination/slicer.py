from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from folio.core.exceptions import InvalidPageSizeError


def slice_items(items: Iterable[Any] | Mapping[Any, Any], page_size: int) -> list[dict[Any, Any]]:
    """Split ``items`` into contiguous pages of ``page_size`` entries.

    Each page maps the items' original keys (list indices, or mapping keys)
    to the items, in their original order. Only the last page may be short.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise InvalidPageSizeError(page_size)

    entries = items.items() if isinstance(items, Mapping) else enumerate(items)

    pages: list[dict[Any, Any]] = []
    current: dict[Any, Any] = {}
    for key, item in entries:
        current[key] = item
        if len(current) == page_size:
            pages.append(current)
            current = {}

    if current:
        pages.append(current)

    return pages
