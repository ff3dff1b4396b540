"""Fixed-size client-side pagination for display."""

import math
from typing import Any

from exportdesk.domain.entities import Page


def page_count(total: int, size: int) -> int:
    if size < 1:
        raise ValueError("page size must be at least 1")
    return math.ceil(total / size)


def clamp_page(number: int, count: int) -> int:
    """Clamp a page number into ``[1, count]`` (page 1 when there are no pages)."""
    return max(1, min(number, max(count, 1)))


def paginate(items: list[dict[str, Any]], number: int, size: int) -> Page:
    """Slice ``items`` into page ``number`` of ``size`` items."""
    count = page_count(len(items), size)
    number = clamp_page(number, count)
    start = (number - 1) * size
    return Page(
        items=items[start : start + size],
        number=number,
        size=size,
        total=len(items),
        page_count=count,
    )
