"""
Pagination Arithmetic.

Clamps the requested page into the valid range, slices the ordered
results and computes the visible page window.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple, TypeVar

from fund_explorer.config.models import PaginationConfig
from fund_explorer.domain.entities import Pagination
from fund_explorer.domain.value_objects import PageWindow

T = TypeVar("T")


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed; 0 for an empty result."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total_items / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a 1-based page number into [1, max(1, total_pages)]."""
    return min(max(page, 1), max(1, total_pages))


def page_window(
    page: int,
    total_pages: int,
    full_window_max_pages: int = 7,
) -> PageWindow:
    """
    Page numbers to show in the navigation bar.

    Small page counts show every page. Larger ones show the first and last
    page, the current page with its neighbours, and None for elided gaps:
    page 5 of 10 gives [1, None, 4, 5, 6, None, 10].

    Args:
        page: Current (already clamped) page
        total_pages: Total page count
        full_window_max_pages: Largest page count shown in full

    Returns:
        List of page numbers with None marking gaps
    """
    if total_pages <= 1:
        return []
    if total_pages <= full_window_max_pages:
        return list(range(1, total_pages + 1))

    window: List[Optional[int]] = [1]
    if page > 3:
        window.append(None)

    start = max(2, page - 1)
    end = min(total_pages - 1, page + 1)
    window.extend(range(start, end + 1))

    if page < total_pages - 2:
        window.append(None)
    window.append(total_pages)
    return window


def paginate(
    results: Sequence[T],
    page: int,
    page_size: int,
    config: Optional[PaginationConfig] = None,
) -> Tuple[List[T], Pagination]:
    """
    Slice one page out of the ordered results.

    Args:
        results: Ordered, filtered results
        page: Requested 1-based page (clamped)
        page_size: Positive page size
        config: Page window settings (defaults used if omitted)

    Returns:
        Tuple of (page items, pagination metadata)
    """
    config = config or PaginationConfig()
    total_items = len(results)
    total_pages = count_pages(total_items, page_size)
    current = clamp_page(page, total_pages)

    offset = (current - 1) * page_size
    items = list(results[offset:offset + page_size])

    if total_items == 0:
        start_index = end_index = 0
    else:
        start_index = offset + 1
        end_index = min(offset + page_size, total_items)

    pagination = Pagination(
        total_items=total_items,
        total_pages=total_pages,
        page=current,
        page_size=page_size,
        start_index=start_index,
        end_index=end_index,
        window=page_window(current, total_pages, config.full_window_max_pages),
    )
    return items, pagination
