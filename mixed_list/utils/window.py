"""Index window helpers for paged display of a list."""

from mixed_list.types import ItemIndex


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items (0 for an empty list)."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return -(-total // page_size)


def page_window(total: int, page: int, page_size: int) -> range:
    """Indices shown on ``page`` (0-based), clipped to ``total``."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    if page < 0:
        raise ValueError(f"page must be non-negative, got {page}")
    start: ItemIndex = min(page * page_size, total)
    return range(start, min(start + page_size, total))
