"""
Pagination engine for the repository table.
"""

import math
from typing import Sequence

from core.exceptions import ValidationException
from core.models import CanonicalRow, PageSlice


def page_count(total_rows: int, page_size: int) -> int:
    """
    Number of pages needed for a row count.

    Args:
        total_rows: Number of rows
        page_size: Rows per page

    Returns:
        ceil(total_rows / page_size), 0 when there are no rows

    Raises:
        ValidationException: If page_size is less than 1
    """
    if page_size < 1:
        raise ValidationException(f"Page size must be >= 1, got {page_size}", "page_size")
    return math.ceil(total_rows / page_size)


def paginate(rows: Sequence[CanonicalRow], page: int, page_size: int) -> PageSlice:
    """
    Slice one page out of a row sequence.

    Pages outside ``1..total_pages`` come back empty rather than raising.

    Args:
        rows: Ordered rows
        page: 1-based page number
        page_size: Rows per page

    Returns:
        PageSlice with the visible rows and the page count
    """
    total_rows = len(rows)
    total_pages = page_count(total_rows, page_size)

    if page < 1:
        visible = ()
    else:
        start = (page - 1) * page_size
        visible = tuple(rows[start:start + page_size])

    return PageSlice(
        rows=visible,
        total_pages=total_pages,
        page=page,
        page_size=page_size,
        total_rows=total_rows,
    )
