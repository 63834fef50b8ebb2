"""
Filter engine for the repository table.

A row passes when it matches every restricted dimension exactly
(case-sensitive). Dimensions set to the "All" sentinel, or not present in
the selection, do not restrict anything.
"""

from typing import Mapping, Sequence

from constants import ALL_FILTER
from core.models import CanonicalRow, FilterDimension


def row_matches(row: CanonicalRow, filters: Mapping[str, str]) -> bool:
    """
    Check a row against a filter selection.

    Args:
        row: Canonical row
        filters: Dimension name to selected value

    Returns:
        True if the row satisfies every restricted dimension
    """
    for dimension in FilterDimension:
        selected = filters.get(dimension.value, ALL_FILTER)
        if selected == ALL_FILTER:
            continue
        if getattr(row, dimension.attribute) != selected:
            return False
    return True


def filter_rows(rows: Sequence[CanonicalRow], filters: Mapping[str, str]) -> list[CanonicalRow]:
    """
    Reduce rows to those matching the filter selection, preserving order.

    Args:
        rows: Canonical rows
        filters: Dimension name to selected value

    Returns:
        Matching rows (all rows when nothing is restricted)
    """
    return [row for row in rows if row_matches(row, filters)]
