"""
Sort engine for the repository table.

Ordering policy:
- ``updates`` compares the parsed update instants. A row without a
  timestamp compares as the Unix epoch, so it sinks under descending order
  and rises under ascending order. An unparseable timestamp is normalized
  to "absent", so it also sorts as the epoch rather than tying with
  every other row.
- Every other column is compared numerically after coercion (see
  ``coerce_number``). Values that do not coerce are NaN, and any comparison
  involving NaN is a tie. Text columns (name, sastTool, rerun) therefore
  keep their filtered order instead of being sorted lexically.
- Ties keep their pre-sort relative order in both directions.
"""

import math
import re
from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Any, Sequence

from core.models import CanonicalRow, SortKey, SortOrder

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_NUMERIC_PATTERN = re.compile(r"^[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|Infinity)$")
_RADIX_PATTERN = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def coerce_number(value: Any) -> float:
    """
    Coerce a column value to a number.

    Args:
        value: Column value

    Returns:
        The number for ints/floats, 1.0/0.0 for booleans, the parsed value
        for numeric strings (decimal, exponent, signed Infinity, or unsigned
        0x/0o/0b integers), 0.0 for blank strings, NaN otherwise

    Examples:
        >>> coerce_number(3)
        3.0
        >>> coerce_number(" 12 ")
        12.0
        >>> coerce_number("0x10")
        16.0
        >>> coerce_number("Semgrep")
        nan
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _NUMERIC_PATTERN.match(text):
            return float(text)
        if _RADIX_PATTERN.match(text):
            return float(int(text, 0))
    return math.nan


def _compare_numbers(a: float, b: float) -> int:
    if math.isnan(a) or math.isnan(b):
        return 0
    return (a > b) - (a < b)


def _update_instant(row: CanonicalRow) -> datetime:
    return row.updates_raw if row.updates_raw is not None else EPOCH


def _comparator(key: SortKey):
    if key is SortKey.UPDATES:
        def compare(a: CanonicalRow, b: CanonicalRow) -> int:
            left, right = _update_instant(a), _update_instant(b)
            return (left > right) - (left < right)
    else:
        attribute = key.attribute

        def compare(a: CanonicalRow, b: CanonicalRow) -> int:
            return _compare_numbers(
                coerce_number(getattr(a, attribute)),
                coerce_number(getattr(b, attribute)),
            )
    return compare


def sort_rows(rows: Sequence[CanonicalRow], key, order) -> list[CanonicalRow]:
    """
    Return the rows ordered by a column.

    Args:
        rows: Rows to order (not modified)
        key: SortKey or column name
        order: SortOrder or "asc"/"desc"

    Returns:
        New list in sorted order; equal rows keep their input order

    Raises:
        ValidationException: If key or order is unknown
    """
    key = SortKey.parse(key)
    order = SortOrder.parse(order)
    compare = _comparator(key)

    if order is SortOrder.DESC:
        ascending = compare

        def compare(a: CanonicalRow, b: CanonicalRow) -> int:
            return ascending(b, a)

    # sorted() is stable, so a zero result keeps input order
    return sorted(rows, key=cmp_to_key(compare))
