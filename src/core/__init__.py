"""Core view-state logic for the repository scan table."""

from core.models import (
    CanonicalRow,
    ColumnDescriptor,
    FilterDimension,
    PageSlice,
    RawRecord,
    SortKey,
    SortOrder,
    TableView,
    ViewState,
)
from core.controller import TableController

__all__ = [
    "CanonicalRow",
    "ColumnDescriptor",
    "FilterDimension",
    "PageSlice",
    "RawRecord",
    "SortKey",
    "SortOrder",
    "TableView",
    "ViewState",
    "TableController",
]
