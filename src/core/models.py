"""
Domain models for the repository scan dashboard.

This module defines the core data structures used throughout the application.
Records, rows and view snapshots are immutable (frozen dataclasses) so that
the filter, sort and pagination engines can stay pure; the only mutable
state lives in the controller, which swaps whole ViewState values.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from constants import (
    ALL_FILTER,
    COLUMN_LAYOUT,
    DEFAULT_SORT_KEY,
    DEFAULT_SORT_ORDER,
    FILTER_OPTIONS,
    PAGE_SIZE,
)
from core.exceptions import ValidationException


class SortKey(str, Enum):
    """Columns the repository table can be ordered by."""

    NAME = "name"
    VULNERABILITIES = "vulnerabilities"
    UPDATES = "updates"
    SAST_TOOL = "sastTool"
    RERUN = "rerun"

    @property
    def attribute(self) -> str:
        """CanonicalRow attribute holding this column's value."""
        if self is SortKey.SAST_TOOL:
            return "sast_tool"
        return self.value

    @classmethod
    def parse(cls, value) -> "SortKey":
        """Convert a wire name or SortKey into a SortKey."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown sort key '{value}'. Valid keys: {[k.value for k in cls]}",
                "sort_key",
            )


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        """Return the opposite direction."""
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC

    @classmethod
    def parse(cls, value) -> "SortOrder":
        """Convert a wire name or SortOrder into a SortOrder."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown sort order '{value}'. Valid orders: asc, desc",
                "sort_order",
            )


class FilterDimension(str, Enum):
    """Row fields the view can be filtered on."""

    SAST_TOOL = "sastTool"
    RERUN = "rerun"

    @property
    def attribute(self) -> str:
        """CanonicalRow attribute compared against the selection."""
        if self is FilterDimension.SAST_TOOL:
            return "sast_tool"
        return self.value

    @property
    def options(self) -> list[str]:
        """Selectable values for this dimension, sentinel first."""
        return FILTER_OPTIONS[self.value]

    @classmethod
    def parse(cls, value) -> "FilterDimension":
        """Convert a wire name or FilterDimension into a FilterDimension."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown filter dimension '{value}'. Valid dimensions: {[d.value for d in cls]}",
                "filter",
            )


@dataclass(frozen=True)
class RawRecord:
    """
    Repository record as delivered by the data source.

    Optional fields are kept exactly as received; defaulting happens in
    the normalizer so that a malformed record never fails to load.

    Attributes:
        name: Repository name
        vulnerabilities: Reported vulnerability count (may be absent)
        updates: Last update timestamp, ISO-8601 string or datetime (may be absent)
        sast_tool: Static-analysis tool that produced the scan (may be absent)
        rerun: Whether the scan is flagged for rerun (may be absent)
        repo_url: Repository URL
    """

    name: Any = ""
    vulnerabilities: Any = None
    updates: Any = None
    sast_tool: Any = None
    rerun: Any = None
    repo_url: Any = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawRecord":
        """Create from a wire-format mapping (``sastTool``, ``repo_url`` keys)."""
        return cls(
            name=data.get("name", ""),
            vulnerabilities=data.get("vulnerabilities"),
            updates=data.get("updates"),
            sast_tool=data.get("sastTool"),
            rerun=data.get("rerun"),
            repo_url=data.get("repo_url", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the wire-format mapping."""
        return {
            "name": self.name,
            "vulnerabilities": self.vulnerabilities,
            "updates": self.updates,
            "sastTool": self.sast_tool,
            "rerun": self.rerun,
            "repo_url": self.repo_url,
        }


@dataclass(frozen=True)
class CanonicalRow:
    """
    Repository record after default-filling, ready for filter/sort/paginate.

    Attributes:
        name: Repository name
        vulnerabilities: Vulnerability count, None when absent or not numeric
        updates: Display string for the last update, empty when unknown
        updates_raw: Parsed last update instant, kept for chronological sorting
        sast_tool: Tool name, "N/A" when unknown
        rerun: "Yes" or "No"
        url: Raw repository URL
    """

    name: str
    vulnerabilities: Optional[float]
    updates: str
    updates_raw: Optional[datetime]
    sast_tool: str
    rerun: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to a column-keyed mapping for renderers."""
        return {
            "name": self.name,
            "vulnerabilities": self.vulnerabilities,
            "updates": self.updates,
            "sastTool": self.sast_tool,
            "rerun": self.rerun,
            "url": self.url,
        }


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Layout hints for one table column.

    Attributes:
        name: Column key
        align: "left" or "center"
        width: Width as a percentage string (e.g. "15%")
    """

    name: str
    align: str
    width: str

    @property
    def width_percent(self) -> float:
        """Width as a number (e.g. 15.0)."""
        return float(self.width.rstrip("%"))


COLUMNS: tuple[ColumnDescriptor, ...] = tuple(
    ColumnDescriptor(name=name, align=align, width=width)
    for name, align, width in COLUMN_LAYOUT
)


def _default_filters() -> dict[str, str]:
    return {dimension.value: ALL_FILTER for dimension in FilterDimension}


@dataclass(frozen=True)
class ViewState:
    """
    User-selected view settings for the repository table.

    Transitions return a new ViewState; the controller decides which
    transition to apply and when the page has to be clamped.

    Attributes:
        sort_key: Active sort column
        sort_order: Active sort direction
        filters: Filter dimension name to selected value ("All" for none)
        current_page: 1-based page number
        page_size: Rows per page
    """

    sort_key: SortKey = SortKey(DEFAULT_SORT_KEY)
    sort_order: SortOrder = SortOrder(DEFAULT_SORT_ORDER)
    filters: dict[str, str] = field(default_factory=_default_filters)
    current_page: int = 1
    page_size: int = PAGE_SIZE

    def __post_init__(self):
        # Accept wire names ("name", "asc") as well as enum members
        object.__setattr__(self, "sort_key", SortKey.parse(self.sort_key))
        object.__setattr__(self, "sort_order", SortOrder.parse(self.sort_order))

    def filter_value(self, dimension) -> str:
        """Selected value for a dimension, the sentinel when unset."""
        return self.filters.get(FilterDimension.parse(dimension).value, ALL_FILTER)

    @property
    def active_filters(self) -> dict[str, str]:
        """Dimensions restricted to a specific value."""
        return {dim: value for dim, value in self.filters.items() if value != ALL_FILTER}

    def with_sort_key(self, key) -> "ViewState":
        """Same key toggles the direction; a new key sorts descending."""
        key = SortKey.parse(key)
        if key is self.sort_key:
            return replace(self, sort_order=self.sort_order.toggled())
        return replace(self, sort_key=key, sort_order=SortOrder.DESC)

    def with_filter(self, dimension, value: str) -> "ViewState":
        """Replace one dimension's selection and return to the first page."""
        dimension = FilterDimension.parse(dimension)
        filters = dict(self.filters)
        filters[dimension.value] = value
        return replace(self, filters=filters, current_page=1)

    def with_page(self, page: int) -> "ViewState":
        """Move to a page; range checks are the caller's job."""
        return replace(self, current_page=page)


@dataclass(frozen=True)
class PageSlice:
    """
    One page of rows.

    Attributes:
        rows: Rows visible on the page
        total_pages: Number of pages for the full row set (0 when empty)
        page: Requested page number
        page_size: Rows per page
        total_rows: Size of the full row set
    """

    rows: tuple[CanonicalRow, ...]
    total_pages: int
    page: int
    page_size: int
    total_rows: int


@dataclass(frozen=True)
class TableView:
    """
    Derived output of the controller, handed to renderers.

    Attributes:
        state: View state the snapshot was computed from
        columns: Column layout
        rows: Rows on the current page
        ordered_rows: Every filtered row in sort order
        total_pages: Page count of the filtered set
        total_rows: Number of rows passing the filters
        record_count: Number of loaded records before filtering
    """

    state: ViewState
    columns: tuple[ColumnDescriptor, ...]
    rows: tuple[CanonicalRow, ...]
    ordered_rows: tuple[CanonicalRow, ...]
    total_pages: int
    total_rows: int
    record_count: int

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def is_empty(self) -> bool:
        return not self.rows
