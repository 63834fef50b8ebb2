"""
View-state controller for the repository table.

Owns the ViewState and the normalized rows, applies user actions as state
transitions, and recomputes the filter → sort → paginate pipeline after
every mutation so that ``view()`` always reflects the current state.
"""

import logging
from datetime import timezone, tzinfo
from typing import Iterable, Optional

from core.exceptions import ValidationException
from core.filters import filter_rows
from core.models import (
    COLUMNS,
    CanonicalRow,
    FilterDimension,
    RawRecord,
    TableView,
    ViewState,
)
from core.normalizer import RecordLike, normalize
from core.pagination import paginate
from core.sorting import sort_rows
from core.source_interface import RecordSource

logger = logging.getLogger(__name__)


class TableController:
    """
    Single owner of the repository table's view state.

    Mutations happen one at a time; each one finishes recomputing the
    derived rows before it returns.
    """

    def __init__(
        self,
        records: Optional[Iterable[RecordLike]] = None,
        state: Optional[ViewState] = None,
        display_tz: tzinfo = timezone.utc,
    ):
        """
        Initialize the controller.

        Args:
            records: Initial raw records (empty when omitted)
            state: Initial view state (defaults when omitted)
            display_tz: Timezone for update display strings
        """
        self.display_tz = display_tz
        self._state = state or ViewState()
        self._records: tuple[RawRecord, ...] = ()
        self._rows: list[CanonicalRow] = []
        self._filtered: list[CanonicalRow] = []
        self._sorted: list[CanonicalRow] = []
        self._view: Optional[TableView] = None

        if self._state.page_size < 1:
            raise ValidationException(
                f"Page size must be >= 1, got {self._state.page_size}", "page_size"
            )

        self.load_records(records or [])

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def records(self) -> tuple[RawRecord, ...]:
        return self._records

    @property
    def rows(self) -> list[CanonicalRow]:
        """All normalized rows in load order."""
        return list(self._rows)

    @property
    def filtered_rows(self) -> list[CanonicalRow]:
        return list(self._filtered)

    @property
    def sorted_rows(self) -> list[CanonicalRow]:
        return list(self._sorted)

    @property
    def total_pages(self) -> int:
        return self._view.total_pages

    @property
    def visible_rows(self) -> list[CanonicalRow]:
        return list(self._view.rows)

    def view(self) -> TableView:
        """Snapshot of the current derived output."""
        return self._view

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_sort_key(self, key) -> None:
        """
        Sort by a column.

        Selecting the active column toggles the direction; selecting a
        different column sorts it descending.

        Raises:
            ValidationException: If the key is not a sortable column
        """
        self._state = self._state.with_sort_key(key)
        logger.debug(f"Sort: {self._state.sort_key.value} {self._state.sort_order.value}")
        self._recompute()

    def set_filter(self, dimension, value: str) -> None:
        """
        Replace one filter selection and return to page 1.

        Raises:
            ValidationException: If the dimension or value is not selectable
        """
        dimension = FilterDimension.parse(dimension)
        if value not in dimension.options:
            raise ValidationException(
                f"'{value}' is not an option. Valid options: {dimension.options}",
                dimension.value,
            )
        self._state = self._state.with_filter(dimension, value)
        logger.debug(f"Filter: {dimension.value}={value}")
        self._recompute()

    def set_page(self, page: int) -> None:
        """Go to a page; requests outside 1..total_pages are ignored."""
        if isinstance(page, bool) or not isinstance(page, int):
            logger.debug(f"Ignoring non-integer page request: {page!r}")
            return
        if not 1 <= page <= self.total_pages:
            logger.debug(f"Ignoring page {page}; valid range is 1..{self.total_pages}")
            return
        self._state = self._state.with_page(page)
        self._recompute()

    def reset(self) -> None:
        """Return to the default view state, keeping the loaded records."""
        self._state = ViewState(page_size=self._state.page_size)
        self._recompute()

    def load_records(self, raw_records: Iterable[RecordLike]) -> None:
        """
        Replace the record collection.

        The view state is kept; the current page is clamped if the new
        collection has fewer pages.
        """
        records = tuple(
            r if isinstance(r, RawRecord) else RawRecord.from_dict(r) for r in raw_records
        )
        rows = normalize(records, self.display_tz)
        self._records = records
        self._rows = rows
        logger.debug(f"Loaded {len(rows)} repository records")
        self._recompute()

    def refresh(self, source: RecordSource) -> bool:
        """
        Reload records from a data source.

        On failure the previously loaded records stay in place.

        Args:
            source: Data source to fetch from

        Returns:
            True if new records were loaded
        """
        records = source.fetch()
        if records is None:
            logger.warning(
                f"Keeping {len(self._records)} previously loaded records; "
                f"fetch from {source.name()} failed"
            )
            return False
        self.load_records(records)
        return True

    # ------------------------------------------------------------------
    # Derived output
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        state = self._state
        self._filtered = filter_rows(self._rows, state.filters)
        self._sorted = sort_rows(self._filtered, state.sort_key, state.sort_order)

        page = paginate(self._sorted, state.current_page, state.page_size)
        last_page = max(1, page.total_pages)
        if not 1 <= state.current_page <= last_page:
            clamped = min(max(state.current_page, 1), last_page)
            logger.debug(f"Clamping page {state.current_page} to {clamped}")
            state = self._state = state.with_page(clamped)
            page = paginate(self._sorted, clamped, state.page_size)

        self._view = TableView(
            state=state,
            columns=COLUMNS,
            rows=page.rows,
            ordered_rows=tuple(self._sorted),
            total_pages=page.total_pages,
            total_rows=page.total_rows,
            record_count=len(self._rows),
        )
