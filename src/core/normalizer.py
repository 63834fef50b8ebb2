"""
Record normalization for the repository table.

Turns raw repository records into canonical rows. Tool, rerun flag and
update display string get defaults; an unknown vulnerability count is kept
as None so it renders blank and ties under the numeric sort.
"""

import logging
import math
from datetime import timezone, tzinfo
from typing import Any, Iterable, Mapping, Optional, Union

from constants import MISSING_SAST_TOOL, RERUN_NO, RERUN_YES
from core.models import CanonicalRow, RawRecord
from core.sorting import coerce_number
from utils.formatting import format_update_timestamp, parse_timestamp

logger = logging.getLogger(__name__)

RecordLike = Union[RawRecord, Mapping[str, Any]]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_count(value: Any) -> Optional[float]:
    # Unknown counts stay None: they display blank and tie when sorted
    number = coerce_number(value)
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if float(number).is_integer() else number


def normalize_record(record: RecordLike, display_tz: tzinfo = timezone.utc) -> CanonicalRow:
    """
    Normalize a single record.

    Args:
        record: RawRecord or wire-format mapping
        display_tz: Timezone used for the update display string

    Returns:
        CanonicalRow with defaults applied
    """
    if not isinstance(record, RawRecord):
        record = RawRecord.from_dict(record)

    updates_raw = parse_timestamp(record.updates)
    if updates_raw is None and record.updates not in (None, ""):
        logger.debug(f"Unparseable update timestamp for {record.name!r}: {record.updates!r}")

    return CanonicalRow(
        name=_as_text(record.name),
        vulnerabilities=_as_count(record.vulnerabilities),
        updates=format_update_timestamp(updates_raw, display_tz),
        updates_raw=updates_raw,
        sast_tool=_as_text(record.sast_tool) or MISSING_SAST_TOOL,
        rerun=RERUN_YES if record.rerun else RERUN_NO,
        url=_as_text(record.repo_url),
    )


def normalize(
    raw_records: Iterable[RecordLike],
    display_tz: tzinfo = timezone.utc,
) -> list[CanonicalRow]:
    """
    Normalize raw records into canonical rows.

    Order preserving and total: every input record yields exactly one row.

    Args:
        raw_records: RawRecords or wire-format mappings
        display_tz: Timezone used for update display strings

    Returns:
        Canonical rows in input order
    """
    return [normalize_record(record, display_tz) for record in raw_records]
