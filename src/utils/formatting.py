"""
Formatting utilities for scanboard output.

Provides common formatting functions for timestamps, numbers, and other display values.
"""

from datetime import datetime, timezone, tzinfo
from typing import Optional

from constants import DISPLAY_DATE_FORMAT


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Args:
        value: ISO-8601 string (``Z`` suffix or offset allowed) or datetime

    Returns:
        Aware datetime (naive values are taken as UTC), or None when the
        value is absent or cannot be parsed

    Examples:
        >>> parse_timestamp("2024-01-01T10:00:00Z")
        datetime.datetime(2024, 1, 1, 10, 0, tzinfo=datetime.timezone.utc)
        >>> parse_timestamp("") is None
        True
        >>> parse_timestamp("not a date") is None
        True
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_update_timestamp(value: Optional[datetime], tz: tzinfo = timezone.utc) -> str:
    """
    Format an update timestamp for display.

    Args:
        value: Aware datetime, or None
        tz: Timezone to display the instant in

    Returns:
        ``MM/DD/YYYY HH:mm`` in 24-hour time, or an empty string for None

    Examples:
        >>> format_update_timestamp(datetime(2024, 1, 1, 22, 5, tzinfo=timezone.utc))
        '01/01/2024 22:05'
        >>> format_update_timestamp(None)
        ''
    """
    if value is None:
        return ""
    return value.astimezone(tz).strftime(DISPLAY_DATE_FORMAT)


def format_number(num) -> str:
    """
    Format number with thousands separators.

    Args:
        num: Number to format, or None

    Returns:
        Formatted number string with commas (e.g., "1,234,567"), empty for None

    Examples:
        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(0)
        '0'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(None)
        ''
    """
    if num is None:
        return ""
    if isinstance(num, float) and not num.is_integer():
        return f"{num:,}"
    return f"{int(num):,}"


def format_date_with_ordinal(date: datetime) -> str:
    """
    Format date with ordinal suffix (e.g., "November 4th, 2025").

    Args:
        date: datetime object to format

    Returns:
        Formatted date string with ordinal suffix

    Examples:
        >>> format_date_with_ordinal(datetime(2025, 11, 4))
        'November 4th, 2025'
        >>> format_date_with_ordinal(datetime(2025, 12, 22))
        'December 22nd, 2025'
    """
    day = date.day

    # Determine ordinal suffix
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")

    return date.strftime(f"%B {day}{suffix}, %Y")
