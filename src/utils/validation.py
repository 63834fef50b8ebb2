"""
Input validation utilities for Scanboard.

Provides validation functions for data source locations, file paths,
and other user inputs.
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from core.exceptions import ValidationException


def is_remote_source(source: str) -> bool:
    """
    Check whether a data source location is an HTTP(S) URL.

    Examples:
        >>> is_remote_source("https://example.com/dashboard_data.json")
        True
        >>> is_remote_source("data/dashboard_data.json")
        False
    """
    return urlparse(source).scheme in ("http", "https")


def validate_source(source: str, field_name: str = "source") -> str:
    """
    Validate a data source location.

    Args:
        source: HTTP(S) URL or local file path
        field_name: Field name for error messages

    Returns:
        Stripped source location

    Raises:
        ValidationException: If the location is empty or a malformed URL

    Examples:
        >>> validate_source(" https://example.com/data.json ")
        'https://example.com/data.json'
    """
    if not isinstance(source, str) or not source.strip():
        raise ValidationException("Data source cannot be empty", field_name)

    source = source.strip()

    if any(char in source for char in ["\n", "\r", "\0"]):
        raise ValidationException(
            f"Data source contains invalid characters: {source!r}",
            field_name
        )

    if is_remote_source(source) and not urlparse(source).netloc:
        raise ValidationException(f"URL has no host: {source}", field_name)

    return source


def validate_file_path(path: Path, must_exist: bool = True) -> Path:
    """
    Validate file path.

    Args:
        path: Path to validate
        must_exist: Whether file must already exist

    Returns:
        Validated Path object

    Raises:
        ValidationException: If path is invalid
    """
    if not path:
        raise ValidationException("File path cannot be empty", "path")

    if must_exist and not path.exists():
        raise ValidationException(f"File not found: {path}", "path")

    return path


def validate_positive_number(
    value: float,
    field_name: str,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
) -> float:
    """
    Validate numeric value is within acceptable range.

    Args:
        value: Value to validate
        field_name: Field name for error messages
        min_value: Minimum acceptable value
        max_value: Maximum acceptable value (optional)

    Returns:
        Validated value

    Raises:
        ValidationException: If value is out of range
    """
    if value < min_value:
        raise ValidationException(
            f"Value must be >= {min_value}, got {value}",
            field_name
        )

    if max_value is not None and value > max_value:
        raise ValidationException(
            f"Value must be <= {max_value}, got {value}",
            field_name
        )

    return value


def validate_title(title: str) -> str:
    """
    Validate and normalize a table title.

    Raises:
        ValidationException: If the title is empty or too long
    """
    if not title or not title.strip():
        raise ValidationException("Title cannot be empty", "title")

    title = title.strip()

    if len(title) > 200:
        raise ValidationException("Title too long (max 200 characters)", "title")

    return title


__all__ = [
    "is_remote_source",
    "validate_source",
    "validate_file_path",
    "validate_positive_number",
    "validate_title",
]
