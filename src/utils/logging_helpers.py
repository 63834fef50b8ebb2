"""
Logging helper utilities for the scanboard CLI.

Provides consistent formatting for error messages, warnings, and informational output.
"""

import logging
from typing import List, Optional


def _log_section(
    level: int,
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger],
    width: int,
) -> None:
    if logger is None:
        logger = logging.getLogger()

    separator = "=" * width
    logger.log(level, separator)
    logger.log(level, title)
    for message in messages:
        # Empty strings become blank lines
        logger.log(level, message or "")
    logger.log(level, separator)


def log_error_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log an error section with separator lines and multiple messages.

    Args:
        title: Title message for the error section
        messages: List of error messages to display
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters

    Examples:
        >>> log_error_section(
        ...     "Dashboard data unavailable",
        ...     ["Could not reach https://example.com/dashboard_data.json"]
        ... )
        ============================================================
        Dashboard data unavailable
        Could not reach https://example.com/dashboard_data.json
        ============================================================
    """
    _log_section(logging.ERROR, title, messages, logger, width)


def log_warning_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log a warning section with separator lines and multiple messages.

    Args:
        title: Title message for the warning section
        messages: List of warning messages to display
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters
    """
    _log_section(logging.WARNING, title, messages, logger, width)


def log_info_header(
    message: str,
    logger: Optional[logging.Logger] = None,
    width: int = 60,
    char: str = "="
) -> None:
    """
    Log an informational header with separator lines.

    Args:
        message: Header message to display
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters
        char: Character to use for separator line

    Examples:
        >>> log_info_header("Scanboard")
        ============================================================
        Scanboard
        ============================================================
    """
    if logger is None:
        logger = logging.getLogger()

    logger.info(char * width)
    logger.info(message)
    logger.info(char * width)
