"""
Markdown utilities for scanboard output generation.

Provides functions for loading, processing, and converting markdown files to HTML.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import markdown

logger = logging.getLogger(__name__)


def load_and_convert_markdown(
    path: Optional[Path],
    section_name: str = "markdown content",
    template_processor: Optional[Callable[[str], str]] = None,
) -> Optional[str]:
    """
    Load markdown file, optionally apply template processing, and convert to HTML.

    Args:
        path: Path to markdown file
        section_name: Name of section for error messages (e.g., "notes")
        template_processor: Optional function to process content before markdown conversion.
                          Should have signature: (content: str) -> str

    Returns:
        HTML string, or None if file doesn't exist or processing fails

    Examples:
        >>> html = load_and_convert_markdown(Path("notes.md"))

        >>> def apply_vars(content):
        ...     return content.replace("{{total_rows}}", "12")
        >>> html = load_and_convert_markdown(Path("notes.md"), "notes", apply_vars)
    """
    if not path or not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        if template_processor:
            content = template_processor(content)

        return markdown.markdown(content, extensions=["tables"])

    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not load {section_name}: {e}")
        return None
