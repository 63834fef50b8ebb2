"""
Plain-text generator for the repository table.

Prints the visible page as an aligned table, for terminal use.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from constants import ALL_FILTER, FILTER_LABELS
from core.models import TableView
from outputs.base import OutputGenerator
from outputs.html_generator import COLUMN_HEADINGS
from utils.formatting import format_number

logger = logging.getLogger(__name__)


class TextGenerator(OutputGenerator):
    """Repository table generator (plain text)."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize text generator.

        Args:
            stream: Where to print when no output path is given (stdout by default)
        """
        self.stream = stream

    def supports_format(self) -> str:
        """Return format identifier."""
        return "text"

    def generate(
        self,
        view: TableView,
        output_path: Optional[Path],
        config: "GeneratorConfig",
    ) -> None:
        """
        Render the visible page as text.

        Args:
            view: Controller snapshot to render
            output_path: File to write, or None to print
            config: Generator configuration
        """
        config.validate()
        content = self.render(view, config.title)

        if output_path is None:
            (self.stream or sys.stdout).write(content)
            return

        from core.exceptions import OutputException

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise OutputException("text", str(e))
        logger.info(f"Repository table written: {output_path}")

    def render(self, view: TableView, title: str) -> str:
        """Build the text table."""
        state = view.state
        filters = ", ".join(
            f"{label}: {state.filters.get(dimension, ALL_FILTER)}"
            for dimension, label in FILTER_LABELS.items()
        )

        headers = [COLUMN_HEADINGS.get(c.name, c.name) for c in view.columns]
        body = []
        for row in view.rows:
            values = row.to_dict()
            body.append([
                format_number(values[c.name]) if c.name == "vulnerabilities" else str(values[c.name])
                for c in view.columns
            ])

        widths = [len(h) for h in headers]
        for cells in body:
            widths = [max(w, len(cell)) for w, cell in zip(widths, cells)]

        def line(cells: list[str]) -> str:
            padded = []
            for cell, width, column in zip(cells, widths, view.columns):
                padded.append(cell.center(width) if column.align == "center" else cell.ljust(width))
            return "  ".join(padded).rstrip()

        lines = [
            title,
            f"Sorted by {state.sort_key.value} ({state.sort_order.value}) | {filters}",
            "",
            line(headers),
            "  ".join("-" * w for w in widths),
        ]
        if body:
            lines.extend(line(cells) for cells in body)
        else:
            lines.append("No repositories to display")

        if view.total_pages:
            lines.append("")
            lines.append(
                f"Page {view.current_page} of {view.total_pages} "
                f"({format_number(view.total_rows)} repositories)"
            )

        return "\n".join(lines) + "\n"
