"""
HTML generator for the repository table.

Renders the current page of the controller's table view as a standalone
HTML document: heading, active sort and filters, the six-column table
with external repository links, and a pagination footer.
"""

import logging
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Optional

from constants import ALL_FILTER, FILTER_LABELS
from core.models import CanonicalRow, ColumnDescriptor, TableView
from outputs.base import OutputGenerator
from utils.formatting import format_date_with_ordinal, format_number
from utils.markdown_utils import load_and_convert_markdown
from utils.validation import is_remote_source

logger = logging.getLogger(__name__)

COLUMN_HEADINGS = {
    "name": "Name",
    "vulnerabilities": "Vulnerabilities",
    "updates": "Updates",
    "sastTool": "SAST Tool",
    "rerun": "Rerun",
    "url": "URL",
}


def _apply_template_variables(content: str, view: TableView, title: str) -> str:
    """
    Apply template variable substitution to notes content.

    Replaces {{variable_name}} placeholders with actual values.

    Args:
        content: Content string with template variables
        view: Table view supplying the values
        title: Table title

    Returns:
        Content with variables replaced
    """
    template_vars = {
        "title": title,
        "record_count": str(view.record_count),
        "total_rows": str(view.total_rows),
        "total_pages": str(view.total_pages),
        "current_page": str(view.current_page),
    }

    for key, value in template_vars.items():
        content = content.replace(f"{{{{{key}}}}}", value)

    return content


class HTMLGenerator(OutputGenerator):
    """
    Repository table generator (HTML format).

    Produces a page with:
    - Title and optional Markdown notes
    - Sort and filter summary
    - The visible page of repositories, URL cells as links opening in a new tab
    - "Page X of Y" footer
    """

    def supports_format(self) -> str:
        """Return format identifier."""
        return "html"

    def generate(
        self,
        view: TableView,
        output_path: Path,
        config: "HTMLGeneratorConfig",
    ) -> None:
        """
        Generate the repository table page (HTML).

        Args:
            view: Controller snapshot to render
            output_path: Output file path
            config: HTML generator configuration
        """
        from core.exceptions import OutputException
        from outputs.config import HTMLGeneratorConfig

        if not isinstance(config, HTMLGeneratorConfig):
            raise OutputException(
                "html", f"Expected HTMLGeneratorConfig, got {type(config).__name__}"
            )

        config.validate()

        logger.info(f"Generating repository table: {output_path}")

        html_content = self.render(view, config)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html_content)
        except OSError as e:
            raise OutputException("html", str(e))

        logger.info(f"Repository table generated: {output_path}")

    def render(self, view: TableView, config: "HTMLGeneratorConfig") -> str:
        """Build the complete HTML document as a string."""
        notes = load_and_convert_markdown(
            config.notes_path,
            "notes",
            lambda content: _apply_template_variables(content, view, config.title),
        )

        return self._build_html_template(
            title=config.title,
            css_content=self._get_embedded_css(),
            notes=notes,
            view=view,
        )

    def _build_html_template(
        self,
        title: str,
        css_content: str,
        notes: Optional[str],
        view: TableView,
    ) -> str:
        """Build complete HTML document."""
        generated = format_date_with_ordinal(datetime.now())

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{escape(title)}</title>
    <style>
{css_content}
    </style>
</head>
<body>
    <div class="container">
        <div class="header-section">
            <h1>{escape(title)}</h1>
        </div>
{self._build_notes_section(notes)}
{self._build_controls_section(view)}
{self._build_table_section(view)}
{self._build_pagination_section(view)}
        <div class="footer">
            <p>{format_number(view.record_count)} repositories loaded | Generated on {generated}</p>
        </div>
    </div>
</body>
</html>"""

    def _build_notes_section(self, notes: Optional[str]) -> str:
        """Build the notes section if content is provided."""
        if not notes:
            return ""

        return f"""        <div class="notes-section">
            {notes}
        </div>"""

    def _build_controls_section(self, view: TableView) -> str:
        """Build the active sort and filter summary."""
        state = view.state
        arrow = "&darr;" if state.sort_order.value == "desc" else "&uarr;"
        sort_label = COLUMN_HEADINGS.get(state.sort_key.value, state.sort_key.value)

        filters = []
        for dimension, label in FILTER_LABELS.items():
            value = state.filters.get(dimension, ALL_FILTER)
            css_class = "filter-chip" if value == ALL_FILTER else "filter-chip active"
            filters.append(
                f'<span class="{css_class}">{escape(label)}: {escape(value)}</span>'
            )

        return f"""        <div class="controls-section">
            <span class="sort-chip">Sorted by {escape(sort_label)} {arrow}</span>
            {" ".join(filters)}
        </div>"""

    def _build_table_section(self, view: TableView) -> str:
        """Build the repository table."""
        colgroup = "\n".join(
            f'                    <col style="width: {c.width};">' for c in view.columns
        )
        headers = "\n".join(
            f'                        <th class="align-{c.align}">{COLUMN_HEADINGS.get(c.name, c.name)}</th>'
            for c in view.columns
        )

        if view.rows:
            body = "\n".join(self._generate_table_row(row, view.columns) for row in view.rows)
        else:
            body = (
                f'                    <tr><td class="empty-row" colspan="{len(view.columns)}">'
                "No repositories to display</td></tr>"
            )

        return f"""        <div class="table-container">
            <table>
                <colgroup>
{colgroup}
                </colgroup>
                <thead>
                    <tr>
{headers}
                    </tr>
                </thead>
                <tbody>
{body}
                </tbody>
            </table>
        </div>"""

    def _generate_table_row(self, row: CanonicalRow, columns: tuple[ColumnDescriptor, ...]) -> str:
        """Generate one <tr> for a repository."""
        values = row.to_dict()
        cells = []
        for column in columns:
            value = values[column.name]
            if column.name == "url":
                content = self._format_link(value)
            elif column.name == "vulnerabilities":
                content = format_number(value)
            else:
                content = escape(str(value))
            cells.append(f'<td class="align-{column.align}">{content}</td>')

        return f"                    <tr>{''.join(cells)}</tr>"

    def _format_link(self, url: str) -> str:
        """Render a repository URL as an external link; non-HTTP(S) values stay text."""
        if not url:
            return ""
        safe = escape(url, quote=True)
        if not is_remote_source(url):
            return safe
        return f'<a href="{safe}" target="_blank" rel="noreferrer">{safe}</a>'

    def _build_pagination_section(self, view: TableView) -> str:
        """Build the page indicator."""
        if view.total_pages == 0:
            return ""

        pages = []
        for number in range(1, view.total_pages + 1):
            css_class = "page current" if number == view.current_page else "page"
            pages.append(f'<span class="{css_class}">{number}</span>')

        return f"""        <div class="pagination">
            {"".join(pages)}
            <p>Page {view.current_page} of {view.total_pages} ({format_number(view.total_rows)} repositories)</p>
        </div>"""

    def _get_embedded_css(self) -> str:
        """Return embedded CSS content loaded from external file."""
        css_path = Path(__file__).parent / "styles.css"
        try:
            with open(css_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            logger.error(f"CSS file not found: {css_path}")
            return ""
        except OSError as e:
            logger.error(f"Error loading CSS file: {e}")
            return ""
