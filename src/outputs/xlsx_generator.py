"""
XLSX generator for repository table exports.

Writes the filtered and sorted repository rows to an Excel workbook,
either every page or only the visible one, with the active view settings
recorded above the table.
"""

import logging
from pathlib import Path

import xlsxwriter
from xlsxwriter.exceptions import XlsxWriterException

from constants import ALL_FILTER, FILTER_LABELS
from core.models import TableView
from outputs.base import OutputGenerator
from outputs.html_generator import COLUMN_HEADINGS
from outputs.xlsx_formats import OutputFormatter
from utils.validation import is_remote_source

logger = logging.getLogger(__name__)

# Approximate Excel character width of a full-width table (100%)
TABLE_WIDTH_CHARS = 160


class XLSXGenerator(OutputGenerator):
    """
    Repository table exporter (XLSX format).

    Generates a single worksheet with:
    - Title and view settings (sort, filters, page)
    - Header row using the table column layout
    - One row per repository, URL cells as hyperlinks
    """

    def supports_format(self) -> str:
        """Return format identifier."""
        return "xlsx"

    def generate(
        self,
        view: TableView,
        output_path: Path,
        config: "XLSXGeneratorConfig",
    ) -> None:
        """
        Generate repository export (XLSX).

        Args:
            view: Controller snapshot to export
            output_path: Output file path
            config: XLSX generator configuration
        """
        from core.exceptions import OutputException
        from outputs.config import XLSXGeneratorConfig

        if not isinstance(config, XLSXGeneratorConfig):
            raise OutputException(
                "xlsx",
                f"Expected XLSXGeneratorConfig, got {type(config).__name__}"
            )

        config.validate()

        logger.info(f"Generating repository export: {output_path}")

        rows = view.ordered_rows if config.all_pages else view.rows

        workbook = xlsxwriter.Workbook(str(output_path))
        worksheet = workbook.add_worksheet(config.worksheet_name)
        formatter = OutputFormatter(workbook)

        row = self._write_settings(worksheet, formatter, view, config)
        self._write_table(worksheet, formatter, view, rows, row + 1)

        try:
            workbook.close()
        except (OSError, XlsxWriterException) as e:
            raise OutputException("xlsx", str(e))

        logger.info(f"Repository export generated: {output_path} ({len(rows)} rows)")

    def _write_settings(self, worksheet, formatter: OutputFormatter, view: TableView, config) -> int:
        """Write title and view settings; return the next free row."""
        state = view.state
        worksheet.write(0, 0, config.title, formatter.get("title"))

        settings = [
            ("Sort", f"{state.sort_key.value} ({state.sort_order.value})"),
        ]
        for dimension, label in FILTER_LABELS.items():
            settings.append((label, state.filters.get(dimension, ALL_FILTER)))
        if config.all_pages:
            settings.append(("Rows", f"{view.total_rows} of {view.record_count}"))
        else:
            settings.append(("Page", f"{view.current_page} of {view.total_pages}"))

        row = 1
        for label, value in settings:
            worksheet.write(row, 0, label, formatter.get("header_lightgrey"))
            worksheet.write(row, 1, value, formatter.get("body_yellow"))
            row += 1

        return row

    def _write_table(self, worksheet, formatter: OutputFormatter, view: TableView, rows, start_row: int) -> int:
        """Write header and data rows; return the next free row."""
        for col, column in enumerate(view.columns):
            width = TABLE_WIDTH_CHARS * column.width_percent / 100
            worksheet.set_column(col, col, width)
            worksheet.write(
                start_row, col, COLUMN_HEADINGS.get(column.name, column.name), formatter.get("header_blue")
            )

        row = start_row + 1
        for data in rows:
            values = data.to_dict()
            for col, column in enumerate(view.columns):
                value = values[column.name]
                cell_format = formatter.for_column(column.name, column.align)
                if column.name == "url" and is_remote_source(value):
                    worksheet.write_url(row, col, value, cell_format, string=value)
                else:
                    worksheet.write(row, col, value, cell_format)
            row += 1

        if rows:
            worksheet.autofilter(start_row, 0, row - 1, len(view.columns) - 1)
        worksheet.freeze_panes(start_row + 1, 0)

        return row
