"""
XLSX format definitions and factory.

Provides centralized format management for Excel workbooks,
eliminating duplication through a format factory pattern.
"""

import xlsxwriter


class OutputFormatter:
    """Factory for creating consistent XLSX cell formats."""

    # Base format properties shared by all formats
    BASE_FORMAT = {
        "border": 1,
        "font_name": "Arial",
        "font_size": 10,
        "align": "left",
        "valign": "vcenter",
    }

    COLORS = {
        "blue": "#3d55cc",
        "lightgrey": "#D9D9D9",
        "yellow": "#FFF2CC",
    }

    NUM_FORMATS = {
        "count": "#,##0",
    }

    def __init__(self, workbook: xlsxwriter.Workbook):
        """
        Initialize formatter with workbook.

        Args:
            workbook: XlsxWriter workbook instance
        """
        self.workbook = workbook
        self.formats = self._create_all_formats()

    def _create_format(
        self,
        bg_color: str = None,
        font_color: str = "black",
        bold: bool = False,
        num_format: str = None,
        align: str = None,
        underline: bool = False,
    ) -> xlsxwriter.format.Format:
        """
        Create a format with base properties plus overrides.

        Args:
            bg_color: Background color (hex or color name)
            font_color: Font color (default: black)
            bold: Whether text should be bold
            num_format: Number format string (e.g., "#,##0")
            align: Horizontal alignment override
            underline: Whether text should be underlined

        Returns:
            Configured format object
        """
        format_dict = self.BASE_FORMAT.copy()

        if bg_color:
            format_dict["bg_color"] = bg_color
        if font_color != "black":
            format_dict["font_color"] = font_color
        if bold:
            format_dict["bold"] = True
        if num_format:
            format_dict["num_format"] = num_format
        if align:
            format_dict["align"] = align
        if underline:
            format_dict["underline"] = 1

        return self.workbook.add_format(format_dict)

    def _create_all_formats(self) -> dict:
        """
        Create all required formats using the factory method.

        Returns:
            Dictionary of format names to format objects
        """
        return {
            "title": self._create_format(bold=True),
            "header_blue": self._create_format(
                bg_color=self.COLORS["blue"],
                font_color="white",
                bold=True,
            ),
            "header_lightgrey": self._create_format(
                bg_color=self.COLORS["lightgrey"],
                bold=True,
            ),
            "body_left": self._create_format(),
            "body_center": self._create_format(align="center"),
            "body_count": self._create_format(
                align="center",
                num_format=self.NUM_FORMATS["count"],
            ),
            "body_link": self._create_format(font_color="blue", underline=True),
            "body_yellow": self._create_format(bg_color=self.COLORS["yellow"]),
        }

    def get(self, format_name: str) -> xlsxwriter.format.Format:
        """
        Get a format by name.

        Args:
            format_name: Name of the format

        Returns:
            Format object

        Raises:
            KeyError: If format name doesn't exist
        """
        return self.formats[format_name]

    def for_column(self, column_name: str, align: str) -> xlsxwriter.format.Format:
        """Body format for a table column."""
        if column_name == "vulnerabilities":
            return self.get("body_count")
        if column_name == "url":
            return self.get("body_link")
        return self.get("body_center" if align == "center" else "body_left")
