"""Output generators for the repository table."""

from outputs.base import OutputGenerator
from outputs.html_generator import HTMLGenerator
from outputs.text_generator import TextGenerator
from outputs.xlsx_generator import XLSXGenerator

__all__ = [
    "OutputGenerator",
    "HTMLGenerator",
    "TextGenerator",
    "XLSXGenerator",
]
