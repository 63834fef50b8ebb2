"""
Configuration dataclasses for output generators.

Provides strongly-typed configuration objects for each output format,
replacing loose **kwargs with structured configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from constants import DEFAULT_TITLE


@dataclass
class GeneratorConfig:
    """Base configuration for all generators."""

    title: str = DEFAULT_TITLE

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValidationException: If configuration is invalid
        """
        from utils.validation import validate_title

        self.title = validate_title(self.title)


@dataclass
class HTMLGeneratorConfig(GeneratorConfig):
    """Configuration for HTML output generator."""

    notes_path: Optional[Path] = None

    def validate(self) -> None:
        """Validate HTML-specific configuration."""
        super().validate()

        from utils.validation import validate_file_path

        if self.notes_path:
            self.notes_path = validate_file_path(
                self.notes_path,
                must_exist=True
            )


@dataclass
class XLSXGeneratorConfig(GeneratorConfig):
    """Configuration for XLSX output generator."""

    all_pages: bool = True
    worksheet_name: str = "repositories"

    def validate(self) -> None:
        """Validate XLSX-specific configuration."""
        super().validate()

        from core.exceptions import ValidationException

        # Excel limits sheet names to 31 characters and forbids []:*?/\
        if not self.worksheet_name or len(self.worksheet_name) > 31:
            raise ValidationException(
                "Worksheet name must be 1-31 characters", "worksheet_name"
            )
        if any(char in self.worksheet_name for char in "[]:*?/\\"):
            raise ValidationException(
                "Worksheet name contains invalid characters", "worksheet_name"
            )


__all__ = [
    "GeneratorConfig",
    "HTMLGeneratorConfig",
    "XLSXGeneratorConfig",
]
