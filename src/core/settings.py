"""
Settings for a Scanboard run.

Settings can come from a YAML file and are overridden by command-line flags.
"""

import logging
from dataclasses import dataclass, fields
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from constants import (
    API_REQUEST_TIMEOUT,
    DEFAULT_DATA_SOURCE,
    DEFAULT_DISPLAY_TIMEZONE,
    DEFAULT_TITLE,
)
from core.exceptions import ConfigurationException, ValidationException

logger = logging.getLogger(__name__)


@dataclass
class ScanboardSettings:
    """
    Run settings.

    Attributes:
        source: URL or file path of the dashboard document
        request_timeout: HTTP timeout in seconds
        display_timezone: IANA timezone name for update timestamps
        title: Table heading
        notes_path: Optional Markdown file shown above the HTML table
    """

    source: str = DEFAULT_DATA_SOURCE
    request_timeout: float = API_REQUEST_TIMEOUT
    display_timezone: str = DEFAULT_DISPLAY_TIMEZONE
    title: str = DEFAULT_TITLE
    notes_path: Optional[Path] = None

    @classmethod
    def load_from_file(cls, settings_path: Path) -> "ScanboardSettings":
        """
        Load settings from a YAML file.

        Unknown keys are ignored with a warning.

        Args:
            settings_path: Path to YAML settings file

        Returns:
            ScanboardSettings instance

        Raises:
            ConfigurationException: If the file is missing or invalid
        """
        if not settings_path.exists():
            raise ConfigurationException(f"Settings file not found: {settings_path}")

        try:
            with open(settings_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse settings YAML: {e}")

        if not isinstance(data, dict):
            raise ConfigurationException("Settings file must be a YAML dictionary")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning(f"Ignoring unknown setting '{key}' in {settings_path}")

        values = {k: v for k, v in data.items() if k in known}
        if values.get("notes_path"):
            values["notes_path"] = Path(values["notes_path"])

        settings = cls(**values)
        settings.validate()
        return settings

    def override(self, **overrides) -> "ScanboardSettings":
        """Apply non-None overrides (e.g. from CLI flags) in place."""
        for key, value in overrides.items():
            if value is not None:
                setattr(self, key, value)
        return self

    def validate(self) -> None:
        """
        Validate settings values.

        Raises:
            ConfigurationException: If a value is invalid
        """
        from utils.validation import validate_positive_number, validate_source

        try:
            self.source = validate_source(self.source)
            self.request_timeout = validate_positive_number(
                float(self.request_timeout),
                "request_timeout",
                min_value=1.0,
                max_value=600.0,
            )
        except (TypeError, ValueError, ValidationException) as e:
            raise ConfigurationException(str(e))

        # Raises for unknown timezone names
        self.tz

    @property
    def tz(self) -> tzinfo:
        """Resolved display timezone."""
        if self.display_timezone == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            raise ConfigurationException(f"Unknown timezone: {self.display_timezone}")
