"""Tests for input validation utilities."""

from pathlib import Path

import pytest

from core.exceptions import ValidationException
from utils.validation import (
    is_remote_source,
    validate_file_path,
    validate_positive_number,
    validate_source,
    validate_title,
)


class TestIsRemoteSource:
    """Tests for is_remote_source."""

    @pytest.mark.parametrize("source,expected", [
        ("https://example.com/data.json", True),
        ("http://localhost:8000/data.json", True),
        ("dashboard_data.json", False),
        ("/var/data/dashboard_data.json", False),
        ("file:///tmp/data.json", False),
    ])
    def test_schemes(self, source, expected):
        """Test only HTTP(S) locations are remote."""
        assert is_remote_source(source) is expected


class TestValidateSource:
    """Tests for validate_source."""

    def test_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        assert validate_source("  data.json  ") == "data.json"

    @pytest.mark.parametrize("source", ["", "   ", None])
    def test_empty(self, source):
        """Test empty sources are rejected."""
        with pytest.raises(ValidationException):
            validate_source(source)

    def test_control_characters(self):
        """Test control characters are rejected."""
        with pytest.raises(ValidationException) as exc:
            validate_source("data\n.json")
        assert "invalid characters" in str(exc.value)

    def test_url_without_host(self):
        """Test URLs must name a host."""
        with pytest.raises(ValidationException):
            validate_source("https:///data.json")


class TestValidateFilePath:
    """Tests for validate_file_path."""

    def test_existing_file(self, tmp_path):
        """Test existing files pass."""
        path = tmp_path / "notes.md"
        path.write_text("# Notes")
        assert validate_file_path(path) == path

    def test_missing_file(self, tmp_path):
        """Test missing files are rejected when required."""
        with pytest.raises(ValidationException):
            validate_file_path(tmp_path / "absent.md")

    def test_missing_allowed(self, tmp_path):
        """Test missing files pass when existence is not required."""
        path = tmp_path / "later.md"
        assert validate_file_path(path, must_exist=False) == path

    def test_empty(self):
        """Test an empty path is rejected."""
        with pytest.raises(ValidationException):
            validate_file_path(None)


class TestValidatePositiveNumber:
    """Tests for validate_positive_number."""

    def test_in_range(self):
        """Test values inside the range pass."""
        assert validate_positive_number(30.0, "timeout", min_value=1.0, max_value=600.0) == 30.0

    def test_below_minimum(self):
        """Test values below the minimum are rejected."""
        with pytest.raises(ValidationException) as exc:
            validate_positive_number(-1, "timeout")
        assert exc.value.field == "timeout"

    def test_above_maximum(self):
        """Test values above the maximum are rejected."""
        with pytest.raises(ValidationException):
            validate_positive_number(700, "timeout", max_value=600)


class TestValidateTitle:
    """Tests for validate_title."""

    def test_strips(self):
        """Test titles are stripped."""
        assert validate_title("  Repositories Table ") == "Repositories Table"

    def test_empty(self):
        """Test empty titles are rejected."""
        with pytest.raises(ValidationException):
            validate_title("   ")

    def test_too_long(self):
        """Test titles over 200 characters are rejected."""
        with pytest.raises(ValidationException):
            validate_title("x" * 201)
