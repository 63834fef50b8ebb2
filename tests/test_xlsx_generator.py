"""Tests for XLSX export."""

import zipfile

import pytest

from core.controller import TableController
from core.exceptions import OutputException, ValidationException
from outputs.config import HTMLGeneratorConfig, XLSXGeneratorConfig
from outputs.xlsx_generator import XLSXGenerator


def _shared_strings(path):
    with zipfile.ZipFile(path) as archive:
        return archive.read("xl/sharedStrings.xml").decode("utf-8")


class TestXLSXGenerator:
    """Tests for XLSXGenerator."""

    def test_supports_format(self):
        """Test format identifier."""
        assert XLSXGenerator().supports_format() == "xlsx"

    def test_generate_creates_workbook(self, tmp_path, controller):
        """Test a valid workbook is written."""
        output = tmp_path / "repositories.xlsx"
        XLSXGenerator().generate(controller.view(), output, XLSXGeneratorConfig())

        assert output.exists()
        assert zipfile.is_zipfile(output)
        strings = _shared_strings(output)
        assert "Repositories Table" in strings
        assert "SAST Tool" in strings

    def test_all_pages_exports_every_filtered_row(self, tmp_path, controller):
        """Test rows beyond the visible page are exported."""
        output = tmp_path / "all.xlsx"
        XLSXGenerator().generate(controller.view(), output, XLSXGeneratorConfig(all_pages=True))

        strings = _shared_strings(output)
        assert "feature-flags" in strings
        assert "data-pipeline" in strings
        assert "12 of 12" in strings

    def test_visible_page_only(self, tmp_path, controller):
        """Test only the visible page is exported when requested."""
        output = tmp_path / "page.xlsx"
        XLSXGenerator().generate(controller.view(), output, XLSXGeneratorConfig(all_pages=False))

        strings = _shared_strings(output)
        assert "feature-flags" in strings
        assert "data-pipeline" not in strings
        assert "1 of 3" in strings

    def test_respects_filters(self, tmp_path, controller):
        """Test filtered-out rows are not exported."""
        controller.set_filter("sastTool", "CodeQL")
        output = tmp_path / "codeql.xlsx"
        XLSXGenerator().generate(controller.view(), output, XLSXGeneratorConfig())

        strings = _shared_strings(output)
        assert "billing" in strings
        assert "api-gateway" not in strings

    def test_empty_view(self, tmp_path):
        """Test an empty table still produces a workbook."""
        output = tmp_path / "empty.xlsx"
        XLSXGenerator().generate(TableController().view(), output, XLSXGeneratorConfig())
        assert zipfile.is_zipfile(output)

    def test_unknown_count(self, tmp_path):
        """Test rows without a count are exported with a blank cell."""
        output = tmp_path / "blank.xlsx"
        view = TableController([{"name": "uncounted"}]).view()
        XLSXGenerator().generate(view, output, XLSXGeneratorConfig())
        assert "uncounted" in _shared_strings(output)

    def test_wrong_config_type(self, tmp_path, controller):
        """Test a non-XLSX config is rejected."""
        with pytest.raises(OutputException):
            XLSXGenerator().generate(controller.view(), tmp_path / "out.xlsx", HTMLGeneratorConfig())

    @pytest.mark.parametrize("name", ["", "x" * 32, "repos/2024", "a:b"])
    def test_invalid_worksheet_name(self, tmp_path, controller, name):
        """Test worksheet names Excel would refuse are rejected."""
        config = XLSXGeneratorConfig(worksheet_name=name)
        with pytest.raises(ValidationException):
            XLSXGenerator().generate(controller.view(), tmp_path / "out.xlsx", config)
