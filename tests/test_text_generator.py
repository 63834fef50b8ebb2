"""Tests for plain-text table output."""

import io

from core.controller import TableController
from outputs.config import GeneratorConfig
from outputs.text_generator import TextGenerator


class TestTextGenerator:
    """Tests for TextGenerator."""

    def test_supports_format(self):
        """Test format identifier."""
        assert TextGenerator().supports_format() == "text"

    def test_prints_to_stream(self, controller):
        """Test output goes to the stream when no path is given."""
        stream = io.StringIO()
        TextGenerator(stream).generate(controller.view(), None, GeneratorConfig())

        lines = stream.getvalue().splitlines()
        assert lines[0] == "Repositories Table"
        assert lines[1] == "Sorted by updates (desc) | SAST Tool: All, Rerun: All"
        assert lines[3].split() == ["Name", "Vulnerabilities", "Updates", "SAST", "Tool", "Rerun", "URL"]
        assert lines[5].startswith("feature-flags")
        assert lines[-1] == "Page 1 of 3 (12 repositories)"

    def test_row_contents(self, example_records):
        """Test row cells include the formatted timestamp and URL."""
        text = TextGenerator().render(TableController(example_records).view(), "Repos")
        assert "01/01/2024 10:00" in text
        assert "https://github.com/example/b" in text
        assert "CodeQL" in text

    def test_unknown_count_renders_blank(self):
        """Test a repository without a count shows no number."""
        view = TableController([{"name": "solo", "sastTool": "ESLint"}]).view()
        row_line = TextGenerator().render(view, "Repos").splitlines()[5]
        assert row_line.split() == ["solo", "ESLint", "No"]

    def test_filter_summary(self, controller):
        """Test active filters are shown."""
        controller.set_filter("sastTool", "Semgrep")
        text = TextGenerator().render(controller.view(), "Repos")
        assert "SAST Tool: Semgrep, Rerun: All" in text
        assert "Page 1 of 1 (4 repositories)" in text

    def test_empty_view(self):
        """Test the placeholder for an empty table."""
        text = TextGenerator().render(TableController().view(), "Repos")
        assert "No repositories to display" in text
        assert "Page" not in text

    def test_writes_file(self, tmp_path, controller):
        """Test output can be written to a file."""
        output = tmp_path / "table.txt"
        TextGenerator().generate(controller.view(), output, GeneratorConfig(title="Scans"))
        assert output.read_text().startswith("Scans\n")
