"""Tests for the end-to-end Scanboard workflow."""

import pytest

from cli import main, parse_args
from core.orchestrator import ScanboardOrchestrator


def _run(argv):
    return ScanboardOrchestrator(parse_args(argv)).run()


class TestScanboardOrchestrator:
    """Tests for ScanboardOrchestrator.run."""

    def test_default_text_output(self, dashboard_file, capsys):
        """Test the default run prints the first page."""
        view = _run(["-s", str(dashboard_file)])

        out = capsys.readouterr().out
        assert "feature-flags" in out
        assert "Page 1 of 3 (12 repositories)" in out
        assert view.record_count == 12

    def test_actions_are_replayed(self, dashboard_file):
        """Test sorts, filters and page are applied in order."""
        view = _run([
            "-s", str(dashboard_file),
            "--sort", "vulnerabilities", "--sort", "vulnerabilities",
            "--rerun", "No",
        ])
        assert view.state.sort_order.value == "asc"
        assert [r.name for r in view.rows] == [
            "billing", "jobs-worker", "infra", "gql-schema", "ledger",
        ]
        assert view.total_pages == 2

    def test_page_selection(self, dashboard_file):
        """Test a valid page request."""
        view = _run(["-s", str(dashboard_file), "--page", "3"])
        assert [r.name for r in view.rows] == ["gql-schema", "data-pipeline"]

    def test_out_of_range_page(self, dashboard_file, caplog):
        """Test an out-of-range page keeps page 1 and warns."""
        view = _run(["-s", str(dashboard_file), "--page", "9"])
        assert view.current_page == 1
        assert "out of range" in caplog.text

    def test_file_outputs(self, dashboard_file, tmp_path):
        """Test HTML and XLSX files are written to the output directory."""
        out_dir = tmp_path / "reports"
        _run(["-s", str(dashboard_file), "-o", "html,xlsx", "--output-dir", str(out_dir)])

        assert (out_dir / "repositories.html").exists()
        assert (out_dir / "repositories.xlsx").exists()

    def test_settings_file(self, dashboard_file, tmp_path, capsys):
        """Test settings are read from YAML and CLI flags win."""
        settings_file = tmp_path / "scanboard.yaml"
        settings_file.write_text(f"source: {dashboard_file}\ntitle: From YAML\n")

        _run(["--config", str(settings_file), "--title", "From CLI"])

        assert capsys.readouterr().out.startswith("From CLI\n")

    def test_unavailable_source(self, tmp_path, capsys, caplog):
        """Test a missing document renders an empty table."""
        view = _run(["-s", str(tmp_path / "absent.json")])

        assert view.is_empty
        assert "No repositories to display" in capsys.readouterr().out
        assert "Dashboard data could not be loaded." in caplog.text

    def test_invalid_output_type(self, dashboard_file):
        """Test unknown output types exit with status 1."""
        with pytest.raises(SystemExit) as exc:
            _run(["-s", str(dashboard_file), "-o", "pdf"])
        assert exc.value.code == 1

    def test_missing_settings_file(self, tmp_path):
        """Test a missing --config file exits with status 1."""
        with pytest.raises(SystemExit) as exc:
            _run(["--config", str(tmp_path / "absent.yaml")])
        assert exc.value.code == 1

    def test_main(self, dashboard_file, capsys):
        """Test the console entry point."""
        main(["-s", str(dashboard_file), "--tool", "CodeQL"])
        assert "Page 1 of 1 (3 repositories)" in capsys.readouterr().out
