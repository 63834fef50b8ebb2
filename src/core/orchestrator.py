"""
Orchestrates the main workflow for Scanboard - Repository Security Scan Dashboard.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from constants import DEFAULT_OUTPUT_TYPES, OUTPUT_CONFIGS
from core.controller import TableController
from core.exceptions import ConfigurationException, OutputException, ValidationException
from core.models import FilterDimension, TableView
from core.settings import ScanboardSettings
from integrations.dashboard_data import DashboardDataSource
from outputs.config import GeneratorConfig, HTMLGeneratorConfig, XLSXGeneratorConfig
from outputs.html_generator import HTMLGenerator
from outputs.text_generator import TextGenerator
from outputs.xlsx_generator import XLSXGenerator
from utils.logging_helpers import log_error_section, log_info_header, log_warning_section

logger = logging.getLogger(__name__)


def parse_output_types(output_arg: Optional[str]) -> set[str]:
    """
    Parse comma-delimited output types argument.

    Args:
        output_arg: Value of --output, or None

    Returns:
        Requested output types (DEFAULT_OUTPUT_TYPES when None)

    Raises:
        ValueError: If any requested type is unknown
    """
    if output_arg is None:
        return set(DEFAULT_OUTPUT_TYPES)

    valid_types = set(OUTPUT_CONFIGS.keys())
    requested_types = {t.strip() for t in output_arg.split(",") if t.strip()}
    invalid_types = requested_types - valid_types
    if invalid_types:
        raise ValueError(
            f"Invalid output type(s): {', '.join(sorted(invalid_types))}. "
            f"Valid types: {', '.join(sorted(valid_types))}"
        )
    return requested_types


class ScanboardOrchestrator:
    """
    Orchestrates the Scanboard workflow from data loading to table output.
    """

    def __init__(self, args):
        """
        Initialize the orchestrator with parsed command-line arguments.

        Args:
            args: Parsed arguments from argparse.
        """
        self.args = args
        self.settings: Optional[ScanboardSettings] = None
        self.controller: Optional[TableController] = None

    def run(self) -> TableView:
        """
        Execute the main Scanboard workflow.

        Returns:
            The final table view that was rendered
        """
        log_info_header("Scanboard - Repository Security Scan Dashboard", logger=logger)

        try:
            output_types = parse_output_types(self.args.output)
            self.settings = self._load_settings()
        except (ValueError, ConfigurationException) as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)

        logger.info(
            "Output types: "
            + ", ".join(OUTPUT_CONFIGS[t]["description"] for t in sorted(output_types))
        )

        self.controller = TableController(display_tz=self.settings.tz)
        source = DashboardDataSource(self.settings.source, self.settings.request_timeout)
        if not self.controller.refresh(source):
            log_warning_section(
                "Dashboard data could not be loaded.",
                [
                    f"Source: {self.settings.source}",
                    f"Reason: {source.last_error}",
                    "The table will be rendered without rows.",
                ],
                logger=logger,
            )

        try:
            self._apply_actions()
        except ValidationException as e:
            logger.error(str(e))
            sys.exit(1)

        view = self.controller.view()

        try:
            output_files = self._generate_outputs(view, output_types)
        except (OutputException, ValidationException) as e:
            log_error_section("Output generation failed.", [str(e)], logger=logger)
            sys.exit(1)

        logger.info("=" * 60)
        for output_type, file_path in output_files.items():
            logger.info(f"  - {OUTPUT_CONFIGS[output_type]['description']}: {file_path}")
        logger.info(
            f"Showing page {view.current_page} of {view.total_pages}: "
            f"{len(view.rows)} of {view.total_rows} matching repositories "
            f"({view.record_count} loaded)"
        )
        return view

    def _load_settings(self) -> ScanboardSettings:
        """Load settings from --config (if given) and apply CLI overrides."""
        config_path = getattr(self.args, "config", None)
        if config_path:
            settings = ScanboardSettings.load_from_file(Path(config_path))
        else:
            settings = ScanboardSettings()

        settings.override(
            source=self.args.source,
            display_timezone=self.args.timezone,
            title=self.args.title,
            notes_path=self.args.notes,
        )
        settings.validate()
        return settings

    def _apply_actions(self) -> None:
        """Replay the requested sort, filter and page actions in order."""
        for key in self.args.sort or []:
            self.controller.set_sort_key(key)

        if self.args.tool is not None:
            self.controller.set_filter(FilterDimension.SAST_TOOL, self.args.tool)
        if self.args.rerun is not None:
            self.controller.set_filter(FilterDimension.RERUN, self.args.rerun)

        if self.args.page is not None:
            self.controller.set_page(self.args.page)
            if self.controller.state.current_page != self.args.page:
                logger.warning(
                    f"Page {self.args.page} is out of range (1..{self.controller.total_pages}); "
                    f"showing page {self.controller.state.current_page}"
                )

    def _generate_outputs(self, view: TableView, output_types: set[str]) -> dict:
        """Render every requested output; return type to written location."""
        output_dir = Path(self.args.output_dir)
        if output_types - {"text"}:
            output_dir.mkdir(parents=True, exist_ok=True)

        output_files = {}
        title = self.settings.title

        if "html" in output_types:
            path = output_dir / OUTPUT_CONFIGS["html"]["file_suffix"]
            HTMLGenerator().generate(
                view, path, HTMLGeneratorConfig(title=title, notes_path=self.settings.notes_path)
            )
            output_files["html"] = path

        if "xlsx" in output_types:
            path = output_dir / OUTPUT_CONFIGS["xlsx"]["file_suffix"]
            XLSXGenerator().generate(view, path, XLSXGeneratorConfig(title=title))
            output_files["xlsx"] = path

        if "text" in output_types:
            TextGenerator().generate(view, None, GeneratorConfig(title=title))
            output_files["text"] = "stdout"

        return output_files
