"""
Command-line interface for Scanboard - Repository Security Scan Dashboard.

Loads the repository scan document, replays table actions (sort clicks,
filter selections, page request) and renders the resulting page as:
- TEXT: Aligned table printed to the terminal
- HTML: Standalone page with links to each repository
- XLSX: Spreadsheet export of the filtered, sorted rows
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from constants import RERUN_OPTIONS, SAST_TOOL_OPTIONS, SORTABLE_COLUMNS
from core.orchestrator import ScanboardOrchestrator, parse_output_types

__all__ = ["main", "parse_args", "parse_output_types", "setup_logging"]


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="scanboard",
        description="Scanboard - Repository Security Scan Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "  scanboard --source dashboard_data.json --sort vulnerabilities --tool Semgrep -o html,text"
        ),
    )

    io_group = parser.add_argument_group("input/output")
    view_group = parser.add_argument_group("view options")
    display_group = parser.add_argument_group("display options")

    # Input/Output arguments
    io_group.add_argument("-s", "--source", default=None, help="Dashboard data URL or JSON file.")
    io_group.add_argument("--config", type=Path, default=None, help="YAML settings file.")
    io_group.add_argument("-o", "--output", type=str, default=None, help="Output types (comma-separated: text, html, xlsx).")
    io_group.add_argument("--output-dir", type=Path, default=Path("."), help="Output directory.")

    # View actions, applied in order: sorts, filters, page
    view_group.add_argument(
        "--sort",
        action="append",
        choices=SORTABLE_COLUMNS,
        help="Sort by column; repeat the same column to toggle direction.",
    )
    view_group.add_argument("--tool", choices=SAST_TOOL_OPTIONS, default=None, help="SAST tool filter.")
    view_group.add_argument("--rerun", choices=RERUN_OPTIONS, default=None, help="Rerun filter.")
    view_group.add_argument("--page", type=int, default=None, help="Page to show (1-based).")

    # Display options
    display_group.add_argument("--title", type=str, default=None, help="Table title.")
    display_group.add_argument("--notes", type=Path, default=None, help="Markdown notes shown above the HTML table.")
    display_group.add_argument("--timezone", type=str, default=None, help="Timezone for update timestamps (default: UTC).")

    # Other options
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")

    return parser.parse_args(args)


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    orchestrator = ScanboardOrchestrator(args)
    orchestrator.run()


if __name__ == "__main__":
    main()
