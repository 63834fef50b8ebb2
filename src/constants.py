"""
Centralized configuration constants for Scanboard.

This module provides a single source of truth for configuration values
that are used across multiple modules, making them easier to update
and maintain.
"""

# ============================================================================
# View State Defaults
# ============================================================================

PAGE_SIZE = 5
"""Number of repository rows shown per page."""

ALL_FILTER = "All"
"""Filter sentinel meaning no restriction on a dimension."""

DEFAULT_SORT_KEY = "updates"
"""Sort key applied when the view is first mounted."""

DEFAULT_SORT_ORDER = "desc"
"""Sort direction applied when the view is first mounted or the key changes."""

# ============================================================================
# Filter Options
# ============================================================================

SAST_TOOL_OPTIONS = ["All", "Semgrep", "CodeQL", "Snyk Code", "ESLint"]
"""Selectable values for the SAST tool filter."""

RERUN_OPTIONS = ["All", "Yes", "No"]
"""Selectable values for the rerun filter."""

FILTER_OPTIONS = {
    "sastTool": SAST_TOOL_OPTIONS,
    "rerun": RERUN_OPTIONS,
}
"""Filter dimension to its selectable values."""

FILTER_LABELS = {
    "sastTool": "SAST Tool",
    "rerun": "Rerun",
}
"""Human-readable labels for filter dimensions."""

# ============================================================================
# Record Defaults
# ============================================================================

MISSING_SAST_TOOL = "N/A"
"""Displayed tool name when a record does not report one."""

RERUN_YES = "Yes"
RERUN_NO = "No"

# ============================================================================
# Table Columns
# ============================================================================

COLUMN_LAYOUT = [
    ("name", "left", "15%"),
    ("vulnerabilities", "center", "10%"),
    ("updates", "center", "15%"),
    ("sastTool", "center", "15%"),
    ("rerun", "center", "10%"),
    ("url", "left", "40%"),
]
"""Ordered (name, align, width) triples for the repository table."""

SORTABLE_COLUMNS = ["name", "vulnerabilities", "updates", "sastTool", "rerun"]
"""Columns the view can be sorted by, in button order."""

# ============================================================================
# Display Formatting
# ============================================================================

DISPLAY_DATE_FORMAT = "%m/%d/%Y %H:%M"
"""Update timestamp display format (MM/DD/YYYY HH:mm, 24-hour)."""

DEFAULT_DISPLAY_TIMEZONE = "UTC"
"""Timezone update timestamps are converted to before display."""

DEFAULT_TITLE = "Repositories Table"
"""Default heading for rendered tables."""

# ============================================================================
# Data Source
# ============================================================================

DEFAULT_DATA_SOURCE = "dashboard_data.json"
"""Default location of the repository dashboard document."""

API_REQUEST_TIMEOUT = 30
"""Timeout for dashboard data requests (30 seconds)."""

# ============================================================================
# Output Types
# ============================================================================

OUTPUT_CONFIGS = {
    "text": {
        "description": "Repository Table (terminal)",
        "file_suffix": None,
    },
    "html": {
        "description": "Repository Table (HTML)",
        "file_suffix": "repositories.html",
    },
    "xlsx": {
        "description": "Repository Export (XLSX)",
        "file_suffix": "repositories.xlsx",
    },
}
"""Supported output types and their file naming."""

DEFAULT_OUTPUT_TYPES = {"text"}
"""Outputs generated when none are requested."""
