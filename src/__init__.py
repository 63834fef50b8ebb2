"""
Scanboard - Repository Security Scan Dashboard

Tabular view of repository security-scan results with filtering,
sorting and pagination over the repositories a SAST pipeline has scanned.
"""

__version__ = "1.0.0"
__author__ = "Scanboard Maintainers"

from core.models import (
    CanonicalRow,
    RawRecord,
    TableView,
    ViewState,
)

__all__ = [
    "CanonicalRow",
    "RawRecord",
    "TableView",
    "ViewState",
]
