"""Integrations with external data sources."""

from integrations.dashboard_data import DashboardDataSource

__all__ = [
    "DashboardDataSource",
]
