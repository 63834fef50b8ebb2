"""
Data source interface for repository records.

Defines the contract the controller relies on when refreshing its records,
so the dashboard document can come from HTTP, a local file, or a test stub.
"""

from abc import ABC, abstractmethod
from typing import Optional

from core.models import RawRecord


class RecordSource(ABC):
    """
    Abstract base class for repository record providers.

    Implementations handle their own transport errors: a failed fetch is
    logged and reported as None, never raised to the view.
    """

    @abstractmethod
    def name(self) -> str:
        """
        Return a human-readable identifier for log messages.

        Returns:
            Source identifier (e.g., a URL or file path)
        """
        pass

    @abstractmethod
    def fetch(self) -> Optional[list[RawRecord]]:
        """
        Retrieve the full record collection.

        Returns:
            All records on success, None on failure
        """
        pass
