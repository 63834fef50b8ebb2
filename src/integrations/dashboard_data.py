"""
Dashboard data source.

Loads the ``{"repos": [...]}`` document listing scanned repositories,
either over HTTP(S) or from a local JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from constants import API_REQUEST_TIMEOUT
from core.exceptions import IntegrationException
from core.models import RawRecord
from core.source_interface import RecordSource
from utils.validation import is_remote_source

logger = logging.getLogger(__name__)


class DashboardDataSource(RecordSource):
    """
    Client for the repository dashboard document.

    A fetch either returns the complete record list or None; partial
    documents are never handed to the view.
    """

    def __init__(self, location: str, timeout: float = API_REQUEST_TIMEOUT):
        """
        Initialize data source.

        Args:
            location: HTTP(S) URL or local file path of the document
            timeout: Request timeout in seconds for remote locations
        """
        self.location = location
        self.timeout = timeout
        self.last_error: Optional[str] = None

    def name(self) -> str:
        return self.location

    def fetch(self) -> Optional[list[RawRecord]]:
        """
        Fetch and parse the dashboard document.

        Returns:
            Records in document order, or None if the fetch failed
        """
        self.last_error = None
        try:
            logger.info(f"Loading dashboard data from {self.location}...")
            data = self._load_document()
            records = parse_dashboard_document(data)
            logger.info(f"Loaded {len(records)} repository records")
            return records

        except requests.Timeout:
            self.last_error = f"timed out after {self.timeout}s"
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            self.last_error = f"HTTP {status}"
        except requests.RequestException as e:
            self.last_error = str(e)
        except (OSError, ValueError) as e:
            self.last_error = str(e)
        except IntegrationException as e:
            self.last_error = e.reason

        logger.warning(f"Failed to load dashboard data from {self.location}: {self.last_error}")
        return None

    def _load_document(self) -> Any:
        if is_remote_source(self.location):
            response = requests.get(self.location, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        with open(Path(self.location), "r", encoding="utf-8") as f:
            return json.load(f)


def parse_dashboard_document(data: Any) -> list[RawRecord]:
    """
    Extract records from a dashboard document.

    Args:
        data: Decoded JSON document

    Returns:
        RawRecords in document order; entries that are not objects are skipped

    Raises:
        IntegrationException: If the document has no ``repos`` list
    """
    if not isinstance(data, dict):
        raise IntegrationException("dashboard data", "document is not a JSON object")

    repos = data.get("repos")
    if not isinstance(repos, list):
        raise IntegrationException("dashboard data", "document has no 'repos' list")

    records = []
    for index, entry in enumerate(repos):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping repos[{index}]: expected an object, got {type(entry).__name__}")
            continue
        records.append(RawRecord.from_dict(entry))

    return records
