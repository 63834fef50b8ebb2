"""
Pytest fixtures and configuration for Scanboard tests.

Provides shared fixtures and test utilities across the test suite.
"""

import json

import pytest

from core.controller import TableController
from core.models import RawRecord
from core.normalizer import normalize


@pytest.fixture
def example_records():
    """The two-repository example: one fresh Semgrep scan, one CodeQL scan without a timestamp."""
    return [
        RawRecord(
            name="a",
            vulnerabilities=3,
            updates="2024-01-01T10:00:00Z",
            sast_tool="Semgrep",
            rerun=True,
            repo_url="https://github.com/example/a",
        ),
        RawRecord(
            name="b",
            vulnerabilities=1,
            updates=None,
            sast_tool="CodeQL",
            rerun=False,
            repo_url="https://github.com/example/b",
        ),
    ]


@pytest.fixture
def sample_repo_dicts():
    """Twelve wire-format repository records covering every tool and rerun value."""
    return [
        {"name": "api-gateway", "vulnerabilities": 12, "updates": "2024-03-01T08:00:00Z", "sastTool": "Semgrep", "rerun": True, "repo_url": "https://github.com/acme/api-gateway"},
        {"name": "billing", "vulnerabilities": 0, "updates": "2024-02-15T12:30:00Z", "sastTool": "CodeQL", "rerun": False, "repo_url": "https://github.com/acme/billing"},
        {"name": "checkout-web", "vulnerabilities": 7, "updates": "2024-03-05T17:45:00Z", "sastTool": "ESLint", "rerun": False, "repo_url": "https://github.com/acme/checkout-web"},
        {"name": "data-pipeline", "vulnerabilities": 3, "sastTool": "Snyk Code", "rerun": True, "repo_url": "https://github.com/acme/data-pipeline"},
        {"name": "edge-proxy", "vulnerabilities": 25, "updates": "2024-01-20T09:15:00Z", "sastTool": "Semgrep", "rerun": False, "repo_url": "https://github.com/acme/edge-proxy"},
        {"name": "feature-flags", "vulnerabilities": 1, "updates": "2024-03-10T00:00:00Z", "sastTool": "CodeQL", "rerun": True, "repo_url": "https://github.com/acme/feature-flags"},
        {"name": "gql-schema", "vulnerabilities": 4, "updates": "2023-12-31T23:59:00Z", "rerun": False, "repo_url": "https://github.com/acme/gql-schema"},
        {"name": "hr-portal", "vulnerabilities": 9, "updates": "2024-02-01T10:00:00Z", "sastTool": "Semgrep", "rerun": True, "repo_url": "https://github.com/acme/hr-portal"},
        {"name": "infra", "vulnerabilities": 2, "updates": "2024-02-28T16:20:00Z", "sastTool": "Snyk Code", "rerun": False, "repo_url": "https://github.com/acme/infra"},
        {"name": "jobs-worker", "vulnerabilities": 0, "updates": "2024-01-05T06:00:00Z", "sastTool": "CodeQL", "repo_url": "https://github.com/acme/jobs-worker"},
        {"name": "kyc-service", "vulnerabilities": 15, "updates": "2024-03-02T11:11:00Z", "sastTool": "ESLint", "rerun": True, "repo_url": "https://github.com/acme/kyc-service"},
        {"name": "ledger", "vulnerabilities": 6, "updates": "2024-01-31T13:00:00Z", "sastTool": "Semgrep", "rerun": False, "repo_url": "https://github.com/acme/ledger"},
    ]


@pytest.fixture
def sample_rows(sample_repo_dicts):
    """Canonical rows for the twelve sample repositories."""
    return normalize(sample_repo_dicts)


@pytest.fixture
def controller(sample_repo_dicts):
    """Controller loaded with the twelve sample repositories."""
    return TableController(sample_repo_dicts)


@pytest.fixture
def dashboard_file(tmp_path, sample_repo_dicts):
    """Dashboard document written to a temporary JSON file."""
    path = tmp_path / "dashboard_data.json"
    path.write_text(json.dumps({"repos": sample_repo_dicts}))
    return path
