"""
Pytest configuration and fixtures for AKHQ MCP tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add the repository root to path for imports
# This allows `from akhq_mcp.templating import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from akhq_mcp.client import AkhqClient, BaseUrl  # noqa: E402


@pytest.fixture
def base_url():
    """Base URL register pointing at a fake AKHQ."""
    return BaseUrl("http://akhq.test:8080")


@pytest.fixture
def mock_client(base_url):
    """AkhqClient whose call() is mocked to return an empty JSON object."""
    client = AkhqClient(base_url)
    client.call = AsyncMock(return_value={})
    return client


@pytest.fixture
def sample_topics():
    """Sample AKHQ topic listing."""
    return {
        "results": [
            {"name": "orders", "partitions": 3},
            {"name": "payments", "partitions": 6},
        ],
        "page": 1,
        "total": 2,
    }
