"""Pytest configuration for integration tests.

This module provides integration-test-specific fixtures that ensure
proper test isolation and mocking for API endpoint tests.
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def mock_confluence_client():
    """Mock ConfluenceClient for all integration tests.

    This fixture patches the ConfluenceClient class before the app is created,
    ensuring the lifespan hands our mock to the tool components instead of a
    client that talks to a real Confluence instance.
    """
    with patch("confluence_mcp_server.app.ConfluenceClient") as mock_client_class:
        mock_instance = MagicMock()
        mock_instance.base_url = "https://confluence.test"
        mock_instance.list_spaces.return_value = {
            "results": [
                {"key": "DEV", "name": "Development", "type": "global", "status": "current"},
                {"key": "OPS", "name": "Operations", "type": "global", "status": "current"},
            ],
            "size": 2,
        }
        mock_instance.get_page.return_value = {
            "id": "42",
            "title": "Release checklist",
            "status": "current",
            "space": {"key": "DEV"},
            "version": {"number": 3},
            "body": {"storage": {"value": "<p>Ship it</p>"}},
            "_links": {"webui": "/spaces/DEV/pages/42"},
        }
        mock_instance.search.return_value = {"results": [], "totalSize": 0}

        mock_client_class.return_value = mock_instance

        yield mock_instance
