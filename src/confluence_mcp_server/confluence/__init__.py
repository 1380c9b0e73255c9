"""Confluence REST client.

This package provides the HTTP client used by the tool components to talk to
a Confluence instance.
"""

from confluence_mcp_server.confluence.client import ConfluenceClient, ConfluenceError

__all__ = ["ConfluenceClient", "ConfluenceError"]
