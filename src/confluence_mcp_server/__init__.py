"""confluence-mcp-server: MCP server exposing Confluence operations as tools.

This package discovers ``@ai_tool`` methods on its Confluence components,
describes them with JSON input schemas, and serves them to AI agents over
the Model Context Protocol and a REST API.
"""

__version__ = "0.1.0"

from confluence_mcp_server.app import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
