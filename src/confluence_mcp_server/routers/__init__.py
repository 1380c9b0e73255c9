"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
Each router module defines endpoints for a specific surface (health, tools, MCP).
"""

from confluence_mcp_server.routers import health, mcp, tools

__all__ = [
    "health",
    "mcp",
    "tools",
]
