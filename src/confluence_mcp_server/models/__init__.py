"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from confluence_mcp_server.models.health import HealthResponse
from confluence_mcp_server.models.mcp import (
    JsonRpcError,
    JsonRpcRequest,
    TextContent,
    ToolCallParams,
    ToolCallResult,
)
from confluence_mcp_server.models.tools import (
    ToolCallResponse,
    ToolDetail,
    ToolListResponse,
)

__all__ = [
    "HealthResponse",
    "JsonRpcError",
    "JsonRpcRequest",
    "TextContent",
    "ToolCallParams",
    "ToolCallResponse",
    "ToolCallResult",
    "ToolDetail",
    "ToolListResponse",
]
