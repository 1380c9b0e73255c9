"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject the settings, the tool registry and the bridge.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from confluence_mcp_server.config import ConfluenceMcpSettings
from confluence_mcp_server.tools import ToolBridge, ToolRegistry


@lru_cache
def get_settings() -> ConfluenceMcpSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the CONFLUENCE_MCP_ prefix.

    Returns:
        ConfluenceMcpSettings: The application configuration settings.
    """
    return ConfluenceMcpSettings()


def get_tool_registry(request: Request) -> ToolRegistry:
    """Get the tool registry from app state.

    The registry is built once by tool discovery during application startup
    and is read-only afterwards.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolRegistry: The ready tool registry.

    Raises:
        HTTPException: If discovery has not completed (503 Service Unavailable).
    """
    registry: ToolRegistry | None = getattr(request.app.state, "tool_registry", None)
    if registry is None or not registry.is_ready:
        raise HTTPException(
            status_code=503,
            detail="Tool registry not initialized",
        )
    return registry


def get_tool_bridge(request: Request) -> ToolBridge:
    """Get the tool bridge from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolBridge: The bridge bound to the ready registry.

    Raises:
        HTTPException: If discovery has not completed (503 Service Unavailable).
    """
    get_tool_registry(request)
    return request.app.state.tool_bridge
