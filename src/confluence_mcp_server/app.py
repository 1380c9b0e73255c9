"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from confluence_mcp_server import __version__
from confluence_mcp_server.components import build_components
from confluence_mcp_server.config import ConfluenceMcpSettings
from confluence_mcp_server.confluence import ConfluenceClient
from confluence_mcp_server.routers import health, mcp, tools
from confluence_mcp_server.tools import ToolBridge, ToolDiscoveryService, ToolRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    On startup the Confluence client and the tool components are created, tool
    discovery populates a fresh ToolRegistry exactly once, and the registry and
    bridge are stored in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: ConfluenceMcpSettings = app.state.settings

    # Startup: Initialize Confluence client and components
    app.state.confluence_client = ConfluenceClient(
        base_url=settings.confluence_base_url,
        api_token=settings.confluence_api_token,
        username=settings.confluence_username,
        timeout=settings.confluence_timeout_seconds,
    )
    components = build_components(
        app.state.confluence_client, default_limit=settings.default_page_limit
    )

    # Discover tools
    registry = ToolRegistry()
    discovery = ToolDiscoveryService(
        excluded_module_prefixes=settings.excluded_module_prefixes
    )
    discovery.discover(registry, components)

    app.state.tool_registry = registry
    app.state.tool_bridge = ToolBridge(registry)
    logger.info(f"Serving {len(registry)} tools")

    yield

    # Shutdown: Clean up resources
    if hasattr(app.state, "confluence_client"):
        app.state.confluence_client.close()
        logger.info("Confluence client closed")


def create_app(settings: ConfluenceMcpSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept an optional
    settings object for testing or explicit configuration.

    Args:
        settings: Optional ConfluenceMcpSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from confluence_mcp_server.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="confluence-mcp-server",
        description="MCP server exposing Confluence operations as discoverable tools",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Configure CORS
    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(tools.router)
    app.include_router(mcp.router)

    return app
