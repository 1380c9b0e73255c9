"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from confluence_mcp_server import __version__
from confluence_mcp_server.models.health import HealthResponse
from confluence_mcp_server.tools import ToolRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of the server, along with
    the tool registry state. The status is "starting" until tool discovery
    has finished.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    registry: ToolRegistry | None = getattr(request.app.state, "tool_registry", None)

    if registry is None:
        return HealthResponse(status="starting", version=__version__)

    return HealthResponse(
        status="ok" if registry.is_ready else "starting",
        version=__version__,
        registry_state=registry.state.value,
        tool_count=len(registry),
    )
