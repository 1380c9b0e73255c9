"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "starting").
        version: The version of confluence-mcp-server.
        registry_state: Lifecycle state of the tool registry.
        tool_count: Number of registered tools.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of confluence-mcp-server")
    registry_state: str | None = Field(
        default=None,
        description="Tool registry lifecycle state",
    )
    tool_count: int = Field(default=0, description="Number of registered tools")
