"""Pydantic models for the tools REST API.

This module contains response schemas for the /api/v1/tools endpoints.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolDetail(BaseModel):
    """Information about a single registered tool.

    Attributes:
        name: Unique tool name (e.g., "get-page")
        description: Description shown to the caller
        return_direct: Whether the result bypasses further model processing
        input_schema: JSON Schema object describing the call input
    """

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="Tool description")
    return_direct: bool = Field(
        default=False,
        description="Whether the result should be returned directly to the client",
    )
    input_schema: dict[str, Any] = Field(
        ..., description="JSON Schema of the call input"
    )

    model_config = ConfigDict(from_attributes=True)


class ToolListResponse(BaseModel):
    """Response model for listing all registered tools."""

    tools: list[ToolDetail] = Field(
        default_factory=list, description="List of registered tools"
    )


class ToolCallResponse(BaseModel):
    """Response model for a tool call.

    The result is always text. Failures inside the tool are reported with
    ``is_error`` set and an ``"Error executing tool: ..."`` result.
    """

    tool: str = Field(..., description="Name of the invoked tool")
    result: str = Field(..., description="Tool result as text")
    is_error: bool = Field(default=False, description="Whether the call failed")
    return_direct: bool = Field(
        default=False,
        description="Whether the result should be returned directly to the client",
    )
