"""Tools router for listing and calling registered tools over REST.

This module provides endpoints for:
- Listing all registered tools with their input schemas
- Getting a single tool definition
- Calling a tool with a raw JSON argument body
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from confluence_mcp_server.dependencies import get_tool_bridge, get_tool_registry
from confluence_mcp_server.models.tools import (
    ToolCallResponse,
    ToolDetail,
    ToolListResponse,
)
from confluence_mcp_server.tools import (
    ToolBridge,
    ToolDefinition,
    ToolNotFoundError,
    ToolRegistry,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


def definition_to_detail(definition: ToolDefinition) -> ToolDetail:
    """Convert a ToolDefinition to the ToolDetail Pydantic model."""
    return ToolDetail(
        name=definition.name,
        description=definition.description,
        return_direct=definition.return_direct,
        input_schema=definition.input_schema,
    )


@router.get("", response_model=ToolListResponse, summary="List all tools")
async def list_tools(
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolListResponse:
    """List all registered tools.

    Args:
        registry: Injected ToolRegistry

    Returns:
        All tools with their descriptions and input schemas
    """
    tools = [definition_to_detail(d) for d in registry.get_all_tools()]
    logger.debug(f"Listed {len(tools)} tools")
    return ToolListResponse(tools=tools)


@router.get("/{tool_name}", response_model=ToolDetail, summary="Get a tool")
async def get_tool(
    tool_name: str,
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolDetail:
    """Get a single tool definition.

    Raises:
        HTTPException: 404 if the tool is not registered
    """
    definition = registry.get_tool(tool_name)
    if definition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{tool_name}' not found",
        )
    return definition_to_detail(definition)


@router.post(
    "/{tool_name}/call",
    response_model=ToolCallResponse,
    summary="Call a tool",
)
async def call_tool(
    tool_name: str,
    request: Request,
    bridge: Annotated[ToolBridge, Depends(get_tool_bridge)],
) -> ToolCallResponse:
    """Call a tool with the request body as its JSON argument object.

    The body is handed to the bridge as is: an empty or malformed body is
    treated as an empty argument object. Failures inside the tool come back
    with status 200, ``is_error`` set and an error text result.

    Args:
        tool_name: Name of the tool to call
        request: The raw request, whose body holds the arguments
        bridge: Injected ToolBridge

    Returns:
        The tool result as text

    Raises:
        HTTPException: 404 if the tool is not registered
    """
    raw_input = (await request.body()).decode("utf-8", errors="replace")

    try:
        outcome = await run_in_threadpool(bridge.execute, tool_name, raw_input)
    except ToolNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{tool_name}' not found",
        )

    return ToolCallResponse(
        tool=tool_name,
        result=outcome.render(),
        is_error=not outcome.ok,
        return_direct=outcome.return_direct,
    )
