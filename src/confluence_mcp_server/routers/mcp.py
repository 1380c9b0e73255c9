"""MCP endpoint speaking JSON-RPC 2.0 over HTTP.

This module binds the tool registry and the invocation bridge to the Model
Context Protocol methods an agent uses:
- initialize / notifications/initialized
- ping
- tools/list
- tools/call
"""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from confluence_mcp_server import __version__
from confluence_mcp_server.dependencies import get_tool_bridge
from confluence_mcp_server.models.mcp import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    JsonRpcError,
    JsonRpcRequest,
    TextContent,
    ToolCallParams,
    ToolCallResult,
)
from confluence_mcp_server.tools import ToolBridge, ToolNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["mcp"])


def rpc_result(request_id: int | str | None, result: Any) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "id": request_id, "result": result})


def rpc_error(request_id: int | str | None, code: int, message: str) -> JSONResponse:
    error = JsonRpcError(code=code, message=message)
    return JSONResponse(
        {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": error.model_dump(exclude_none=True),
        }
    )


@router.post("/mcp", summary="MCP JSON-RPC endpoint")
async def handle_mcp(
    request: Request,
    bridge: Annotated[ToolBridge, Depends(get_tool_bridge)],
) -> Response:
    """Dispatch a single JSON-RPC request.

    Protocol-level problems are answered with JSON-RPC errors. Tool failures
    are not protocol errors: they come back as a normal result with
    ``isError`` set. Notifications are acknowledged with 202 and no body.

    Args:
        request: The raw HTTP request
        bridge: Injected ToolBridge

    Returns:
        The JSON-RPC response
    """
    try:
        payload = json.loads(await request.body())
    except ValueError as e:
        logger.warning(f"Rejected unparseable MCP request: {e}")
        return rpc_error(None, PARSE_ERROR, "Parse error")

    if not isinstance(payload, dict):
        return rpc_error(None, INVALID_REQUEST, "Invalid Request: expected a JSON object")

    try:
        rpc = JsonRpcRequest.model_validate(payload)
    except ValidationError as e:
        return rpc_error(payload.get("id"), INVALID_REQUEST, f"Invalid Request: {e}")

    if rpc.id is None:
        logger.debug(f"Received MCP notification: {rpc.method}")
        return Response(status_code=status.HTTP_202_ACCEPTED)

    logger.debug(f"MCP request {rpc.id}: {rpc.method}")

    if rpc.method == "initialize":
        settings = request.app.state.settings
        return rpc_result(
            rpc.id,
            {
                "protocolVersion": settings.protocol_version,
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {"name": "confluence-mcp-server", "version": __version__},
            },
        )

    if rpc.method == "ping":
        return rpc_result(rpc.id, {})

    if rpc.method == "tools/list":
        return rpc_result(rpc.id, {"tools": bridge.registry.list_tools()})

    if rpc.method == "tools/call":
        return await _call_tool(rpc, bridge)

    return rpc_error(rpc.id, METHOD_NOT_FOUND, f"Method not found: {rpc.method}")


async def _call_tool(rpc: JsonRpcRequest, bridge: ToolBridge) -> JSONResponse:
    try:
        params = ToolCallParams.model_validate(rpc.params)
    except ValidationError as e:
        return rpc_error(rpc.id, INVALID_PARAMS, f"Invalid params: {e}")

    raw_input = json.dumps(params.arguments) if params.arguments is not None else ""

    try:
        outcome = await run_in_threadpool(bridge.execute, params.name, raw_input)
    except ToolNotFoundError:
        logger.info(f"MCP call for unknown tool: {params.name}")
        return rpc_error(rpc.id, INVALID_PARAMS, f"Unknown tool: {params.name}")

    result = ToolCallResult(
        content=[TextContent(text=outcome.render())],
        isError=not outcome.ok,
    )
    return rpc_result(rpc.id, result.model_dump())
