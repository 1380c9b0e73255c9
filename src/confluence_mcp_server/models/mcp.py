"""Pydantic models for the MCP JSON-RPC 2.0 endpoint."""

from typing import Any

from pydantic import BaseModel, Field

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcRequest(BaseModel):
    """A JSON-RPC request or notification (no ``id``)."""

    jsonrpc: str = Field(default="2.0", description="Protocol version, always '2.0'")
    id: int | str | None = Field(default=None, description="Request id")
    method: str = Field(..., min_length=1, description="Method name")
    params: dict[str, Any] = Field(default_factory=dict, description="Method params")


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any | None = None


class ToolCallParams(BaseModel):
    """Params of a ``tools/call`` request."""

    name: str = Field(..., min_length=1, description="Tool name")
    arguments: dict[str, Any] | None = Field(
        default=None, description="Call arguments keyed by parameter name"
    )


class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result of a ``tools/call`` request."""

    content: list[TextContent]
    isError: bool = False
