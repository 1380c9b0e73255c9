"""Tool discovery, schema generation, and invocation layer.

This package discovers ``@ai_tool`` methods on component instances, describes
them with JSON input schemas, and executes them from JSON call input through
the ToolBridge.
"""

from confluence_mcp_server.tools.bridge import ToolBridge, ToolOutcome
from confluence_mcp_server.tools.definition import ToolDefinition
from confluence_mcp_server.tools.discovery import ToolDiscoveryService
from confluence_mcp_server.tools.errors import RegistryStateError, ToolNotFoundError
from confluence_mcp_server.tools.marker import ToolMarker, ai_tool
from confluence_mcp_server.tools.registry import ToolRegistry
from confluence_mcp_server.tools.schema import generate_input_schema, json_schema_type
from confluence_mcp_server.tools.types import JsonSchemaType, ParameterSpec, RegistryState

__all__ = [
    # Core classes
    "ToolBridge",
    "ToolDiscoveryService",
    "ToolRegistry",
    # Types
    "JsonSchemaType",
    "ParameterSpec",
    "RegistryState",
    "ToolDefinition",
    "ToolMarker",
    "ToolOutcome",
    # Functions
    "ai_tool",
    "generate_input_schema",
    "json_schema_type",
    # Errors
    "RegistryStateError",
    "ToolNotFoundError",
]
