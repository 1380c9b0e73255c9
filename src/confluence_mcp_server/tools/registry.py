"""Tool registry.

The registry is built once during application startup and then frozen. It
is an explicit object handed to every consumer (see ``app.state``), never a
module-level global.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from confluence_mcp_server.tools.definition import ToolDefinition
from confluence_mcp_server.tools.errors import RegistryStateError, ToolNotFoundError
from confluence_mcp_server.tools.types import RegistryState

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Catalog of tool definitions keyed by tool name.

    Lifecycle: UNINITIALIZED -> DISCOVERING -> READY. Definitions can only be
    registered while DISCOVERING. Once READY the catalog is read-only and safe
    for concurrent readers.
    """

    def __init__(self) -> None:
        self._state = RegistryState.UNINITIALIZED
        self._tools: dict[str, ToolDefinition] = {}

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def tools(self) -> Mapping[str, ToolDefinition]:
        """Read-only view of the catalog."""
        return MappingProxyType(self._tools)

    @property
    def is_ready(self) -> bool:
        return self._state is RegistryState.READY

    def begin_discovery(self) -> None:
        """Move from UNINITIALIZED to DISCOVERING.

        Raises:
            RegistryStateError: If discovery already started; there is no re-scan.
        """
        if self._state is not RegistryState.UNINITIALIZED:
            raise RegistryStateError(
                f"Cannot start discovery from state '{self._state.value}'"
            )
        self._state = RegistryState.DISCOVERING
        logger.debug("Tool registry entered discovery")

    def register(self, definition: ToolDefinition) -> None:
        """Add a definition. The last registration wins on name collisions.

        Raises:
            RegistryStateError: If the registry is not DISCOVERING.
        """
        if self._state is not RegistryState.DISCOVERING:
            raise RegistryStateError(
                f"Cannot register tool '{definition.name}' in state '{self._state.value}'"
            )

        previous = self._tools.get(definition.name)
        if previous is not None:
            logger.warning(
                f"Tool name '{definition.name}' registered twice: "
                f"{definition.owner} replaces {previous.owner}"
            )
        self._tools[definition.name] = definition

    def mark_ready(self) -> None:
        """Freeze the catalog and move from DISCOVERING to READY.

        Raises:
            RegistryStateError: If the registry is not DISCOVERING.
        """
        if self._state is not RegistryState.DISCOVERING:
            raise RegistryStateError(
                f"Cannot mark registry ready from state '{self._state.value}'"
            )
        self._state = RegistryState.READY
        logger.info(f"Tool registry ready with {len(self._tools)} tools")

    def get_tool(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def require_tool(self, name: str) -> ToolDefinition:
        """Look up a tool by name.

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``.
        """
        definition = self._tools.get(name)
        if definition is None:
            raise ToolNotFoundError(name)
        return definition

    def get_all_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the listing entries ``{name, description, inputSchema}``."""
        return [definition.to_listing() for definition in self._tools.values()]

    def execute_tool(self, name: str, parameters: Mapping[str, Any]) -> Any:
        """Execute a tool by name with already-decoded parameters.

        Unlike the invocation bridge, this does not catch anything: the
        tool's return value is returned as is and its exceptions propagate.

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``.
        """
        definition = self.require_tool(name)
        return definition.invoke(definition.decode(parameters))

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
