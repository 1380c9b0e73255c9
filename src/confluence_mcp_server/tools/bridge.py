"""Invocation bridge between JSON tool calls and component methods.

The bridge turns ``(tool name, raw JSON text)`` into a method call and the
outcome back into a string. Internally every call produces a ToolOutcome
whose text is rendered while failures are still being caught; only
:meth:`ToolBridge.call` flattens it to the final string. Apart from an
unknown tool name, no failure crosses the bridge as an exception.
"""

import asyncio
import inspect
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable

from confluence_mcp_server.tools.coercion import to_text
from confluence_mcp_server.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error executing tool: "


@dataclass(frozen=True)
class ToolOutcome:
    """Result of a single tool invocation.

    Attributes:
        tool_name: Name of the invoked tool
        ok: True if the method returned normally
        value: The method's return value (success only)
        text: The value rendered as text (success only)
        error: The failure message (failure only)
        return_direct: Copied from the tool definition
    """

    tool_name: str
    ok: bool
    value: Any = None
    text: str = ""
    error: str | None = None
    return_direct: bool = False

    @classmethod
    def success(
        cls, tool_name: str, value: Any, text: str, return_direct: bool = False
    ) -> "ToolOutcome":
        return cls(
            tool_name=tool_name,
            ok=True,
            value=value,
            text=text,
            return_direct=return_direct,
        )

    @classmethod
    def failure(
        cls, tool_name: str, error: str, return_direct: bool = False
    ) -> "ToolOutcome":
        return cls(tool_name=tool_name, ok=False, error=error, return_direct=return_direct)

    def render(self) -> str:
        """Flatten the outcome into the string handed to the caller."""
        if self.ok:
            return self.text
        return f"{ERROR_PREFIX}{self.error}"


class ToolBridge:
    """Executes registered tools from raw JSON input.

    The bridge holds no per-call state. Concurrent calls only share the
    registry, which is read-only once ready.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    @staticmethod
    def parse_input(raw_input: str | bytes | None) -> dict[str, Any]:
        """Parse call input into a mapping.

        Empty, ``null``, malformed or non-object input degrades to ``{}``.
        """
        if raw_input is None:
            return {}
        if isinstance(raw_input, bytes):
            raw_input = raw_input.decode("utf-8", errors="replace")
        if not raw_input.strip():
            return {}

        try:
            parsed = json.loads(raw_input)
        except ValueError as e:
            logger.warning(
                f"Failed to parse JSON input: '{raw_input}'. Error: {e}. Using empty parameters."
            )
            return {}

        if not isinstance(parsed, dict):
            logger.warning(
                f"Tool input is not a JSON object: '{raw_input}'. Using empty parameters."
            )
            return {}
        return parsed

    def execute(self, tool_name: str, raw_input: str | bytes | None) -> ToolOutcome:
        """Run a tool and capture the outcome.

        Args:
            tool_name: Registered tool name.
            raw_input: JSON object text whose keys are parameter names.

        Returns:
            ToolOutcome: Success with the return value, or failure with the
            exception message.

        Raises:
            ToolNotFoundError: If ``tool_name`` is not registered.
        """
        logger.debug(f"Executing @ai_tool: {tool_name} with input: {raw_input}")

        arguments = self.parse_input(raw_input)
        definition = self.registry.require_tool(tool_name)

        try:
            bound = definition.decode(arguments)
            result = definition.invoke(bound)
            if inspect.isawaitable(result):
                result = _wait_for(result)
            text = to_text(result)
        except Exception as e:
            logger.exception(f"Error executing @ai_tool {tool_name}: {e}")
            return ToolOutcome.failure(
                tool_name, str(e) or type(e).__name__, definition.return_direct
            )

        logger.debug(f"@ai_tool {tool_name} executed successfully")
        return ToolOutcome.success(tool_name, result, text, definition.return_direct)

    def call(self, tool_name: str, raw_input: str | bytes | None) -> str:
        """Run a tool and return its result as text.

        Failures come back as ``"Error executing tool: <message>"``.

        Raises:
            ToolNotFoundError: If ``tool_name`` is not registered.
        """
        return self.execute(tool_name, raw_input).render()


def _wait_for(awaitable: Awaitable[Any]) -> Any:
    """Block the calling thread until ``awaitable`` settles.

    Raises:
        RuntimeError: If the calling thread is already running an event loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        raise RuntimeError("Cannot wait for an async tool inside a running event loop")

    async def _await() -> Any:
        return await awaitable

    return asyncio.run(_await())
