"""Exceptions raised by the tool registry and invocation bridge."""


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not present in the registry.

    This is the only failure the invocation bridge lets escape to its direct
    caller; every other failure is rendered as in-band error text.
    """

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool not found: {tool_name}")


class RegistryStateError(RuntimeError):
    """Raised on an invalid registry lifecycle transition or a late registration."""
