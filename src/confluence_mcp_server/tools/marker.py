"""The ``@ai_tool`` registration marker.

Decorating a method with ``@ai_tool`` attaches a :class:`ToolMarker` to the
function object. Nothing is registered at import time; the discovery scanner
picks marked methods up from the component instances it is handed.

Example:
    >>> class Greeter:
    ...     @ai_tool(name="greet", description="Say hello")
    ...     def greet(self, who: str) -> str:
    ...         return f"Hello {who}"
"""

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

MARKER_ATTRIBUTE = "__ai_tool__"


@dataclass(frozen=True)
class ToolMarker:
    """Metadata captured by the ``@ai_tool`` decorator.

    Attributes:
        name: Explicit tool name. Empty means "use the method name".
        description: Explicit description. Empty means "derive a fallback".
        return_direct: Whether the caller should return the result directly
            instead of feeding it back to the model.
    """

    name: str = ""
    description: str = ""
    return_direct: bool = False


def ai_tool(
    name: str = "",
    description: str = "",
    return_direct: bool = False,
) -> Callable[[F], F]:
    """Mark a method as a tool for discovery.

    Args:
        name: Optional explicit tool name.
        description: Optional explicit description shown to the caller.
        return_direct: Whether the result bypasses further model processing.

    Returns:
        A decorator that returns the function unchanged apart from the marker.
    """
    marker = ToolMarker(name=name, description=description, return_direct=return_direct)

    def decorator(func: F) -> F:
        setattr(func, MARKER_ATTRIBUTE, marker)
        return func

    return decorator


def get_marker(obj: Any) -> ToolMarker | None:
    """Return the marker attached to ``obj``, if any.

    Only genuine :class:`ToolMarker` instances count, so objects that answer
    every attribute lookup (mocks, proxies) are never mistaken for tools.
    """
    if isinstance(obj, (staticmethod, classmethod)):
        obj = obj.__func__
    marker = getattr(obj, MARKER_ATTRIBUTE, None)
    return marker if isinstance(marker, ToolMarker) else None
