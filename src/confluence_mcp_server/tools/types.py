"""Type definitions for the tool layer.

This module contains the enums and dataclasses shared by the schema generator,
the coercion layer, the registry and the discovery scanner.
"""

import inspect
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any


class JsonSchemaType(str, Enum):
    """JSON Schema type tags a tool parameter can be declared with."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"


class RegistryState(str, Enum):
    """Lifecycle states of a :class:`~confluence_mcp_server.tools.registry.ToolRegistry`.

    The only legal path is UNINITIALIZED -> DISCOVERING -> READY.
    """

    UNINITIALIZED = "uninitialized"
    DISCOVERING = "discovering"
    READY = "ready"


@dataclass(frozen=True)
class ParameterSpec:
    """A single tool parameter.

    Attributes:
        name: Parameter name, matched case-sensitively against call input keys
        type: The JSON Schema type tag derived from the annotation
        annotation: The resolved Python annotation (``Any`` when missing)
        kind: The ``inspect.Parameter`` kind, used to route the argument
        required: Always True; the model has no optional parameters
    """

    name: str
    type: JsonSchemaType
    annotation: Any = Any
    kind: Any = inspect.Parameter.POSITIONAL_OR_KEYWORD
    required: bool = True

    @property
    def type_name(self) -> str:
        """Human-readable name of the declared Python type."""
        annotation = unwrap_optional(self.annotation)
        if annotation is Any or annotation is inspect.Parameter.empty:
            return "Any"
        return getattr(annotation, "__name__", None) or str(annotation)


def unwrap_optional(annotation: Any) -> Any:
    """Strip ``None`` from ``X | None`` / ``Optional[X]`` unions with one other member."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation
