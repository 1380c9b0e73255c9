"""Tool definitions: the immutable description of a single callable tool."""

import copy
import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, Callable

from confluence_mcp_server.tools.coercion import Decoder, build_decoder
from confluence_mcp_server.tools.schema import generate_input_schema, json_schema_type
from confluence_mcp_server.tools.types import ParameterSpec

Invoker = Callable[[dict[str, Any]], Any]

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool.

    Attributes:
        name: Unique key within the registry
        description: Description shown to the caller
        parameters: Ordered parameter list
        decoder: Converts decoded call input into keyword arguments
        invoker: Calls the owning method with the decoded arguments
        return_direct: Whether the result bypasses further model processing
        owner: Qualified name of the owning method, for logging
        input_schema: Generated ``{type, properties, required}`` object
    """

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...]
    decoder: Decoder = field(repr=False, compare=False)
    invoker: Invoker = field(repr=False, compare=False)
    return_direct: bool = False
    owner: str = ""
    input_schema: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tool name cannot be empty")
        if not self.input_schema:
            object.__setattr__(
                self, "input_schema", generate_input_schema(list(self.parameters))
            )

    def decode(self, arguments: typing.Mapping[str, Any]) -> dict[str, Any]:
        return self.decoder(arguments)

    def invoke(self, arguments: dict[str, Any]) -> Any:
        return self.invoker(arguments)

    def to_listing(self) -> dict[str, Any]:
        """Return the listing entry ``{name, description, inputSchema}``.

        The schema is copied so callers cannot change the registered one.
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }

    @classmethod
    def from_callable(
        cls,
        func: Callable[..., Any],
        name: str = "",
        description: str = "",
        return_direct: bool = False,
    ) -> "ToolDefinition":
        """Build a definition for a function or bound method.

        Args:
            func: The callable to expose. Bound methods keep their instance.
            name: Tool name; defaults to the function name.
            description: Tool description; defaults to the function name.
            return_direct: Whether the result bypasses further model processing.

        Returns:
            ToolDefinition: The definition with decoder and invoker attached.
        """
        func_name = getattr(func, "__name__", type(func).__name__)
        parameters = tuple(extract_parameters(func))
        return cls(
            name=name or func_name,
            description=description or func_name,
            parameters=parameters,
            decoder=build_decoder(list(parameters)),
            invoker=_make_invoker(func, parameters),
            return_direct=return_direct,
            owner=getattr(func, "__qualname__", func_name),
        )


def extract_parameters(func: Callable[..., Any]) -> list[ParameterSpec]:
    """Read the parameter list from a callable's signature.

    ``self``/``cls`` are already bound away for methods; ``*args`` and
    ``**kwargs`` are not exposed.
    """
    signature = inspect.signature(func)
    try:
        hints = typing.get_type_hints(func)
    except Exception:
        hints = {}

    parameters = []
    for param in signature.parameters.values():
        if param.kind in _SKIPPED_KINDS:
            continue
        annotation = hints.get(param.name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = Any
        parameters.append(
            ParameterSpec(
                name=param.name,
                type=json_schema_type(annotation),
                annotation=annotation,
                kind=param.kind,
            )
        )
    return parameters


def _make_invoker(
    func: Callable[..., Any], parameters: tuple[ParameterSpec, ...]
) -> Invoker:
    positional = [
        p.name for p in parameters if p.kind is inspect.Parameter.POSITIONAL_ONLY
    ]

    def invoke(arguments: dict[str, Any]) -> Any:
        args = [arguments.get(name) for name in positional]
        kwargs = {k: v for k, v in arguments.items() if k not in positional}
        return func(*args, **kwargs)

    return invoke
