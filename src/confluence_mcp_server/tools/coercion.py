"""Conversion of decoded JSON values into tool arguments and of results into text.

A decoder is built once per tool, at registration time, from its parameter
list. At call time it binds each parameter by exact name from the decoded
mapping and converts the value to the parameter's declared type tag.
"""

import json
from typing import Any, Callable, Mapping

from confluence_mcp_server.tools.types import JsonSchemaType, ParameterSpec

Decoder = Callable[[Mapping[str, Any]], dict[str, Any]]


def to_text(value: Any) -> str:
    """Render a value as text for the caller.

    ``None`` becomes the literal ``"null"``; booleans and JSON containers use
    their JSON spelling so the caller sees ``true`` rather than ``True``.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def coerce_string(value: Any) -> str:
    return to_text(value)


def coerce_integer(value: Any) -> int:
    """Convert to int; malformed numeric text raises ``ValueError``."""
    if isinstance(value, bool):
        return int(str(value))
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return int(str(value))


def coerce_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


_COERCERS: dict[JsonSchemaType, Callable[[Any], Any]] = {
    JsonSchemaType.STRING: coerce_string,
    JsonSchemaType.INTEGER: coerce_integer,
    JsonSchemaType.BOOLEAN: coerce_boolean,
}


def coerce_value(value: Any, target: JsonSchemaType) -> Any:
    """Convert a single decoded value to the given type tag.

    Number, array and object targets pass through unchanged; their shape is
    assumed to be correct.
    """
    coercer = _COERCERS.get(target)
    if coercer is None:
        return value
    return coercer(value)


def build_decoder(parameters: list[ParameterSpec]) -> Decoder:
    """Build the decode function for a tool's parameter list.

    Args:
        parameters: The ordered parameter list of the tool.

    Returns:
        A function mapping the decoded call input to an ordered dict of
        ``parameter name -> coerced value``. Missing keys and JSON ``null``
        bind ``None``.
    """
    plan = [(parameter.name, _COERCERS.get(parameter.type)) for parameter in parameters]

    def decode(arguments: Mapping[str, Any]) -> dict[str, Any]:
        bound: dict[str, Any] = {}
        for name, coercer in plan:
            value = arguments.get(name)
            if value is not None and coercer is not None:
                value = coercer(value)
            bound[name] = value
        return bound

    return decode
