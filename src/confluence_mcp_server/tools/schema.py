"""Input schema generation for discovered tools.

Maps Python annotations onto JSON Schema type tags and builds the
``{type, properties, required}`` object advertised for each tool.
"""

import typing
from typing import Any

from confluence_mcp_server.tools.types import JsonSchemaType, ParameterSpec, unwrap_optional

_ARRAY_TYPES = (list, tuple, set, frozenset)


def json_schema_type(annotation: Any) -> JsonSchemaType:
    """Resolve the JSON Schema type tag for a Python annotation.

    Args:
        annotation: A parameter annotation (may be ``inspect.Parameter.empty``).

    Returns:
        JsonSchemaType: The tag; anything unrecognised maps to OBJECT.
    """
    annotation = unwrap_optional(annotation)
    target = typing.get_origin(annotation) or annotation

    if not isinstance(target, type):
        return JsonSchemaType.OBJECT

    # bool is a subclass of int, so it has to be checked first
    if issubclass(target, bool):
        return JsonSchemaType.BOOLEAN
    if issubclass(target, int):
        return JsonSchemaType.INTEGER
    if issubclass(target, float):
        return JsonSchemaType.NUMBER
    if issubclass(target, str):
        return JsonSchemaType.STRING
    if issubclass(target, _ARRAY_TYPES):
        return JsonSchemaType.ARRAY
    return JsonSchemaType.OBJECT


def describe_parameter(parameter: ParameterSpec) -> str:
    """Build the generic description advertised for a parameter."""
    return f"Parameter {parameter.name} of type {parameter.type_name}"


def generate_input_schema(parameters: list[ParameterSpec]) -> dict[str, Any]:
    """Generate the input schema for a tool's parameter list.

    Every parameter appears exactly once in ``properties`` and, since the
    model has no optional parameters, exactly once in ``required``.

    Args:
        parameters: The ordered parameter list of the tool.

    Returns:
        dict: ``{"type": "object", "properties": {...}, "required": [...]}``
    """
    properties: dict[str, dict[str, str]] = {}
    required: list[str] = []

    for parameter in parameters:
        properties[parameter.name] = {
            "type": parameter.type.value,
            "description": describe_parameter(parameter),
        }
        required.append(parameter.name)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
    }
