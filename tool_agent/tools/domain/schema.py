"""Statically declared tool schemas and the argument decoder that checks against them.

Each tool declares its input and output shape by hand with the builder helpers
below. The same descriptor is rendered into the model-facing JSON schema and
used to decode the loosely-typed arguments the model sends back.
"""

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict

from tool_agent.tools.domain.errors import ArgumentDecodeError

FieldKind = Literal["string", "integer", "number", "boolean", "object", "array"]


class FieldSchema(BaseModel):
    """One node of a schema tree: a primitive, a nested object, or an array-of."""

    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    description: str | None = None
    properties: dict[str, "FieldSchema"] | None = None  # kind == "object"
    required: tuple[str, ...] = ()  # kind == "object"
    items: "FieldSchema | None" = None  # kind == "array"

    def to_json_schema(self) -> dict[str, object]:
        """Render this node as a JSON-schema dict."""
        rendered: dict[str, object] = {"type": self.kind}
        if self.description is not None:
            rendered["description"] = self.description
        if self.kind == "object":
            rendered["properties"] = {
                name: prop.to_json_schema()
                for name, prop in (self.properties or {}).items()
            }
            rendered["required"] = list(self.required)
        if self.kind == "array" and self.items is not None:
            rendered["items"] = self.items.to_json_schema()
        return rendered


type ObjectSchema = FieldSchema


def string(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind="string", description=description)


def integer(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind="integer", description=description)


def number(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind="number", description=description)


def boolean(description: str | None = None) -> FieldSchema:
    return FieldSchema(kind="boolean", description=description)


def array(items: FieldSchema, description: str | None = None) -> FieldSchema:
    return FieldSchema(kind="array", items=items, description=description)


def object_schema(
    properties: dict[str, FieldSchema],
    required: list[str] | None = None,
    description: str | None = None,
) -> FieldSchema:
    """Build an object node. Every name in required must be a declared property."""
    required_names = tuple(required or ())
    undeclared = [name for name in required_names if name not in properties]
    if undeclared:
        raise ValueError(f"required fields not declared as properties: {undeclared}")
    return FieldSchema(
        kind="object",
        properties=dict(properties),
        required=required_names,
        description=description,
    )


def decode_arguments(
    schema: FieldSchema, raw: Mapping[str, object]
) -> dict[str, object]:
    """Decode a raw argument mapping against an object schema.

    Unknown keys are dropped. Missing required keys and type mismatches raise
    ArgumentDecodeError naming the offending path. The input is never mutated.

    Raises:
        ArgumentDecodeError: if raw does not satisfy schema.
    """
    decoded = _decode_value(schema, raw, path="arguments")
    assert isinstance(decoded, dict)
    return decoded


def _decode_value(schema: FieldSchema, value: object, path: str) -> object:
    match schema.kind:
        case "string":
            if not isinstance(value, str):
                raise ArgumentDecodeError(_mismatch(path, "string", value))
            return value
        case "integer":
            # JSON has one number type; 3.0 is accepted as 3.
            if isinstance(value, float) and value.is_integer():
                return int(value)
            # bool is an int subclass but never a valid integer argument.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ArgumentDecodeError(_mismatch(path, "integer", value))
            return value
        case "number":
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ArgumentDecodeError(_mismatch(path, "number", value))
            return value
        case "boolean":
            if not isinstance(value, bool):
                raise ArgumentDecodeError(_mismatch(path, "boolean", value))
            return value
        case "array":
            if not isinstance(value, list):
                raise ArgumentDecodeError(_mismatch(path, "array", value))
            if schema.items is None:
                return list(value)
            return [
                _decode_value(schema.items, item, path=f"{path}[{idx}]")
                for idx, item in enumerate(value)
            ]
        case "object":
            if not isinstance(value, Mapping):
                raise ArgumentDecodeError(_mismatch(path, "object", value))
            return _decode_object(schema, value, path)


def _decode_object(
    schema: FieldSchema, value: Mapping[object, object], path: str
) -> dict[str, object]:
    properties = schema.properties or {}
    missing = [name for name in schema.required if name not in value]
    if missing:
        names = ", ".join(f"'{name}'" for name in missing)
        raise ArgumentDecodeError(f"{path} is missing required field(s) {names}")

    decoded: dict[str, object] = {}
    for name, prop in properties.items():
        if name not in value:
            continue
        decoded[name] = _decode_value(prop, value[name], path=f"{path}.{name}")
    return decoded


def _mismatch(path: str, expected: str, value: object) -> str:
    return f"{path} must be {expected}, got {type(value).__name__}"
