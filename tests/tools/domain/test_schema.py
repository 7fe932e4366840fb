"""Tests for statically declared schemas and argument decoding."""

import pytest

from tool_agent.tools.domain.errors import ArgumentDecodeError
from tool_agent.tools.domain.schema import (
    FieldSchema,
    array,
    boolean,
    decode_arguments,
    integer,
    number,
    object_schema,
    string,
)


def _make_schema() -> FieldSchema:
    return object_schema(
        {
            "path": string("A path."),
            "count": integer(),
            "ratio": number(),
            "force": boolean(),
            "tags": array(string()),
            "options": object_schema({"depth": integer()}, required=["depth"]),
        },
        required=["path"],
    )


class TestObjectSchemaBuilder:
    def test_required_must_be_declared(self) -> None:
        with pytest.raises(ValueError, match="not declared"):
            object_schema({"path": string()}, required=["content"])

    def test_required_defaults_to_empty(self) -> None:
        schema = object_schema({"path": string()})

        assert schema.required == ()


class TestToJsonSchema:
    def test_renders_object_with_properties_and_required(self) -> None:
        schema = object_schema(
            {"command": string("The command.")}, required=["command"]
        )

        assert schema.to_json_schema() == {
            "type": "object",
            "properties": {
                "command": {"type": "string", "description": "The command."}
            },
            "required": ["command"],
        }

    def test_renders_array_items(self) -> None:
        rendered = array(integer()).to_json_schema()

        assert rendered == {"type": "array", "items": {"type": "integer"}}

    def test_omits_missing_description(self) -> None:
        assert "description" not in string().to_json_schema()


class TestDecodeArguments:
    def test_decodes_all_field_kinds(self) -> None:
        raw = {
            "path": "a.txt",
            "count": 3,
            "ratio": 0.5,
            "force": True,
            "tags": ["x", "y"],
            "options": {"depth": 2},
        }

        assert decode_arguments(_make_schema(), raw) == raw

    def test_unknown_keys_are_ignored(self) -> None:
        decoded = decode_arguments(_make_schema(), {"path": "a.txt", "extra": 1})

        assert decoded == {"path": "a.txt"}

    def test_optional_fields_may_be_absent(self) -> None:
        assert decode_arguments(_make_schema(), {"path": "a"}) == {"path": "a"}

    def test_missing_required_field_raises(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="missing required field.*'path'"):
            decode_arguments(_make_schema(), {})

    def test_type_mismatch_names_path(self) -> None:
        with pytest.raises(
            ArgumentDecodeError, match="arguments.path must be string, got int"
        ):
            decode_arguments(_make_schema(), {"path": 5})

    def test_bool_is_not_an_integer(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="arguments.count"):
            decode_arguments(_make_schema(), {"path": "a", "count": True})

    def test_bool_is_not_a_number(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="arguments.ratio"):
            decode_arguments(_make_schema(), {"path": "a", "ratio": False})

    def test_whole_float_is_accepted_as_integer(self) -> None:
        decoded = decode_arguments(_make_schema(), {"path": "a", "count": 3.0})

        assert decoded["count"] == 3
        assert isinstance(decoded["count"], int)

    def test_fractional_float_is_not_an_integer(self) -> None:
        with pytest.raises(ArgumentDecodeError):
            decode_arguments(_make_schema(), {"path": "a", "count": 3.5})

    def test_array_item_mismatch_names_index(self) -> None:
        with pytest.raises(ArgumentDecodeError, match=r"arguments.tags\[1\]"):
            decode_arguments(_make_schema(), {"path": "a", "tags": ["x", 2]})

    def test_nested_object_missing_field(self) -> None:
        with pytest.raises(ArgumentDecodeError, match="arguments.options is missing"):
            decode_arguments(_make_schema(), {"path": "a", "options": {}})

    def test_decoding_is_idempotent(self) -> None:
        raw = {"path": "a", "tags": ["x"], "options": {"depth": 1}, "junk": None}

        first = decode_arguments(_make_schema(), raw)
        second = decode_arguments(_make_schema(), raw)

        assert first == second

    def test_input_is_not_mutated(self) -> None:
        raw = {"path": "a", "junk": 1}

        decode_arguments(_make_schema(), raw)

        assert raw == {"path": "a", "junk": 1}
