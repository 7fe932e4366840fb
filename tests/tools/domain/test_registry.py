"""Tests for ToolRegistry."""

import pytest

from tests.tools.fake_tools import make_echo_spec
from tool_agent.tools.domain.errors import DuplicateToolError, UnknownToolError
from tool_agent.tools.domain.registry import ToolRegistry


class TestRegister:
    def test_registered_tool_can_be_looked_up(self) -> None:
        spec = make_echo_spec()
        registry = ToolRegistry()

        registry.register(spec)

        assert registry.lookup("echo") is spec

    def test_duplicate_name_raises(self) -> None:
        registry = ToolRegistry([make_echo_spec()])

        with pytest.raises(DuplicateToolError, match="'echo' is already registered"):
            registry.register(make_echo_spec())

    def test_duplicate_in_constructor_raises(self) -> None:
        with pytest.raises(DuplicateToolError):
            ToolRegistry([make_echo_spec(), make_echo_spec()])


class TestLookup:
    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownToolError) as exc_info:
            ToolRegistry().lookup("rm_rf")

        assert exc_info.value.tool_name == "rm_rf"

    def test_contains(self) -> None:
        registry = ToolRegistry([make_echo_spec()])

        assert "echo" in registry
        assert "other" not in registry


class TestListingAndManifest:
    def test_list_preserves_registration_order(self) -> None:
        registry = ToolRegistry([make_echo_spec("b"), make_echo_spec("a")])

        assert [spec.name for spec in registry.list()] == ["b", "a"]
        assert registry.names() == ["b", "a"]
        assert len(registry) == 2

    def test_manifest_mirrors_specs(self) -> None:
        registry = ToolRegistry([make_echo_spec()])

        [entry] = registry.manifest()

        assert entry.name == "echo"
        assert entry.description == "Echo the text back."
        assert entry.input_schema.required == ("text",)

    def test_manifest_excludes_handler(self) -> None:
        [entry] = ToolRegistry([make_echo_spec()]).manifest()

        assert set(entry.model_dump()) == {
            "name",
            "description",
            "input_schema",
            "output_schema",
        }
