"""Built-in tool catalogue and the factory that assembles a registry from it."""

from collections.abc import Callable

from tool_agent.config.domain.tools import ShellConfig
from tool_agent.config.infrastructure.errors import ConfigValidationError
from tool_agent.tools.domain.registry import ToolRegistry
from tool_agent.tools.domain.spec import ToolSpec
from tool_agent.tools.infrastructure.files import (
    LIST_DIR,
    READ_FILE,
    WRITE_FILE,
    list_dir_spec,
    read_file_spec,
    write_file_spec,
)
from tool_agent.tools.infrastructure.shell_command import (
    SHELL_COMMAND,
    shell_command_spec,
)

_BUILDERS: dict[str, Callable[[ShellConfig], ToolSpec]] = {
    SHELL_COMMAND: shell_command_spec,
    READ_FILE: lambda _: read_file_spec(),
    WRITE_FILE: lambda _: write_file_spec(),
    LIST_DIR: lambda _: list_dir_spec(),
}

BUILTIN_TOOL_NAMES: frozenset[str] = frozenset(_BUILDERS)


def unknown_tool_names(names: list[str]) -> list[str]:
    """Return the names that are not built-in tools, in the order given."""
    return [name for name in names if name not in BUILTIN_TOOL_NAMES]


def create_tool_registry(names: list[str], shell_config: ShellConfig) -> ToolRegistry:
    """Build a ToolRegistry holding the named built-in tools, in the order given.

    Raises:
        ConfigValidationError: if any name is not a built-in tool (all listed).
        DuplicateToolError: if a name appears twice.
    """
    unknown = unknown_tool_names(names)
    if unknown:
        raise ConfigValidationError(
            f"unknown tool name(s): {', '.join(unknown)}; "
            f"available: {', '.join(sorted(BUILTIN_TOOL_NAMES))}"
        )

    registry = ToolRegistry()
    for name in names:
        registry.register(_BUILDERS[name](shell_config))
    return registry
