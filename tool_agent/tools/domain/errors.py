"""Error types raised by the tool registry and argument decoding."""

from tool_agent.core.errors import ToolAgentError


class ArgumentDecodeError(ToolAgentError):
    """Raised when model-supplied arguments do not satisfy a tool's input schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to decode tool arguments: {reason}")


class DuplicateToolError(ToolAgentError):
    """Raised at startup when two tools are registered under the same name."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"Failed to register tool: name '{tool_name}' is already registered"
        )


class UnknownToolError(ToolAgentError):
    """Raised when a tool name is not present in the registry."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Failed to look up tool: unknown tool '{tool_name}'")
