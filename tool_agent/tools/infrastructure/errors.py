"""Error types raised by the built-in tool handlers."""

from tool_agent.core.errors import ToolAgentError


class ShellCommandTimeoutError(ToolAgentError):
    """Raised when a shell command does not exit within the configured limit."""

    def __init__(self, command: str, timeout_seconds: float) -> None:
        self.command = command
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"timeout: command did not finish within {timeout_seconds:g}s: {command}"
        )
