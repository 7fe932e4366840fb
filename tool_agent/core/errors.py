"""Base exception class for all tool-agent-specific errors."""


class ToolAgentError(Exception):
    """Base class for all tool-agent errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
