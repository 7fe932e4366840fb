"""Error types raised by the transcript."""

from tool_agent.core.errors import ToolAgentError


class TranscriptOrderError(ToolAgentError):
    """Raised when an append would break call/outcome pairing."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to append turn: {reason}")
