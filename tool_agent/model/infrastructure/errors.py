"""Error types raised by model infrastructure."""

from tool_agent.core.errors import ToolAgentError


class ModelInvocationError(ToolAgentError):
    """Raised when the model endpoint call fails or returns an unusable response."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to invoke model: {reason}", retriable=True)


class MissingApiKeyError(ToolAgentError):
    """Raised at startup when the API key environment variable is not set."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(
            f"Failed to configure model: environment variable {env_var} is not set"
        )
