"""Errors raised while reading and validating the agent config file."""

from pathlib import Path

from tool_agent.core.errors import ToolAgentError


class ConfigLoadError(ToolAgentError):
    """The config file exists in name only: it could not be opened or read."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        detail = f"cannot read {path}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(f"Failed to load config: {detail}")


class MissingEnvVarsError(ToolAgentError):
    """One or more ${VAR} references point at unset environment variables."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = sorted(missing_vars)
        super().__init__(
            "Failed to load config: referenced environment variables are not set: "
            + ", ".join(self.missing_vars)
        )


class ConfigValidationError(ToolAgentError):
    """The config parsed but describes an agent that cannot be built.

    Every problem found in one pass is carried, so the user fixes them together.
    """

    def __init__(self, *problems: str) -> None:
        self.problems = problems
        super().__init__(f"Failed to validate config: {'; '.join(problems)}")
