"""Interactive session configuration."""

from pydantic import BaseModel, Field


class SessionConfig(BaseModel, frozen=True):
    exit_command: str = Field(default="exit", min_length=1)
    # Consecutive automatic tool rounds allowed before control returns to the user.
    max_tool_rounds: int = Field(default=25, ge=1)
    show_usage: bool = True
