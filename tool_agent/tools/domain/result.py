"""ToolResult tagged union: the outcome of one tool invocation."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolSuccess(BaseModel):
    """The handler ran and produced structured output."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    output: dict[str, object]


class ToolFailure(BaseModel):
    """Arguments did not decode, the handler raised, or the tool is unknown."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    error_message: str


class ToolDenied(BaseModel):
    """The user declined the call at the approval gate."""

    model_config = ConfigDict(frozen=True)

    status: Literal["denied"] = "denied"
    clarification: str | None = None


ToolResult = Annotated[
    ToolSuccess | ToolFailure | ToolDenied, Field(discriminator="status")
]
