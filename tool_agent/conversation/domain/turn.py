"""Turn tagged union: one entry of the conversation transcript."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from tool_agent.tools.domain.request import ToolInvocationRequest
from tool_agent.tools.domain.result import ToolResult


class UserText(BaseModel, frozen=True):
    """Text from the user. synthetic marks text the session wrote on their behalf."""

    kind: Literal["user_text"] = "user_text"
    text: str
    synthetic: bool = False


class ModelText(BaseModel, frozen=True):
    kind: Literal["model_text"] = "model_text"
    text: str
    response_idx: int  # groups turns that came from the same model response


class ModelToolCall(BaseModel, frozen=True):
    kind: Literal["model_tool_call"] = "model_tool_call"
    request: ToolInvocationRequest
    response_idx: int


class ToolOutcome(BaseModel, frozen=True):
    """The result of one ModelToolCall, correlated through call_id."""

    kind: Literal["tool_outcome"] = "tool_outcome"
    call_id: str
    tool_name: str
    result: ToolResult


Turn = Annotated[
    UserText | ModelText | ModelToolCall | ToolOutcome, Field(discriminator="kind")
]
