"""SessionSummary value object: totals reported when a session ends."""

from typing import Literal

from pydantic import BaseModel, Field

from tool_agent.model.domain.usage import UsageMetrics

EndReason = Literal["exit_command", "end_of_input"]


class SessionSummary(BaseModel, frozen=True):
    end_reason: EndReason
    num_turns: int
    num_model_requests: int
    num_tool_calls: int
    num_denials: int
    usage: UsageMetrics = Field(default_factory=UsageMetrics)
