"""ModelResponse value object: what one model round trip produced."""

from pydantic import BaseModel, Field

from tool_agent.model.domain.usage import UsageMetrics
from tool_agent.tools.domain.request import ToolInvocationRequest


class ModelResponse(BaseModel, frozen=True):
    """Text and function calls of a single response, in the order returned.

    Either part may be empty. A response with neither is still valid and is
    recorded as empty model text.
    """

    text: str | None = None
    function_calls: list[ToolInvocationRequest] = Field(default_factory=list)
    usage: UsageMetrics = Field(default_factory=UsageMetrics)
