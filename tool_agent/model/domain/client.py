"""ModelClient port: the LLM endpoint the session sends its transcript to."""

from collections.abc import Sequence
from typing import Protocol

from tool_agent.conversation.domain.turn import Turn
from tool_agent.model.domain.response import ModelResponse
from tool_agent.tools.domain.spec import ToolManifestEntry


class ModelClient(Protocol):
    """Sends the full transcript plus the tool manifest and returns one response.

    The system prompt is a construction-time concern of the implementation.
    Implementations raise ModelInvocationError on transport or provider errors.
    """

    @property
    def model_name(self) -> str: ...

    def generate(
        self, transcript: Sequence[Turn], manifest: Sequence[ToolManifestEntry]
    ) -> ModelResponse: ...
