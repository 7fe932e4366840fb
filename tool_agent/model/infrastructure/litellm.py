"""LiteLLMModelClient: ModelClient implementation using LiteLLM function calling."""

import os
from collections.abc import Sequence
from typing import Any

import litellm

from tool_agent.config.domain.model import ModelConfig
from tool_agent.conversation.domain.turn import Turn
from tool_agent.model.domain.response import ModelResponse
from tool_agent.model.domain.usage import UsageMetrics
from tool_agent.model.infrastructure.errors import (
    MissingApiKeyError,
    ModelInvocationError,
)
from tool_agent.model.infrastructure.messages import (
    parse_tool_call,
    to_chat_messages,
    to_tool_definitions,
)
from tool_agent.tools.domain.spec import ToolManifestEntry

litellm.suppress_debug_info = True


class LiteLLMModelClient:
    """Sends the transcript to config.name through litellm.completion.

    The system prompt and API key are fixed at construction. Each call to
    generate() counts as one response; its index is used to fill in call ids
    the provider leaves out.

    Satisfies the ModelClient protocol structurally.
    """

    def __init__(self, config: ModelConfig, api_key: str) -> None:
        self._config = config
        self._api_key = api_key
        self._response_count = 0

    @classmethod
    def from_environment(cls, config: ModelConfig) -> "LiteLLMModelClient":
        """Construct a client reading the API key from config.api_key_env.

        Raises:
            MissingApiKeyError: if the variable is unset or empty.
        """
        api_key = os.environ.get(config.api_key_env)
        if not api_key:
            raise MissingApiKeyError(env_var=config.api_key_env)
        return cls(config=config, api_key=api_key)

    @property
    def model_name(self) -> str:
        return self._config.name

    def generate(
        self, transcript: Sequence[Turn], manifest: Sequence[ToolManifestEntry]
    ) -> ModelResponse:
        """Send the whole transcript and return the model's next message.

        Raises:
            ModelInvocationError: if the call fails or the response has no choices.
        """
        response_idx = self._response_count
        self._response_count += 1

        request: dict[str, Any] = {
            "model": self._config.name,
            "messages": to_chat_messages(self._config.system_prompt, transcript),
            "temperature": self._config.temperature,
            "timeout": self._config.timeout_seconds,
            "num_retries": self._config.num_retries,
            "api_key": self._api_key,
        }
        if manifest:
            request["tools"] = to_tool_definitions(manifest)

        try:
            response = litellm.completion(**request)
        except Exception as exc:
            raise ModelInvocationError(reason=str(exc)) from exc

        if not response.choices:
            raise ModelInvocationError(reason="response contained no choices")

        message = response.choices[0].message
        function_calls = [
            parse_tool_call(
                call_id=call.id,
                name=call.function.name,
                arguments=call.function.arguments,
                fallback_id=f"call_{response_idx}_{position}",
            )
            for position, call in enumerate(message.tool_calls or [])
        ]
        return ModelResponse(
            text=message.content or None,
            function_calls=function_calls,
            usage=_usage_from(getattr(response, "usage", None)),
        )


def _usage_from(usage: Any) -> UsageMetrics:
    if usage is None:
        return UsageMetrics()
    details = getattr(usage, "prompt_tokens_details", None)
    return UsageMetrics(
        total_tokens=_as_int(getattr(usage, "total_tokens", None)),
        prompt_tokens=_as_int(getattr(usage, "prompt_tokens", None)),
        completion_tokens=_as_int(getattr(usage, "completion_tokens", None)),
        cached_tokens=_as_int(getattr(details, "cached_tokens", None)),
        tool_use_prompt_tokens=_as_int(getattr(usage, "tool_use_prompt_tokens", None)),
    )


def _as_int(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None
