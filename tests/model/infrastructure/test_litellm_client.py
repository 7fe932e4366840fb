"""Tests for LiteLLMModelClient infrastructure implementation."""

from unittest.mock import MagicMock, patch

import pytest

from tool_agent.config.domain.model import ModelConfig
from tool_agent.conversation.domain.turn import UserText
from tool_agent.model.infrastructure.errors import (
    MissingApiKeyError,
    ModelInvocationError,
)
from tool_agent.model.infrastructure.litellm import LiteLLMModelClient
from tool_agent.tools.domain.schema import object_schema, string
from tool_agent.tools.domain.spec import ToolManifestEntry

_COMPLETION = "tool_agent.model.infrastructure.litellm.litellm.completion"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_config(
    name: str = "gemini/gemini-2.5-flash", system_prompt: str = "Be brief."
) -> ModelConfig:
    return ModelConfig(name=name, system_prompt=system_prompt, num_retries=2)


def _make_client(config: ModelConfig | None = None) -> LiteLLMModelClient:
    return LiteLLMModelClient(config=config or _make_config(), api_key="secret")


def _make_manifest() -> list[ToolManifestEntry]:
    return [
        ToolManifestEntry(
            name="read_file",
            description="Read a file.",
            input_schema=object_schema({"path": string()}, required=["path"]),
            output_schema=object_schema({"content": string()}, required=["content"]),
        )
    ]


def _make_tool_call(call_id: str | None, name: str, arguments: str) -> MagicMock:
    function = MagicMock()
    function.name = name
    function.arguments = arguments
    call = MagicMock()
    call.id = call_id
    call.function = function
    return call


def _make_completion_response(
    content: str | None = None,
    tool_calls: list[MagicMock] | None = None,
    usage: MagicMock | None = None,
) -> MagicMock:
    """Build a mock litellm response object with one choice."""
    message = MagicMock()
    message.content = content
    message.tool_calls = tool_calls
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    response.usage = usage
    return response


def _make_usage() -> MagicMock:
    usage = MagicMock()
    usage.total_tokens = 30
    usage.prompt_tokens = 20
    usage.completion_tokens = 10
    usage.prompt_tokens_details.cached_tokens = 5
    return usage


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestFromEnvironment:
    def test_reads_api_key_from_configured_variable(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MY_MODEL_KEY", "abc")
        config = ModelConfig(api_key_env="MY_MODEL_KEY")

        client = LiteLLMModelClient.from_environment(config=config)

        assert client.model_name == config.name

    def test_missing_key_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MY_MODEL_KEY", raising=False)

        with pytest.raises(MissingApiKeyError, match="MY_MODEL_KEY"):
            LiteLLMModelClient.from_environment(
                config=ModelConfig(api_key_env="MY_MODEL_KEY")
            )


# ---------------------------------------------------------------------------
# generate(): request
# ---------------------------------------------------------------------------


class TestGenerateRequest:
    def test_sends_system_prompt_transcript_and_tools(self) -> None:
        client = _make_client()

        with patch(
            _COMPLETION, return_value=_make_completion_response(content="hi")
        ) as completion:
            client.generate([UserText(text="hello")], _make_manifest())

        kwargs = completion.call_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.5-flash"
        assert kwargs["messages"] == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "hello"},
        ]
        assert kwargs["tools"][0]["function"]["name"] == "read_file"
        assert kwargs["num_retries"] == 2
        assert kwargs["api_key"] == "secret"

    def test_omits_tools_when_manifest_is_empty(self) -> None:
        client = _make_client()

        with patch(
            _COMPLETION, return_value=_make_completion_response(content="hi")
        ) as completion:
            client.generate([UserText(text="hello")], [])

        assert "tools" not in completion.call_args.kwargs


# ---------------------------------------------------------------------------
# generate(): response
# ---------------------------------------------------------------------------


class TestGenerateResponse:
    def test_returns_text(self) -> None:
        with patch(_COMPLETION, return_value=_make_completion_response(content="hi")):
            response = _make_client().generate([UserText(text="x")], [])

        assert response.text == "hi"
        assert response.function_calls == []

    def test_empty_content_is_none(self) -> None:
        with patch(_COMPLETION, return_value=_make_completion_response(content="")):
            response = _make_client().generate([UserText(text="x")], [])

        assert response.text is None

    def test_returns_all_function_calls_in_order(self) -> None:
        calls = [
            _make_tool_call("c1", "read_file", '{"path": "a"}'),
            _make_tool_call("c2", "list_dir", '{"path": "."}'),
        ]
        with patch(
            _COMPLETION, return_value=_make_completion_response(tool_calls=calls)
        ):
            response = _make_client().generate([UserText(text="x")], _make_manifest())

        assert [c.call_id for c in response.function_calls] == ["c1", "c2"]
        assert response.function_calls[0].raw_arguments == {"path": "a"}
        assert response.function_calls[1].tool_name == "list_dir"

    def test_missing_call_ids_are_filled_per_response(self) -> None:
        client = _make_client()
        first = _make_completion_response(content="hi")
        second = _make_completion_response(
            tool_calls=[_make_tool_call(None, "read_file", "{}")]
        )

        with patch(_COMPLETION, side_effect=[first, second]):
            client.generate([UserText(text="x")], [])
            response = client.generate([UserText(text="x")], [])

        assert response.function_calls[0].call_id == "call_1_0"

    def test_usage_is_extracted(self) -> None:
        with patch(
            _COMPLETION,
            return_value=_make_completion_response(content="hi", usage=_make_usage()),
        ):
            response = _make_client().generate([UserText(text="x")], [])

        assert response.usage.total_tokens == 30
        assert response.usage.prompt_tokens == 20
        assert response.usage.completion_tokens == 10
        assert response.usage.cached_tokens == 5

    def test_absent_usage_is_empty(self) -> None:
        with patch(_COMPLETION, return_value=_make_completion_response(content="hi")):
            response = _make_client().generate([UserText(text="x")], [])

        assert response.usage.total_tokens is None


# ---------------------------------------------------------------------------
# generate(): failures
# ---------------------------------------------------------------------------


class TestGenerateFailure:
    def test_transport_error_raises_model_invocation_error(self) -> None:
        with patch(_COMPLETION, side_effect=ConnectionError("reset by peer")):
            with pytest.raises(ModelInvocationError, match="reset by peer"):
                _make_client().generate([UserText(text="x")], [])

    def test_no_choices_raises(self) -> None:
        response = MagicMock()
        response.choices = []

        with patch(_COMPLETION, return_value=response):
            with pytest.raises(ModelInvocationError, match="no choices"):
                _make_client().generate([UserText(text="x")], [])
