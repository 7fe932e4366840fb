"""Mapping between the transcript and OpenAI-style chat messages used by LiteLLM."""

import json
from collections.abc import Sequence
from typing import Any

from tool_agent.conversation.domain.turn import (
    ModelText,
    ModelToolCall,
    ToolOutcome,
    Turn,
    UserText,
)
from tool_agent.tools.domain.request import ToolInvocationRequest
from tool_agent.tools.domain.spec import ToolManifestEntry

type ChatMessage = dict[str, Any]


def to_tool_definitions(manifest: Sequence[ToolManifestEntry]) -> list[ChatMessage]:
    """Render manifest entries as function-tool definitions.

    The chat tools format has no slot for a return type, so the output schema
    is appended to the description.
    """
    return [
        {
            "type": "function",
            "function": {
                "name": entry.name,
                "description": (
                    f"{entry.description}\n\nReturns a JSON object: "
                    f"{json.dumps(entry.output_schema.to_json_schema())}"
                ),
                "parameters": entry.input_schema.to_json_schema(),
            },
        }
        for entry in manifest
    ]


def to_chat_messages(
    system_prompt: str, transcript: Sequence[Turn]
) -> list[ChatMessage]:
    """Replay the transcript as chat messages, preceded by the system prompt.

    Model turns sharing a response_idx were one assistant message on the wire.
    They are stored interleaved with their outcomes, so each such run is folded
    back into one assistant message followed by one tool message per outcome.
    """
    messages: list[ChatMessage] = [{"role": "system", "content": system_prompt}]
    idx = 0
    while idx < len(transcript):
        turn = transcript[idx]
        if isinstance(turn, UserText):
            messages.append({"role": "user", "content": turn.text})
            idx += 1
        elif isinstance(turn, ToolOutcome):
            messages.append(_tool_message(turn))
            idx += 1
        else:
            end = _response_end(transcript, start=idx, response_idx=turn.response_idx)
            messages.extend(_response_messages(transcript[idx:end]))
            idx = end
    return messages


def _response_end(transcript: Sequence[Turn], start: int, response_idx: int) -> int:
    end = start
    while end < len(transcript):
        turn = transcript[end]
        if isinstance(turn, ModelText | ModelToolCall):
            if turn.response_idx != response_idx:
                break
        elif not isinstance(turn, ToolOutcome):
            break
        end += 1
    return end


def _response_messages(turns: Sequence[Turn]) -> list[ChatMessage]:
    texts = [turn.text for turn in turns if isinstance(turn, ModelText)]
    calls = [turn.request for turn in turns if isinstance(turn, ModelToolCall)]
    outcomes = [turn for turn in turns if isinstance(turn, ToolOutcome)]

    assistant: ChatMessage = {
        "role": "assistant",
        "content": "".join(texts) if texts else None,
    }
    if calls:
        assistant["tool_calls"] = [_tool_call(request) for request in calls]
    return [assistant, *(_tool_message(outcome) for outcome in outcomes)]


def _tool_call(request: ToolInvocationRequest) -> ChatMessage:
    # Unparseable argument text is rejected by some providers on replay.
    arguments = request.arguments_json if request.arguments_error is None else "{}"
    return {
        "id": request.call_id,
        "type": "function",
        "function": {"name": request.tool_name, "arguments": arguments},
    }


def _tool_message(outcome: ToolOutcome) -> ChatMessage:
    return {
        "role": "tool",
        "tool_call_id": outcome.call_id,
        "name": outcome.tool_name,
        "content": outcome.result.model_dump_json(),
    }


def parse_tool_call(
    call_id: str | None, name: str, arguments: str | None, fallback_id: str
) -> ToolInvocationRequest:
    """Build a ToolInvocationRequest from one wire-level function call.

    Argument text that is not a JSON object is kept verbatim and flagged in
    arguments_error rather than raised, so the session can answer the model.
    """
    arguments_json = arguments if arguments else "{}"
    raw_arguments: dict[str, object] = {}
    arguments_error: str | None = None
    try:
        parsed = json.loads(arguments_json)
    except json.JSONDecodeError as exc:
        arguments_error = f"arguments are not valid JSON: {exc.msg}"
    else:
        if isinstance(parsed, dict):
            raw_arguments = parsed
        else:
            arguments_error = (
                f"arguments must be a JSON object, got {type(parsed).__name__}"
            )
    return ToolInvocationRequest(
        call_id=call_id or fallback_id,
        tool_name=name,
        raw_arguments=raw_arguments,
        arguments_json=arguments_json,
        arguments_error=arguments_error,
    )
