"""Structlog implementation of the SessionObserver port."""

import structlog

from tool_agent.session.domain.summary import SessionSummary


class StructlogSessionObserver:
    """Delegates session domain events to structlog.

    Satisfies the SessionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(self, model: str, tools: list[str]) -> None:
        self._log.info("session.started", model=model, tools=tools)

    def model_request_started(self, response_idx: int, num_turns: int) -> None:
        self._log.debug(
            "model.request_started", response_idx=response_idx, num_turns=num_turns
        )

    def model_request_completed(
        self,
        response_idx: int,
        duration_ms: int,
        num_function_calls: int,
        total_tokens: int | None,
    ) -> None:
        self._log.info(
            "model.request_completed",
            response_idx=response_idx,
            duration_ms=duration_ms,
            num_function_calls=num_function_calls,
            total_tokens=total_tokens,
        )

    def model_request_failed(self, response_idx: int, reason: str) -> None:
        self._log.error(
            "model.request_failed", response_idx=response_idx, reason=reason
        )

    def tool_call_approved(
        self, call_id: str, tool_name: str, automatic: bool
    ) -> None:
        self._log.info(
            "tool.call_approved",
            call_id=call_id,
            tool_name=tool_name,
            automatic=automatic,
        )

    def tool_call_denied(
        self, call_id: str, tool_name: str, clarification: str | None
    ) -> None:
        self._log.info(
            "tool.call_denied",
            call_id=call_id,
            tool_name=tool_name,
            clarification=clarification,
        )

    def tool_call_rejected(self, call_id: str, tool_name: str, reason: str) -> None:
        self._log.warning(
            "tool.call_rejected", call_id=call_id, tool_name=tool_name, reason=reason
        )

    def tool_execution_completed(
        self, call_id: str, tool_name: str, status: str, duration_ms: int
    ) -> None:
        self._log.info(
            "tool.execution_completed",
            call_id=call_id,
            tool_name=tool_name,
            status=status,
            duration_ms=duration_ms,
        )

    def tool_round_limit_reached(self, max_tool_rounds: int) -> None:
        self._log.warning(
            "session.tool_round_limit_reached", max_tool_rounds=max_tool_rounds
        )

    def session_ended(self, summary: SessionSummary) -> None:
        self._log.info(
            "session.ended",
            end_reason=summary.end_reason,
            num_turns=summary.num_turns,
            num_model_requests=summary.num_model_requests,
            num_tool_calls=summary.num_tool_calls,
            num_denials=summary.num_denials,
            total_tokens=summary.usage.total_tokens,
        )
