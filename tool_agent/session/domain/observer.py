"""SessionObserver port: domain events emitted by the agent loop."""

from typing import Protocol

from tool_agent.session.domain.summary import SessionSummary


class SessionObserver(Protocol):
    """Observer port for session domain events.

    Implementations may log to structlog or record for tests.
    """

    def session_started(self, model: str, tools: list[str]) -> None: ...

    def model_request_started(self, response_idx: int, num_turns: int) -> None: ...

    def model_request_completed(
        self,
        response_idx: int,
        duration_ms: int,
        num_function_calls: int,
        total_tokens: int | None,
    ) -> None: ...

    def model_request_failed(self, response_idx: int, reason: str) -> None: ...

    def tool_call_approved(
        self, call_id: str, tool_name: str, automatic: bool
    ) -> None: ...

    def tool_call_denied(
        self, call_id: str, tool_name: str, clarification: str | None
    ) -> None: ...

    def tool_call_rejected(self, call_id: str, tool_name: str, reason: str) -> None: ...

    def tool_execution_completed(
        self, call_id: str, tool_name: str, status: str, duration_ms: int
    ) -> None: ...

    def tool_round_limit_reached(self, max_tool_rounds: int) -> None: ...

    def session_ended(self, summary: SessionSummary) -> None: ...
