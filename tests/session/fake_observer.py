"""FakeSessionObserver: records session domain events for assertion in tests."""

from dataclasses import dataclass

from tool_agent.session.domain.summary import SessionSummary


@dataclass(frozen=True)
class ModelRequestFailedEvent:
    response_idx: int
    reason: str


@dataclass(frozen=True)
class ToolCallApprovedEvent:
    call_id: str
    tool_name: str
    automatic: bool


@dataclass(frozen=True)
class ToolCallDeniedEvent:
    call_id: str
    tool_name: str
    clarification: str | None


@dataclass(frozen=True)
class ToolCallRejectedEvent:
    call_id: str
    tool_name: str
    reason: str


@dataclass(frozen=True)
class ToolExecutionCompletedEvent:
    call_id: str
    tool_name: str
    status: str


class FakeSessionObserver:
    def __init__(self) -> None:
        self.started: list[tuple[str, list[str]]] = []
        self.requests_started: list[int] = []
        self.requests_completed: list[int] = []
        self.requests_failed: list[ModelRequestFailedEvent] = []
        self.approved: list[ToolCallApprovedEvent] = []
        self.denied: list[ToolCallDeniedEvent] = []
        self.rejected: list[ToolCallRejectedEvent] = []
        self.executed: list[ToolExecutionCompletedEvent] = []
        self.round_limits: list[int] = []
        self.ended: list[SessionSummary] = []

    def session_started(self, model: str, tools: list[str]) -> None:
        self.started.append((model, tools))

    def model_request_started(self, response_idx: int, num_turns: int) -> None:
        self.requests_started.append(response_idx)

    def model_request_completed(
        self,
        response_idx: int,
        duration_ms: int,
        num_function_calls: int,
        total_tokens: int | None,
    ) -> None:
        self.requests_completed.append(response_idx)

    def model_request_failed(self, response_idx: int, reason: str) -> None:
        self.requests_failed.append(
            ModelRequestFailedEvent(response_idx=response_idx, reason=reason)
        )

    def tool_call_approved(
        self, call_id: str, tool_name: str, automatic: bool
    ) -> None:
        self.approved.append(
            ToolCallApprovedEvent(
                call_id=call_id, tool_name=tool_name, automatic=automatic
            )
        )

    def tool_call_denied(
        self, call_id: str, tool_name: str, clarification: str | None
    ) -> None:
        self.denied.append(
            ToolCallDeniedEvent(
                call_id=call_id, tool_name=tool_name, clarification=clarification
            )
        )

    def tool_call_rejected(self, call_id: str, tool_name: str, reason: str) -> None:
        self.rejected.append(
            ToolCallRejectedEvent(call_id=call_id, tool_name=tool_name, reason=reason)
        )

    def tool_execution_completed(
        self, call_id: str, tool_name: str, status: str, duration_ms: int
    ) -> None:
        self.executed.append(
            ToolExecutionCompletedEvent(
                call_id=call_id, tool_name=tool_name, status=status
            )
        )

    def tool_round_limit_reached(self, max_tool_rounds: int) -> None:
        self.round_limits.append(max_tool_rounds)

    def session_ended(self, summary: SessionSummary) -> None:
        self.ended.append(summary)
