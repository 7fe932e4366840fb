"""AgentOrchestrator: the state machine that drives one interactive session."""

import time
from collections import deque

from tool_agent.approval.application.gate import ApprovalGate, denial_message
from tool_agent.approval.domain.decision import Denied
from tool_agent.config.domain.config import AgentConfig
from tool_agent.conversation.domain.transcript import Transcript
from tool_agent.conversation.domain.turn import (
    ModelText,
    ModelToolCall,
    ToolOutcome,
    UserText,
)
from tool_agent.core.errors import ToolAgentError
from tool_agent.model.domain.client import ModelClient
from tool_agent.model.domain.response import ModelResponse
from tool_agent.model.domain.usage import UsageMetrics
from tool_agent.session.domain.observer import SessionObserver
from tool_agent.session.domain.state import SessionState
from tool_agent.session.domain.summary import EndReason, SessionSummary
from tool_agent.terminal.domain.terminal import Terminal
from tool_agent.tools.application.executor import ToolExecutor
from tool_agent.tools.domain.errors import ArgumentDecodeError, UnknownToolError
from tool_agent.tools.domain.registry import ToolRegistry
from tool_agent.tools.domain.request import ToolInvocationRequest
from tool_agent.tools.domain.result import ToolDenied, ToolFailure, ToolResult

_INPUT_PROMPT = "> "
_WAITING_MESSAGE = "Waiting for the model..."


class AgentOrchestrator:
    """Mediates between the user, the model and the local tools.

    Each step() performs one state transition:

        AWAITING_USER_INPUT -> AWAITING_MODEL_RESPONSE -> DISPATCHING | RENDERING
        -> AWAITING_USER_INPUT, until SESSION_ENDED.

    Every function call in a response is resolved in the order returned. Each
    call is recorded with its ToolOutcome directly after it. When all calls ran
    without a denial the transcript is sent back to the model without waiting
    for the user. A denial instead queues a synthetic user message carrying the
    user's reason, and the remaining calls of that response are answered as
    denied.

    ModelInvocationError and KeyboardInterrupt propagate to the caller.
    """

    def __init__(
        self,
        config: AgentConfig,
        registry: ToolRegistry,
        executor: ToolExecutor,
        gate: ApprovalGate,
        model_client: ModelClient,
        terminal: Terminal,
        observer: SessionObserver,
    ) -> None:
        self._config = config
        self._registry = registry
        self._executor = executor
        self._gate = gate
        self._model_client = model_client
        self._terminal = terminal
        self._observer = observer

        self._manifest = registry.manifest()
        self._transcript = Transcript()
        self._pending: deque[UserText] = deque()
        self._state = SessionState.AWAITING_USER_INPUT
        self._follow_up = False
        self._tool_rounds = 0
        self._response: ModelResponse | None = None
        self._response_idx = 0

        self._response_count = 0
        self._tool_call_count = 0
        self._denial_count = 0
        self._usage = UsageMetrics()
        self._end_reason: EndReason | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def pending_inputs(self) -> tuple[UserText, ...]:
        return tuple(self._pending)

    def run(self) -> SessionSummary:
        """Step until the session ends and return its summary."""
        self._observer.session_started(
            model=self._model_client.model_name, tools=self._registry.names()
        )
        while self._state is not SessionState.SESSION_ENDED:
            self.step()
        return self.summary()

    def step(self) -> SessionState:
        """Perform one state transition and return the new state."""
        match self._state:
            case SessionState.AWAITING_USER_INPUT:
                self._await_user_input()
            case SessionState.AWAITING_MODEL_RESPONSE:
                self._request_model_response()
            case SessionState.DISPATCHING:
                self._dispatch()
            case SessionState.RENDERING:
                self._render()
            case SessionState.SESSION_ENDED:
                pass
        return self._state

    def summary(self) -> SessionSummary:
        """Return the session totals.

        Raises:
            ToolAgentError: if the session has not ended yet.
        """
        if self._end_reason is None:
            raise ToolAgentError("Failed to summarize session: session has not ended")
        return SessionSummary(
            end_reason=self._end_reason,
            num_turns=len(self._transcript),
            num_model_requests=self._response_count,
            num_tool_calls=self._tool_call_count,
            num_denials=self._denial_count,
            usage=self._usage,
        )

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _await_user_input(self) -> None:
        if self._follow_up:
            self._state = SessionState.AWAITING_MODEL_RESPONSE
            return

        if not self._pending:
            try:
                line = self._terminal.read_line(_INPUT_PROMPT)
            except EOFError:
                self._end("end_of_input")
                return
            if line.strip() == self._config.session.exit_command:
                self._end("exit_command")
                return
            if not line.strip():
                return
            self._pending.append(UserText(text=line))

        self._transcript.append(self._pending.popleft())
        self._state = SessionState.AWAITING_MODEL_RESPONSE

    def _request_model_response(self) -> None:
        self._follow_up = False
        response_idx = self._response_count
        self._response_count += 1

        self._observer.model_request_started(
            response_idx=response_idx, num_turns=len(self._transcript)
        )
        start = time.monotonic()
        try:
            with self._terminal.waiting(_WAITING_MESSAGE):
                response = self._model_client.generate(
                    self._transcript.snapshot(), self._manifest
                )
        except ToolAgentError as exc:
            self._observer.model_request_failed(
                response_idx=response_idx, reason=str(exc)
            )
            raise
        duration_ms = int((time.monotonic() - start) * 1000)

        self._observer.model_request_completed(
            response_idx=response_idx,
            duration_ms=duration_ms,
            num_function_calls=len(response.function_calls),
            total_tokens=response.usage.total_tokens,
        )
        self._usage = self._usage.plus(response.usage)
        if self._config.session.show_usage:
            self._terminal.print_notice(response.usage.describe())

        if response.text is not None:
            self._transcript.append(
                ModelText(text=response.text, response_idx=response_idx)
            )
        elif not response.function_calls:
            self._transcript.append(ModelText(text="", response_idx=response_idx))
            self._terminal.print_notice("The model returned an empty response.")

        self._response = response
        self._response_idx = response_idx
        if response.function_calls:
            self._state = SessionState.DISPATCHING
        else:
            self._state = SessionState.RENDERING

    def _render(self) -> None:
        response = self._take_response()
        if response.text:
            self._terminal.print_markdown(response.text)
        self._tool_rounds = 0
        self._state = SessionState.AWAITING_USER_INPUT

    def _dispatch(self) -> None:
        response = self._take_response()
        if response.text:
            self._terminal.print_markdown(response.text)

        denied = False
        for request in response.function_calls:
            self._tool_call_count += 1
            self._transcript.append(
                ModelToolCall(request=request, response_idx=self._response_idx)
            )
            if denied:
                result: ToolResult = ToolDenied()
                self._observer.tool_call_denied(
                    call_id=request.call_id,
                    tool_name=request.tool_name,
                    clarification=None,
                )
            else:
                result = self._resolve(request)
                denied = isinstance(result, ToolDenied)
            self._transcript.append(
                ToolOutcome(
                    call_id=request.call_id,
                    tool_name=request.tool_name,
                    result=result,
                )
            )

        self._state = SessionState.AWAITING_USER_INPUT
        if denied:
            self._tool_rounds = 0
            return

        self._tool_rounds += 1
        max_rounds = self._config.session.max_tool_rounds
        if self._tool_rounds >= max_rounds:
            self._observer.tool_round_limit_reached(max_tool_rounds=max_rounds)
            self._terminal.print_notice(
                f"Stopped after {max_rounds} consecutive tool rounds. "
                "Reply to let the model continue."
            )
            self._tool_rounds = 0
            return
        self._follow_up = True

    # ------------------------------------------------------------------
    # Dispatch helpers
    # ------------------------------------------------------------------

    def _resolve(self, request: ToolInvocationRequest) -> ToolResult:
        """Resolve one call: reject, ask for approval, then run or deny it."""
        try:
            spec = self._registry.lookup(request.tool_name)
        except UnknownToolError:
            available = ", ".join(self._registry.names()) or "none"
            return self._reject(
                request,
                f"Unknown tool '{request.tool_name}'. Available tools: {available}",
            )

        if request.arguments_error is not None:
            return self._reject(
                request,
                f"Failed to decode tool arguments: {request.arguments_error}"
                f" (tool '{spec.name}')",
            )

        try:
            arguments = self._executor.decode(spec, request.raw_arguments)
        except ArgumentDecodeError as exc:
            return self._reject(request, f"{exc} (tool '{spec.name}')")

        decision = self._gate.decide(
            spec, request.raw_arguments, spec.render_prompt(arguments)
        )
        if isinstance(decision, Denied):
            self._denial_count += 1
            self._observer.tool_call_denied(
                call_id=request.call_id,
                tool_name=spec.name,
                clarification=decision.clarification,
            )
            self._pending.append(
                UserText(text=denial_message(decision.clarification), synthetic=True)
            )
            return ToolDenied(clarification=decision.clarification)

        self._observer.tool_call_approved(
            call_id=request.call_id, tool_name=spec.name, automatic=decision.automatic
        )
        start = time.monotonic()
        result = self._executor.execute(spec, request.raw_arguments)
        self._observer.tool_execution_completed(
            call_id=request.call_id,
            tool_name=spec.name,
            status=result.status,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        if isinstance(result, ToolFailure):
            self._terminal.print_notice(f"{spec.name} failed: {result.error_message}")
        return result

    def _reject(self, request: ToolInvocationRequest, reason: str) -> ToolFailure:
        """Answer a call the model got wrong. Only the model and the log see why."""
        self._observer.tool_call_rejected(
            call_id=request.call_id, tool_name=request.tool_name, reason=reason
        )
        return ToolFailure(error_message=reason)

    def _take_response(self) -> ModelResponse:
        response = self._response
        if response is None:
            raise ToolAgentError(
                "Failed to advance session: no model response to handle"
            )
        self._response = None
        return response

    def _end(self, reason: EndReason) -> None:
        self._end_reason = reason
        self._state = SessionState.SESSION_ENDED
        self._observer.session_ended(summary=self.summary())
