"""Tests for StructlogSessionObserver event names and fields."""

from structlog.testing import capture_logs

from tool_agent.model.domain.usage import UsageMetrics
from tool_agent.session.domain.summary import SessionSummary
from tool_agent.session.infrastructure.observer import StructlogSessionObserver


class TestStructlogSessionObserver:
    def test_session_started(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().session_started(
                model="fake-model", tools=["read_file"]
            )

        assert logs == [
            {
                "event": "session.started",
                "log_level": "info",
                "model": "fake-model",
                "tools": ["read_file"],
            }
        ]

    def test_tool_call_denied_carries_clarification(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().tool_call_denied(
                call_id="c1", tool_name="shell_command", clarification="too risky"
            )

        assert logs[0]["event"] == "tool.call_denied"
        assert logs[0]["clarification"] == "too risky"

    def test_model_request_failed_is_error(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().model_request_failed(
                response_idx=3, reason="503"
            )

        assert logs[0]["event"] == "model.request_failed"
        assert logs[0]["log_level"] == "error"

    def test_session_ended_reports_totals(self) -> None:
        summary = SessionSummary(
            end_reason="exit_command",
            num_turns=4,
            num_model_requests=2,
            num_tool_calls=1,
            num_denials=0,
            usage=UsageMetrics(total_tokens=42),
        )

        with capture_logs() as logs:
            StructlogSessionObserver().session_ended(summary=summary)

        assert logs[0]["event"] == "session.ended"
        assert logs[0]["end_reason"] == "exit_command"
        assert logs[0]["total_tokens"] == 42
