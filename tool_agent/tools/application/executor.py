"""ToolExecutor: decodes arguments, runs a handler, and contains every failure."""

from collections.abc import Mapping

from tool_agent.core.errors import ToolAgentError
from tool_agent.tools.domain.errors import ArgumentDecodeError
from tool_agent.tools.domain.result import ToolFailure, ToolResult, ToolSuccess
from tool_agent.tools.domain.schema import decode_arguments
from tool_agent.tools.domain.spec import ToolSpec


class ToolExecutor:
    """Turns (spec, raw arguments) into exactly one ToolResult.

    Holds no state between calls, so decoding the same mapping twice yields
    equal values. execute() never raises: decode errors and handler faults
    become ToolFailure so the model can read the message and retry.
    """

    def decode(
        self, spec: ToolSpec, raw_arguments: Mapping[str, object]
    ) -> dict[str, object]:
        """Decode raw_arguments against spec.input_schema.

        Raises:
            ArgumentDecodeError: on a missing required field or a type mismatch.
        """
        return decode_arguments(spec.input_schema, raw_arguments)

    def execute(
        self, spec: ToolSpec, raw_arguments: Mapping[str, object]
    ) -> ToolResult:
        try:
            arguments = self.decode(spec, raw_arguments)
        except ArgumentDecodeError as exc:
            return ToolFailure(error_message=f"{exc} (tool '{spec.name}')")

        try:
            output = spec.handler(arguments)
        except Exception as exc:  # noqa: BLE001
            return ToolFailure(error_message=_describe(exc))

        return ToolSuccess(output=output.model_dump(mode="json"))


def _describe(exc: Exception) -> str:
    if isinstance(exc, ToolAgentError):
        return str(exc)
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"
