"""ToolInvocationRequest value object: one attempt by the model to call a tool."""

from pydantic import BaseModel, ConfigDict


class ToolInvocationRequest(BaseModel):
    """A single function call taken from a model response.

    arguments_json keeps the model's argument text verbatim so the call can be
    replayed to the model exactly as it framed it. arguments_error is set when
    that text could not be parsed into a JSON object; raw_arguments is then {}.
    """

    model_config = ConfigDict(frozen=True)

    call_id: str
    tool_name: str
    raw_arguments: dict[str, object]
    arguments_json: str = "{}"
    arguments_error: str | None = None
