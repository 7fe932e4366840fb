"""ToolSpec descriptor and the manifest projection exposed to the model."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from tool_agent.tools.domain.schema import FieldSchema, ObjectSchema

type ToolArguments = Mapping[str, object]
type ToolHandler = Callable[[ToolArguments], BaseModel]
type PromptRenderer = Callable[[ToolArguments], str]


class ToolManifestEntry(BaseModel):
    """The model-facing description of one tool. Carries no handler internals."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: FieldSchema
    output_schema: FieldSchema


@dataclass(frozen=True)
class ToolSpec:
    """Immutable descriptor of a callable tool.

    handler receives arguments already decoded against input_schema and returns
    a pydantic model shaped like output_schema. It may perform I/O and may raise;
    the executor contains any failure. render_prompt produces the human-readable
    line shown when asking the user to approve a call.
    """

    name: str
    description: str
    input_schema: ObjectSchema
    output_schema: ObjectSchema
    handler: ToolHandler
    render_prompt: PromptRenderer

    def manifest_entry(self) -> ToolManifestEntry:
        return ToolManifestEntry(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
            output_schema=self.output_schema,
        )
