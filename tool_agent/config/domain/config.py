"""Top-level AgentConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from tool_agent.config.domain.model import ModelConfig
from tool_agent.config.domain.session import SessionConfig
from tool_agent.config.domain.tools import ToolsConfig


class AgentConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a tool-agent session.

    Every section has defaults, so AgentConfig() is the reference setup.
    """

    model: ModelConfig = Field(default_factory=ModelConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
