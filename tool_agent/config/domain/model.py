"""Model endpoint configuration."""

from pydantic import BaseModel, Field

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant running in the user's terminal. "
    "You can run shell commands and read, write and list files through the "
    "provided tools. Prefer inspecting before changing anything. "
    "Answer concisely."
)


class ModelConfig(BaseModel, frozen=True):
    name: str = Field(default="gemini/gemini-2.5-flash", min_length=1)
    api_key_env: str = Field(default="GEMINI_API_KEY", min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    timeout_seconds: float = Field(default=300.0, gt=0)
    num_retries: int = Field(default=0, ge=0)
    system_prompt: str = Field(default=DEFAULT_SYSTEM_PROMPT, min_length=1)
