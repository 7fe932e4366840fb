"""Tool configuration models."""

from pydantic import BaseModel, Field


class ShellConfig(BaseModel, frozen=True):
    """Limits applied to every shell_command invocation."""

    timeout_seconds: float = Field(default=120.0, gt=0)
    max_output_chars: int = Field(default=20_000, ge=1)
    executable: str | None = None  # None means the platform default shell


class ToolsConfig(BaseModel, frozen=True):
    """Which built-in tools are exposed, and which of them skip confirmation."""

    enabled: list[str] = Field(
        default_factory=lambda: [
            "shell_command",
            "read_file",
            "write_file",
            "list_dir",
        ],
        min_length=1,
    )
    auto_approve: list[str] = Field(default_factory=lambda: ["read_file", "list_dir"])
    shell: ShellConfig = Field(default_factory=ShellConfig)
