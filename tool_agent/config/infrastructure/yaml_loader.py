"""YAML config loader: parses, interpolates env vars, validates, emits events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tool_agent.config.domain.config import AgentConfig
from tool_agent.config.domain.observer import ConfigObserver
from tool_agent.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from tool_agent.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from tool_agent.tools.infrastructure.builtins import unknown_tool_names

# Tools that change the system; auto-approving them is allowed but logged.
_SIDE_EFFECT_TOOLS = ("shell_command", "write_file")


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AgentConfig."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AgentConfig:
        """Load, interpolate, validate, and return an AgentConfig from a YAML file.

        Every section is optional; an empty file yields the defaults.

        Raises:
            ConfigLoadError: if the file cannot be read.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all listed).
            ConfigValidationError: if the schema is violated or a tool name is unknown.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        _check_tool_names(cfg=cfg)
        return self._finish(cfg=cfg, source=str(path))

    def defaults(self) -> AgentConfig:
        """Return the built-in configuration, used when no file is given."""
        return self._finish(cfg=AgentConfig(), source="defaults")

    def _finish(self, cfg: AgentConfig, source: str) -> AgentConfig:
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            source=source, model=cfg.model.name, tools=list(cfg.tools.enabled)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=exc.strerror) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top level must be a mapping, got {type(raw).__name__}"
        )
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> AgentConfig:
    try:
        return AgentConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_tool_names(cfg: AgentConfig) -> None:
    """Report every unknown tool name in tools.enabled and tools.auto_approve at once.

    Raises:
        ConfigValidationError: if any name is not a built-in tool.
    """
    problems: list[str] = []
    for section in ("enabled", "auto_approve"):
        names: list[str] = getattr(cfg.tools, section)
        problems.extend(
            f"tools.{section} references unknown tool '{name}'"
            for name in unknown_tool_names(names)
        )
    if problems:
        raise ConfigValidationError(*problems)


def _emit_warnings(cfg: AgentConfig, observer: ConfigObserver) -> None:
    risky = [name for name in cfg.tools.auto_approve if name in _SIDE_EFFECT_TOOLS]
    if risky:
        observer.config_auto_approve_warning(risky)
