"""CLI entrypoint for tool-agent: a typer app that runs one interactive session."""

import logging
import sys
from pathlib import Path

import structlog
import typer
import yaml

from tool_agent.approval.application.gate import ApprovalGate
from tool_agent.config.domain.config import AgentConfig
from tool_agent.config.infrastructure.observer import StructlogConfigObserver
from tool_agent.config.infrastructure.yaml_loader import YamlConfigLoader
from tool_agent.core.errors import ToolAgentError
from tool_agent.model.infrastructure.litellm import LiteLLMModelClient
from tool_agent.session.application.orchestrator import AgentOrchestrator
from tool_agent.session.infrastructure.observer import StructlogSessionObserver
from tool_agent.terminal.infrastructure.rich_terminal import RichTerminal
from tool_agent.tools.application.executor import ToolExecutor
from tool_agent.tools.infrastructure.builtins import create_tool_registry

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr, away from the conversation."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        typer.echo(f"Invalid log level: {log_level!r}.", err=True)
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> AgentConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    if config_path is None:
        return loader.defaults()
    return loader.load(path=config_path)


def _build_orchestrator(
    config: AgentConfig, terminal: RichTerminal
) -> AgentOrchestrator:
    """Wire the session from config.

    Raises:
        MissingApiKeyError: if the model's API key variable is unset.
        ConfigValidationError: if a configured tool name is unknown.
    """
    model_client = LiteLLMModelClient.from_environment(config=config.model)
    registry = create_tool_registry(
        names=config.tools.enabled, shell_config=config.tools.shell
    )
    return AgentOrchestrator(
        config=config,
        registry=registry,
        executor=ToolExecutor(),
        gate=ApprovalGate(allow_list=config.tools.auto_approve, terminal=terminal),
        model_client=model_client,
        terminal=terminal,
        observer=StructlogSessionObserver(),
    )


@app.command()
def run(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a YAML config file. Built-in defaults apply when omitted.",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Minimum level written to stderr: debug, info, warning or error",
    ),
) -> None:
    """Start an interactive session with a tool-calling model."""
    _configure_structlog(log_format=log_format, log_level=log_level)

    try:
        config = _load_config(config_path=config_path)
        terminal = RichTerminal()
        orchestrator = _build_orchestrator(config=config, terminal=terminal)

        terminal.print_notice(
            f"Model: {config.model.name}. "
            f"Type '{config.session.exit_command}' to quit."
        )
        summary = orchestrator.run()
        if config.session.show_usage:
            terminal.print_notice(f"Session total {summary.usage.describe()}")

    except KeyboardInterrupt:
        typer.echo("Session interrupted.", err=True)
        sys.exit(1)
    except (ToolAgentError, yaml.YAMLError) as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
