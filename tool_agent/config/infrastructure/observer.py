"""Logs config loading events through structlog."""

import structlog


class StructlogConfigObserver:
    """ConfigObserver that writes each event as one structured log line."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, source: str, model: str, tools: list[str]) -> None:
        self._log.info("config.loaded", source=source, model=model, tools=tools)

    def config_auto_approve_warning(self, tool_names: list[str]) -> None:
        self._log.warning(
            "config.auto_approve_warning",
            tool_names=tool_names,
            message="Auto-approved tools will modify the system without confirmation",
        )
