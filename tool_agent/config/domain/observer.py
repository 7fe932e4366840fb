"""Observer port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, source: str, model: str, tools: list[str]) -> None: ...

    def config_auto_approve_warning(self, tool_names: list[str]) -> None: ...
