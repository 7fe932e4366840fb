"""ToolRegistry: the string-keyed set of tools available to one session."""

from tool_agent.tools.domain.errors import DuplicateToolError, UnknownToolError
from tool_agent.tools.domain.spec import ToolManifestEntry, ToolSpec


class ToolRegistry:
    """Maps tool names to ToolSpecs. Built once at startup and injected.

    Registration order is preserved and determines manifest order.
    """

    def __init__(self, specs: list[ToolSpec] | None = None) -> None:
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: ToolSpec) -> None:
        """Add a tool.

        Raises:
            DuplicateToolError: if a tool with the same name is already registered.
        """
        if spec.name in self._specs:
            raise DuplicateToolError(tool_name=spec.name)
        self._specs[spec.name] = spec

    def lookup(self, name: str) -> ToolSpec:
        """Return the spec registered under name.

        Raises:
            UnknownToolError: if no tool has that name.
        """
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownToolError(tool_name=name) from None

    def names(self) -> list[str]:
        return list(self._specs.keys())

    def manifest(self) -> list[ToolManifestEntry]:
        return [spec.manifest_entry() for spec in self._specs.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    # Defined last: the method name shadows the builtin inside the class body.
    def list(self) -> list[ToolSpec]:
        return [*self._specs.values()]
