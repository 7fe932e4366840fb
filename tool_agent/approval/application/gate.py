"""ApprovalGate: human-in-the-loop confirmation of side-effecting tool calls."""

from collections.abc import Iterable, Mapping

from tool_agent.approval.domain.decision import ApprovalDecision, Approved, Denied
from tool_agent.terminal.domain.terminal import Terminal
from tool_agent.tools.domain.spec import ToolSpec

DENIAL_PREFIX = "I do not allow running this function."


def denial_message(clarification: str | None) -> str:
    """Build the user text sent to the model after a denial."""
    if not clarification:
        return DENIAL_PREFIX
    return f"{DENIAL_PREFIX} {clarification}"


class ApprovalGate:
    """Decides whether a proposed call may run.

    Tools on the allow-list are approved without touching the terminal. Any
    other call shows its rendered prompt and asks for a yes/no answer; after a
    "no" the user may type a reason, which is kept for the model.
    """

    def __init__(self, allow_list: Iterable[str], terminal: Terminal) -> None:
        self._allow_list = frozenset(allow_list)
        self._terminal = terminal

    def is_allowed(self, tool_name: str) -> bool:
        return tool_name in self._allow_list

    def decide(
        self, spec: ToolSpec, raw_arguments: Mapping[str, object], prompt: str
    ) -> ApprovalDecision:
        if self.is_allowed(spec.name):
            return Approved(automatic=True)

        self._terminal.print_line(prompt)
        try:
            allowed = self._terminal.confirm("Allow this call?")
        except EOFError:
            # Closed input answers no; there is nobody left to ask for a reason.
            return Denied()
        if allowed:
            return Approved()

        try:
            clarification = self._terminal.read_line(
                "Reason (optional, sent to the model): "
            ).strip()
        except EOFError:
            clarification = ""
        return Denied(clarification=clarification or None)
