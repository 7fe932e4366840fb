"""Transcript: the append-only, ordered record of a conversation."""

from tool_agent.conversation.domain.errors import TranscriptOrderError
from tool_agent.conversation.domain.turn import ModelToolCall, ToolOutcome, Turn


class Transcript:
    """Ordered list of turns, replayed verbatim to the model on every request.

    Turns are only ever appended. A ModelToolCall must be followed directly by
    the ToolOutcome carrying the same call_id; append() rejects anything else.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._unanswered_call_id: str | None = None

    def append(self, turn: Turn) -> None:
        """Append turn to the end of the transcript.

        Raises:
            TranscriptOrderError: if a call is left unanswered, or a ToolOutcome
                does not answer the call just before it.
        """
        expected = self._unanswered_call_id
        match turn:
            case ToolOutcome(call_id=call_id) if call_id != expected:
                raise TranscriptOrderError(
                    f"outcome for '{call_id}' does not answer the pending call"
                    f" ({expected or 'none'})"
                )
            case ToolOutcome():
                self._unanswered_call_id = None
            case _ if expected is not None:
                raise TranscriptOrderError(
                    f"call '{expected}' must be answered before the next turn"
                )
            case ModelToolCall(request=request):
                self._unanswered_call_id = request.call_id
        self._turns.append(turn)

    def snapshot(self) -> tuple[Turn, ...]:
        """Return an immutable view of the turns so far."""
        return tuple(self._turns)

    def last(self) -> Turn | None:
        return self._turns[-1] if self._turns else None

    @property
    def unanswered_call_id(self) -> str | None:
        return self._unanswered_call_id

    def __len__(self) -> int:
        return len(self._turns)
