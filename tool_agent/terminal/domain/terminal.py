"""Terminal port: the line-oriented console the session talks to the user through."""

from contextlib import AbstractContextManager
from typing import Protocol


class Terminal(Protocol):
    """Blocking user I/O.

    read_line raises EOFError when input is closed and KeyboardInterrupt on
    Ctrl-C; callers decide what either means.
    """

    def read_line(self, prompt: str) -> str: ...

    def print_line(self, text: str) -> None: ...

    def print_markdown(self, text: str) -> None: ...

    def print_notice(self, text: str) -> None: ...

    def confirm(self, question: str) -> bool: ...

    def waiting(self, message: str) -> AbstractContextManager[None]: ...
