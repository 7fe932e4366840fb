"""Rich implementation of the Terminal port."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markdown import Markdown
from rich.prompt import Confirm


class RichTerminal:
    """Renders model text as Markdown and shows a spinner while the model works.

    Satisfies the Terminal protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def read_line(self, prompt: str) -> str:
        return self._console.input(f"[bold cyan]{prompt}[/bold cyan]")

    def print_line(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    def print_markdown(self, text: str) -> None:
        self._console.print(Markdown(text))

    def print_notice(self, text: str) -> None:
        self._console.print(text, style="dim", markup=False, highlight=False)

    def confirm(self, question: str) -> bool:
        return Confirm.ask(question, console=self._console, default=False)

    @contextmanager
    def waiting(self, message: str) -> Iterator[None]:
        with self._console.status(message, spinner="dots"):
            yield
