"""Input collaborators used by builders, the director and the menu.

Everything in contactbook that needs user input asks a ``Prompter``.
``ConsolePrompter`` reads from the terminal through a rich ``Console``;
``ScriptedPrompter`` replays a fixed list of answers, which is how the
test-suite and non-interactive callers drive the interactive flows.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol

from rich.console import Console
from rich.text import Text


class Prompter(Protocol):
    """Anything that can answer a prompt with a line of text."""

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the user's answer without the newline.

        Raises
        ------
        EOFError
            When no more input is available.
        """
        ...


class ConsolePrompter:
    """Prompter backed by a rich ``Console``.

    Prompts are rendered as plain text so that brackets such as
    ``"[menu]"`` are shown literally instead of being read as markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def ask(self, prompt: str) -> str:
        return self._console.input(Text(prompt))


class ScriptedPrompter:
    """Prompter that replays ``answers`` in order.

    Parameters
    ----------
    answers:
        Responses returned by successive ``ask`` calls.
    echo:
        Optional console that receives each prompt and answer, which makes
        scripted sessions readable in captured output.
    """

    def __init__(self, answers: Iterable[str] = (), echo: Console | None = None) -> None:
        self._answers: deque[str] = deque(answers)
        self._echo = echo
        self.asked: list[str] = []

    def feed(self, *answers: str) -> None:
        """Queue more answers."""
        self._answers.extend(answers)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def ask(self, prompt: str) -> str:
        self.asked.append(prompt)
        if not self._answers:
            raise EOFError(f"No scripted answer left for prompt {prompt!r}")
        answer = self._answers.popleft()
        if self._echo is not None:
            self._echo.print(Text(f"{prompt}{answer}"))
        return answer
