"""Console input/output shared by every question widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from ..utils.console_gate import prompt_gate

ICON_WHITE_RIGHT = "👉"


@dataclass
class Terminal:
    """Where questions are printed and where answers are read from.

    ``stream`` defaults to standard input; tests hand in a ``StringIO``.
    """

    console: Console = field(default_factory=Console)
    stream: TextIO | None = None
    icon: str = ICON_WHITE_RIGHT

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` (plain text) and block until a line is entered."""

        with prompt_gate():
            line = self.console.input(escape(prompt), stream=self.stream)
        return line.rstrip("\r\n")

    def say(self, message: str, style: str | None = None) -> None:
        self.console.print(escape(message), style=style, highlight=False)

    def echo(self, value: object) -> None:
        """Confirm what was understood from the user's entry."""

        self.say(f"{self.icon} {value}")


_default_terminal: Terminal | None = None


def default_terminal() -> Terminal:
    """Return the process-wide terminal bound to stdin/stdout."""

    global _default_terminal
    if _default_terminal is None:
        _default_terminal = Terminal()
    return _default_terminal


def set_default_terminal(terminal: Terminal | None) -> None:
    """Replace (or with ``None`` reset) the terminal used when none is given."""

    global _default_terminal
    _default_terminal = terminal
