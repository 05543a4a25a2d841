"""Conversation-style helpers powered by Rich for the askpath CLI."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


@dataclass
class AskChat:
    console: Console = field(default_factory=Console)
    demos_run: list[str] = field(default_factory=list)

    def greet(self) -> None:
        self.console.print(
            Panel(
                "[bold cyan]Hi there! Pick a demo to watch askpath ask its questions.[/]",
                title="askpath",
                subtitle="(ask | ivr | tty | exit)",
            )
        )

    def say(self, message: str, style: str = "cyan") -> None:
        self.console.print(f"[bold {style}]→[/] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(Panel(escape(message), title="✨ Done", style="green"))

    def hint(self, command: str) -> None:
        """Show how to rerun ``command`` without the menu."""

        self.console.print(
            Panel(
                f"[bold yellow]Run it on its own[/]: askpath --demo {escape(command)} --skip-banner",
                title="Command Clue",
                style="bright_yellow",
            )
        )

    def wrap_error(self, error: BaseException, command: str | None = None) -> None:
        self.console.print(
            Panel(
                f"[bold red]{error.__class__.__name__} happened:[/]\n{escape(str(error))}",
                title="Oops",
                style="bright_red",
            )
        )
        if command:
            self.hint(command)
