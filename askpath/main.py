"""askpath entry point: greets the user, then hands over to the CLI."""

from __future__ import annotations

from typing import Sequence

from rich.style import Style
from rich.text import Text


def welcome_message(version: str) -> Text:
    banner_lines = [
        " █████╗ ███████╗██╗  ██╗",
        "██╔══██╗██╔════╝██║ ██╔╝",
        "███████║███████╗█████╔╝ ",
        "██╔══██║╚════██║██╔═██╗ ",
        "██║  ██║███████║██║  ██╗",
        "╚═╝  ╚═╝╚══════╝╚═╝  ╚═╝",
    ]
    gradient = [
        "#FFD27F",  # amber
        "#F7C98A",
        "#EFBF96",
        "#E6B5A1",
        "#DDABAD",  # rose peak
        "#E6B5A1",
        "#EFBF96",
        "#F7C98A",
        "#FFD27F",  # back to amber
    ]

    text = Text()
    for line in banner_lines:
        for idx, char in enumerate(line):
            color = gradient[idx % len(gradient)]
            text.append(char, Style(color=color, bold=True))
        text.append("\n")
    text.append(
        "askpath: console questions, questionnaires and state machines\n",
        Style(color="cyan", bold=True),
    )
    text.append(f"Version: {version}\n\n", Style(color="bright_cyan"))
    text.append(
        "Chain prompts into decision paths and walk them from the terminal.\n",
        Style(color="white"),
    )
    return text


def main(argv: Sequence[str] | None = None) -> None:
    from .cli import main as cli_entry  # local import to avoid circular dependency

    cli_entry.main(argv)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
