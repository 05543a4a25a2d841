"""Conversational entry point for the askpath demos."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import questionary
from rich import traceback
from rich.console import Console

from ..ask import Terminal, set_default_terminal
from ..interfaces.config import ConsoleConfig
from ..main import welcome_message
from ..tty import ProgressStyle
from ..utils.config import load_config
from ..utils.console_gate import prompt_gate
from ..utils.logging import configure_logging
from .chat import AskChat
from .commands import run_ask, run_ivr, run_tty

logger = logging.getLogger("askpath.cli")

CLI_COMMANDS = ("ask", "ivr", "tty")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="askpath demo CLI", add_help=True)
    parser.add_argument(
        "--demo", choices=CLI_COMMANDS, help="Run one demo and exit."
    )
    parser.add_argument(
        "--config", default=None, help="Path to a config.yml overriding the default."
    )
    parser.add_argument(
        "--skip-banner",
        action="store_true",
        help="Suppress the startup banner (useful for scripts).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Override the log level from the config file.",
    )
    return parser.parse_args(argv)


def run_command(
    command: str, terminal: Terminal, chat: AskChat, config: ConsoleConfig
) -> None:
    if command == "ask":
        run_ask(terminal, chat)
    elif command == "ivr":
        run_ivr(terminal, chat)
    elif command == "tty":
        run_tty(terminal, chat, style=ProgressStyle.from_name(config.progress_style))
    else:
        raise ValueError(f"Unsupported command: {command}")


def run_conversational_cli(terminal: Terminal, config: ConsoleConfig) -> None:
    """Offer the demos in a menu until the user picks ``exit``."""

    chat = AskChat(terminal.console)
    chat.greet()

    while True:
        command = _choose_command()
        if not command or command == "exit":
            chat.say(
                f"All right, {len(chat.demos_run)} demo(s) done. "
                "Come back anytime for more questions!"
            )
            break

        try:
            run_command(command, terminal, chat, config)
        except KeyboardInterrupt:
            chat.say("Demo canceled. Returning to the main menu.")
        except Exception as error:
            logger.debug("demo %s failed", command, exc_info=True)
            chat.wrap_error(error, command)
        else:
            chat.demos_run.append(command)


def _choose_command() -> str | None:
    choices = [*CLI_COMMANDS, "exit"]
    with prompt_gate():
        return questionary.select("Which demo would you like?", choices=choices).ask()


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = load_config(Path(args.config) if args.config else None)

    console = Console(no_color=not config.color)
    configure_logging(args.log_level or config.log_level, config.log_file)
    traceback.install(console=console, show_locals=False)

    terminal = Terminal(console=console, icon=config.icon)
    set_default_terminal(terminal)

    if not args.skip_banner:
        console.print(welcome_message(config.version))

    if args.demo:
        run_command(args.demo, terminal, AskChat(console), config)
        return

    run_conversational_cli(terminal, config)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
