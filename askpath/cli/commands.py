"""Demo command handlers for the askpath CLI."""

from __future__ import annotations

import logging
import time
from typing import Protocol

from ..ask import (
    InputSelection,
    IntInputRequest,
    Questionnaire,
    QuestionWithChoice,
    RuneInputRequest,
    StringInputRequest,
    Terminal,
    branch_to,
    select_options,
)
from ..tty import ProgressStyle, TerminalControl, progress_bar
from .ivr import CallAccount, build_call_machine

logger = logging.getLogger("askpath.cli")


class InteractionChannel(Protocol):
    def say(self, message: str) -> None:  # pragma: no cover - simple logging interface
        ...

    def success(
        self, message: str
    ) -> None:  # pragma: no cover - simple logging interface
        ...


def run_ask(terminal: Terminal, channel: InteractionChannel) -> dict[str, object]:
    """Walk through every question widget, then a branching questionnaire."""

    channel.say("Plain questions first. Press Enter to keep the value in brackets.")
    age = IntInputRequest("How old are you", 30, terminal).ask().as_int()
    name = StringInputRequest("What is your name", "Anonymous", terminal).ask().as_string()
    keep_going = RuneInputRequest("Continue? (y/n)", "y", terminal).ask().as_rune()

    color = QuestionWithChoice(
        "Which color do you like best?",
        [InputSelection(1, "Red"), InputSelection(2, "Green"), InputSelection(3, "Blue")],
        terminal,
    ).ask()
    size = select_options(
        "Pick a T-shirt size",
        [InputSelection(1, "S"), InputSelection(2, "M"), InputSelection(3, "L")],
        terminal,
    )

    summary: dict[str, object] = {
        "age": age,
        "name": name,
        "continue": keep_going,
        "color": color.as_string(),
        "size": size,
    }
    if keep_going.lower() != "y":
        channel.success(f"Stopped early: {summary}")
        return summary

    channel.say("Now a questionnaire that branches on the chosen operation.")
    questionnaire = Questionnaire()
    routes: dict[int, int] = {}
    operation = QuestionWithChoice(
        "What do you want to do?",
        [InputSelection(0, "Help"), InputSelection(1, "Encrypt"), InputSelection(2, "Decrypt")],
        terminal,
    )
    questionnaire.add_conditional_choices(operation, branch_to(routes))
    cipher = StringInputRequest("Cipher", "caesar", terminal)
    cipher_id = questionnaire.add_sequential(cipher)
    text = StringInputRequest("Text", "attack at dawn", terminal)
    questionnaire.add_terminal(text)
    topic = StringInputRequest("Help topic", "ciphers", terminal)
    help_id = questionnaire.add_terminal(topic)
    routes.update({0: help_id, 1: cipher_id, 2: cipher_id})

    visited = questionnaire.start_questionnaire()
    logger.debug("questionnaire visited %s", visited)

    summary["operation"] = operation.as_string()
    if help_id in visited:
        summary["help"] = topic.as_string()
    else:
        summary["cipher"] = cipher.as_string()
        summary["text"] = text.as_string()
    channel.success(f"You answered: {summary}")
    return summary


def run_ivr(terminal: Terminal, channel: InteractionChannel) -> CallAccount:
    """Place a call to the customer-service menu and return what was bought."""

    account = CallAccount()
    machine = build_call_machine(terminal, account)
    machine.validate()

    channel.say(f"Calling {machine.name}...")
    machine.start()
    logger.debug("call ended: %s", machine.snapshot())
    channel.success(f"Call finished, total ${account.total:g}")
    return account


def run_tty(
    terminal: Terminal,
    channel: InteractionChannel,
    *,
    style: ProgressStyle = ProgressStyle.BRAILLE_ROTATE,
    delay: float = 0.05,
) -> None:
    """Show the colors, then draw a progress line per style and a Rich bar."""

    tty = TerminalControl(terminal.console)
    tty.clear()
    tty.home()
    tty.bolded("askpath terminal helpers")
    terminal.console.line()
    for paint in (tty.red, tty.green, tty.yellow, tty.purple, tty.cyan):
        paint(paint.__name__, " ")
    terminal.console.line()
    for paint in (
        tty.bright_red,
        tty.bright_green,
        tty.bright_yellow,
        tty.bright_purple,
        tty.bright_cyan,
        tty.bright_white,
    ):
        paint(paint.__name__, " ")
    terminal.console.line()
    tty.underlined("underlined")
    terminal.console.line()

    # configured style first, then the others
    styles = [style, *(other for other in ProgressStyle if other != style)]
    for row, current in enumerate(styles, start=8):
        for percent in range(0, 101, 5):
            tty.show_progress_at(current, row, current.name.lower(), percent)
            time.sleep(delay)

    tty.cursor(8 + len(styles), 1)
    with progress_bar(terminal.console) as progress:
        task = progress.add_task("rich progress", total=20)
        for _ in range(20):
            time.sleep(delay)
            progress.advance(task)

    tty.reset()
    channel.success("Terminal tour finished.")
