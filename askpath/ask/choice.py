"""Numbered multiple-choice menus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.markup import escape

from .answers import Answer, ChoiceAnswer, NoAnswer
from .question import Question
from .terminal import ICON_WHITE_RIGHT, Terminal, default_terminal

NO_SELECTION = -1


@dataclass(frozen=True)
class InputSelection:
    """One numbered option of a menu."""

    number: int
    text: str

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"option numbers start at 0, got {self.number}")

    def __str__(self) -> str:
        return f"{self.number}. {self.text}"

    def chosen(self, icon: str = ICON_WHITE_RIGHT) -> str:
        return f"{icon} {self.text}"


def select_options(
    prompt: str,
    options: Sequence[InputSelection],
    terminal: Terminal | None = None,
) -> int:
    """List ``options`` and return the number the user picks.

    No options yields ``-1`` and a single option is picked without asking.
    Otherwise the menu is shown until a listed number is entered; a blank
    entry picks the first option. There is no retry limit.
    """

    term = terminal or default_terminal()
    selected = _select(prompt, options, term)
    if len(options) > 1:
        term.echo(selected)
    return selected


def _select(prompt: str, options: Sequence[InputSelection], term: Terminal) -> int:
    if not options:
        return NO_SELECTION
    if len(options) == 1:
        return options[0].number

    valid = {option.number for option in options}
    while True:
        _render_menu(prompt, options, term)
        value = _read_selection(options, term)
        if value > NO_SELECTION and value in valid:
            return value


def _render_menu(prompt: str, options: Sequence[InputSelection], term: Terminal) -> None:
    term.console.print(f"[bright_yellow]{escape(prompt)}[/]", highlight=False)
    for index, option in enumerate(options):
        marker = " (default)" if index == 0 else ""
        term.console.print(
            f"\t[green]{option.number}. {escape(option.text)}{marker}[/]",
            highlight=False,
        )


def _read_selection(options: Sequence[InputSelection], term: Terminal) -> int:
    entry = term.read_line("Enter your choice: ").strip()
    if not entry:
        return options[0].number
    try:
        return int(entry)
    except ValueError:
        return NO_SELECTION


class QuestionWithChoice(Question):
    """A multiple-choice question whose answer is the picked option."""

    def __init__(
        self,
        prompt: str,
        choices: Sequence[InputSelection],
        terminal: Terminal | None = None,
    ) -> None:
        super().__init__(prompt, terminal)
        self.choices = list(choices)
        self._answer: Answer = NoAnswer()

    def ask(self) -> "QuestionWithChoice":
        term = self.terminal
        number = _select(self.prompt, self.choices, term)
        option = self.option(number)
        if option is None:
            self._answer = NoAnswer()
            return self
        self._answer = ChoiceAnswer(option.number, option.text)
        if len(self.choices) > 1:
            term.say(option.chosen(term.icon))
        return self

    @property
    def answer(self) -> Answer:
        return self._answer

    def option(self, number: int) -> InputSelection | None:
        """Return the first option registered under ``number``."""

        for option in self.choices:
            if option.number == number:
                return option
        return None
