"""Plain value prompts: integer, string and single character."""

from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

from .answers import Answer, IntAnswer, RuneAnswer, StringAnswer
from .question import Question
from .terminal import Terminal

T = TypeVar("T", int, str)


class InputRequest(Question, Generic[T]):
    """Ask for one value, offering ``default`` when the entry is left blank."""

    def __init__(self, prompt: str, default: T, terminal: Terminal | None = None) -> None:
        super().__init__(prompt, terminal)
        self.default = default
        self.value: T = self._zero()

    def ask(self) -> "InputRequest[T]":
        self.read()
        return self

    def read(self) -> T:
        """Read the value from the terminal and return it."""

        self.value = self._read_value()
        self.terminal.echo(self.value)
        return self.value

    @property
    def answer(self) -> Answer:
        return self._wrap(self.value)

    def _label(self) -> str:
        return f"{self.prompt} [{self.default}]: "

    @abstractmethod
    def _zero(self) -> T: ...

    @abstractmethod
    def _read_value(self) -> T: ...

    @abstractmethod
    def _wrap(self, value: T) -> Answer: ...


class IntInputRequest(InputRequest[int]):
    """Integer prompt; re-asks until the entry parses or is left blank."""

    def _zero(self) -> int:
        return 0

    def _read_value(self) -> int:
        while True:
            entry = self.terminal.read_line(self._label()).strip()
            if not entry:
                return self.default
            try:
                return int(entry)
            except ValueError as error:
                self.terminal.say(f"!!! Error reading input: {error}", style="red")

    def _wrap(self, value: int) -> Answer:
        return IntAnswer(value)


class StringInputRequest(InputRequest[str]):
    def _zero(self) -> str:
        return ""

    def _read_value(self) -> str:
        entry = self.terminal.read_line(self._label())
        if not entry.strip(" \t"):
            return self.default
        return entry

    def _wrap(self, value: str) -> Answer:
        return StringAnswer(value)


class RuneInputRequest(InputRequest[str]):
    """Single character prompt; only the first character typed is kept."""

    def __init__(self, prompt: str, default: str, terminal: Terminal | None = None) -> None:
        if len(default) != 1:
            raise ValueError(f"default must be a single character, got {default!r}")
        super().__init__(prompt, default, terminal)

    def _zero(self) -> str:
        return "\0"

    def _read_value(self) -> str:
        entry = self.terminal.read_line(self._label())
        if not entry.strip(" \t"):
            return self.default
        return entry[0]

    def _wrap(self, value: str) -> Answer:
        return RuneAnswer(value)
