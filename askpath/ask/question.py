"""The askable question abstraction."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .answers import Answer, AnswerResult
from .terminal import Terminal, default_terminal

logger = logging.getLogger("askpath.ask")

INT_SENTINEL = -1
STRING_SENTINEL = ""
RUNE_SENTINEL = "\0"


class Question(ABC):
    """Something that can be asked on the console and then holds an answer.

    ``as_int``/``as_string``/``as_rune`` never raise: a wrong kind is logged
    and replaced by a sentinel (-1, ``""``, ``"\\0"``). Use
    ``question.answer.as_int()`` for the explicit result instead.
    """

    def __init__(self, prompt: str, terminal: Terminal | None = None) -> None:
        self.prompt = prompt
        self._terminal = terminal

    @property
    def terminal(self) -> Terminal:
        return self._terminal or default_terminal()

    @abstractmethod
    def ask(self) -> "Question":
        """Ask interactively, store the answer and return ``self``."""

    @property
    @abstractmethod
    def answer(self) -> Answer:
        """The answer obtained by the last :meth:`ask`."""

    def as_int(self) -> int:
        return self._soft(self.answer.as_int(), INT_SENTINEL)

    def as_string(self) -> str:
        return self._soft(self.answer.as_string(), STRING_SENTINEL)

    def as_rune(self) -> str:
        return self._soft(self.answer.as_rune(), RUNE_SENTINEL)

    def _soft(self, result: AnswerResult, sentinel):
        if result.ok:
            return result.value
        logger.warning("%s: %s", self.prompt, result.error)
        return sentinel
