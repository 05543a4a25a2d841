"""Questions tagged with what the questionnaire does once they are answered."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Union

from .answers import Answer
from .question import Question
from .terminal import Terminal


class AnswerMode(Enum):
    CONTINUE = "continue"
    """Proceed with the next entry."""
    DECIDE = "decide"
    """Ask the callback which entry comes next."""
    TERMINATE = "terminate"
    """Stop the questionnaire."""


EntryTarget = Union[int, "SmartQuestion", None]
AnswerCallback = Callable[[int], EntryTarget]


class SmartQuestion(Question):
    """A question plus its continuation mode and optional branching callback.

    The callback receives the answer as an integer and returns the id of the
    entry to ask next (or the registered :class:`SmartQuestion` itself), or
    ``None`` to stop. ``id`` is handed out by the owning questionnaire; 0
    means the question is not registered anywhere.
    """

    def __init__(
        self,
        mode: AnswerMode,
        question: Question,
        callback: AnswerCallback | None = None,
        *,
        id: int = 0,
    ) -> None:
        super().__init__(question.prompt)
        if mode in (AnswerMode.CONTINUE, AnswerMode.TERMINATE):
            callback = None
        elif callback is None:
            mode = AnswerMode.TERMINATE
        self.id = id
        self.mode = mode
        self.question = question
        self.callback = callback

    @property
    def terminal(self) -> Terminal:
        return self.question.terminal

    def ask(self) -> "SmartQuestion":
        self.question.ask()
        return self

    @property
    def answer(self) -> Answer:
        return self.question.answer

    def next(self) -> EntryTarget:
        """Return where the callback wants to go, or ``None`` without one."""

        if self.callback is None:
            return None
        return self.callback(self.question.as_int())

    def __repr__(self) -> str:
        return f"SmartQuestion(id={self.id}, mode={self.mode.name}, prompt={self.prompt!r})"


def branch_to(mapping: Mapping[int, int], default: int | None = None) -> AnswerCallback:
    """Build a callback from an explicit ``{answer: entry_id}`` table.

    The table is read when the answer arrives, so it may be filled in after
    the entries it points to have been added. Answers missing from it go to
    ``default``; ``None`` stops the questionnaire.
    """

    def _callback(answer: int) -> int | None:
        return mapping.get(answer, default)

    return _callback
