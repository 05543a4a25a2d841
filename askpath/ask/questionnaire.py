"""Sequencing of smart questions into a linear or branching questionnaire."""

from __future__ import annotations

import itertools
import logging
from typing import Iterator

from ..errors import UnknownQuestionError
from .choice import QuestionWithChoice
from .question import Question
from .smart_question import AnswerCallback, AnswerMode, EntryTarget, SmartQuestion

logger = logging.getLogger("askpath.ask")


class Questionnaire:
    """Ordered list of questions, each tagged with what happens after it.

    Entry ids are handed out by this questionnaire, starting at 1 in the
    order entries are added. Branching callbacks return one of those ids.
    Running past the last entry ends the questionnaire.
    """

    def __init__(self) -> None:
        self._entries: list[SmartQuestion] = []
        self._by_id: dict[int, SmartQuestion] = {}
        self._ids = itertools.count(1)

    def add_sequential(self, question: Question) -> int:
        """Ask ``question`` and then proceed with the next entry."""

        return self._add(AnswerMode.CONTINUE, question, None)

    def add_terminal(self, question: Question) -> int:
        """Ask ``question`` and then end the questionnaire."""

        return self._add(AnswerMode.TERMINATE, question, None)

    def add_conditional_choices(
        self, question: QuestionWithChoice, callback: AnswerCallback | None
    ) -> int:
        """Ask a multiple-choice question and let ``callback`` pick the next entry."""

        return self._add(AnswerMode.DECIDE, question, callback)

    def add_conditional_smart(self, smart: SmartQuestion) -> int:
        """Register the question and callback of a prepared smart question."""

        return self._add(AnswerMode.DECIDE, smart.question, smart.callback)

    def get(self, entry_id: int) -> SmartQuestion:
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise UnknownQuestionError(entry_id) from None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SmartQuestion]:
        return iter(self._entries)

    def start_questionnaire(self) -> list[int]:
        """Ask the questions from the first entry on.

        Returns:
            The ids of the entries that were asked, in order.
        """

        visited: list[int] = []
        if not self._entries:
            return visited

        position: int | None = 0
        while position is not None:
            entry = self._entries[position]
            entry.ask()
            visited.append(entry.id)
            position = self._next_position(entry, position)

        logger.debug("questionnaire finished after %d questions", len(visited))
        return visited

    def _next_position(self, entry: SmartQuestion, position: int) -> int | None:
        if entry.mode is AnswerMode.TERMINATE:
            return None

        if entry.mode is AnswerMode.CONTINUE:
            following = position + 1
            if following >= len(self._entries):
                return None
            return following

        target = self._resolve(entry.next())
        if target is None:
            logger.debug("entry %d: callback ended the questionnaire", entry.id)
            return None
        logger.debug("entry %d: branching to entry %d", entry.id, target.id)
        return self._entries.index(target)

    def _resolve(self, target: EntryTarget) -> SmartQuestion | None:
        if target is None:
            return None
        if isinstance(target, SmartQuestion):
            if self._by_id.get(target.id) is not target:
                raise UnknownQuestionError(target.id)
            return target
        return self.get(target)

    def _add(
        self, mode: AnswerMode, question: Question, callback: AnswerCallback | None
    ) -> int:
        entry_id = next(self._ids)
        entry = SmartQuestion(mode, question, callback, id=entry_id)
        self._entries.append(entry)
        self._by_id[entry_id] = entry
        return entry_id
