"""Typed answers returned by questions.

Each answer is one variant of :class:`Answer`. Reading it as another type
goes through ``as_int`` / ``as_string`` / ``as_rune``, which return an
:class:`AnswerResult` holding either the converted value or a
:class:`~askpath.errors.WrongAnswerKind` error. The caller decides whether a
mismatch is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from ..errors import WrongAnswerKind

T = TypeVar("T")

INT = "int"
STRING = "string"
RUNE = "rune"


@dataclass(frozen=True)
class AnswerResult(Generic[T]):
    """Outcome of reading an answer as a given type."""

    value: T | None = None
    error: WrongAnswerKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


class Answer:
    """Base of the answer variants; every conversion fails unless overridden."""

    kind: ClassVar[str] = "none"

    def as_int(self) -> AnswerResult[int]:
        return self._mismatch(INT)

    def as_string(self) -> AnswerResult[str]:
        return self._mismatch(STRING)

    def as_rune(self) -> AnswerResult[str]:
        return self._mismatch(RUNE)

    def _mismatch(self, requested: str) -> AnswerResult:
        return AnswerResult(error=WrongAnswerKind(requested, self.kind))


@dataclass(frozen=True)
class NoAnswer(Answer):
    """Nothing was selected, or the question has not been asked yet."""

    kind: ClassVar[str] = "empty"


@dataclass(frozen=True)
class IntAnswer(Answer):
    value: int

    kind: ClassVar[str] = INT

    def as_int(self) -> AnswerResult[int]:
        return AnswerResult(self.value)

    def as_string(self) -> AnswerResult[str]:
        return AnswerResult(str(self.value))


@dataclass(frozen=True)
class StringAnswer(Answer):
    value: str

    kind: ClassVar[str] = STRING

    def as_string(self) -> AnswerResult[str]:
        return AnswerResult(self.value)


@dataclass(frozen=True)
class RuneAnswer(Answer):
    """A single character."""

    value: str

    kind: ClassVar[str] = RUNE

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"a rune answer holds one character, got {self.value!r}")

    def as_rune(self) -> AnswerResult[str]:
        return AnswerResult(self.value)

    def as_string(self) -> AnswerResult[str]:
        return AnswerResult(self.value)


@dataclass(frozen=True)
class ChoiceAnswer(Answer):
    """The option picked in a multiple-choice question."""

    number: int
    text: str

    kind: ClassVar[str] = "choice"

    def as_int(self) -> AnswerResult[int]:
        return AnswerResult(self.number)

    def as_string(self) -> AnswerResult[str]:
        return AnswerResult(self.text)

    def as_rune(self) -> AnswerResult[str]:
        return AnswerResult(str(self.number)[0])
