"""Exception types shared across askpath."""

from __future__ import annotations


class AskPathError(Exception):
    """Base class for every error raised by askpath."""


class MachineDefinitionError(AskPathError):
    """The state set of a machine cannot be started."""


class StateOwnershipError(AskPathError):
    """A state is unregistered, or registered with more than one machine."""


class MachineRunningError(AskPathError):
    """``start()`` was called on a machine that is already running."""


class UnknownStateError(AskPathError, KeyError):
    """A state body returned an id that the machine does not know."""

    def __init__(self, state_id: int, machine: str) -> None:
        super().__init__(state_id, machine)
        self.state_id = state_id
        self.machine = machine

    def __str__(self) -> str:
        return f"state machine '{self.machine}' has no state with id {self.state_id}"


class UnknownQuestionError(AskPathError, KeyError):
    """A branching callback pointed at an entry that is not in the questionnaire."""

    def __init__(self, entry_id: object) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"questionnaire has no entry with id {self.entry_id!r}"


class WrongAnswerKind(AskPathError, TypeError):
    """An answer was requested as a type it does not hold."""

    def __init__(self, requested: str, actual: str) -> None:
        super().__init__(requested, actual)
        self.requested = requested
        self.actual = actual

    def __str__(self) -> str:
        return f"{self.actual} answer cannot be read as {self.requested}"
