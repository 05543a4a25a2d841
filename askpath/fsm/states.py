"""State definitions for the questionnaire state machine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, NewType, Protocol

from rich.console import Console

from ..errors import StateOwnershipError

if TYPE_CHECKING:
    from .machine import MachineSnapshot

StateId = NewType("StateId", int)

# Reserved ids. Consumers number their own states from 1.
STATE_NONE = StateId(0)
STATE_FINAL = StateId(65535)


class StateMachineView(Protocol):
    """What state hooks and bodies get to see of their machine."""

    @property
    def name(self) -> str: ...

    @property
    def previous(self) -> StateId: ...

    @property
    def is_active(self) -> bool: ...

    @property
    def is_done(self) -> bool: ...

    @property
    def state_data(self) -> Any: ...

    def snapshot(self) -> "MachineSnapshot": ...


OnEnterHandler = Callable[[StateMachineView], None]
OnExitHandler = Callable[[StateMachineView], None]
StateBody = Callable[[StateMachineView], StateId]


class State:
    """A named node of a state machine.

    ``on_enter`` runs only when the machine arrives from a different state and
    ``on_exit`` only when the body leaves for a different state, so a state
    that returns its own id loops without re-firing either hook.
    """

    __slots__ = ("id", "name", "terminal", "_on_enter", "_on_exit", "_body", "_parent")

    def __init__(
        self,
        id: StateId,
        name: str,
        on_enter: OnEnterHandler | None = None,
        on_exit: OnExitHandler | None = None,
        terminal: bool = False,
        body: StateBody | None = None,
    ) -> None:
        self.id = StateId(id)
        self.name = name
        self.terminal = terminal
        self._on_enter = on_enter
        self._on_exit = on_exit
        self._body = body
        self._parent: StateMachineView | None = None

    @classmethod
    def simple(
        cls, id: StateId, name: str, terminal: bool, body: StateBody | None
    ) -> "State":
        """Build a state that has a body but no enter/exit hooks."""

        return cls(id, name, None, None, terminal, body)

    @property
    def parent(self) -> StateMachineView | None:
        return self._parent

    def check_owner(self, machine: StateMachineView) -> None:
        """Raise :class:`StateOwnershipError` if another machine owns the state."""

        if self._parent is not None and self._parent is not machine:
            raise StateOwnershipError(
                f"state '{self.name}' ({self.id}) already belongs to "
                f"state machine '{self._parent.name}'"
            )

    def attach(self, machine: StateMachineView) -> None:
        """Bind the state to its owning machine. Done once, at registration."""

        self.check_owner(machine)
        self._parent = machine

    def run(self) -> StateId:
        """Execute one visit of the state and return the id to go to next."""

        machine = self._parent
        if machine is None:
            raise StateOwnershipError(
                f"state '{self.name}' ({self.id}) is not part of a state machine"
            )

        if machine.previous != self.id and self._on_enter is not None:
            self._on_enter(machine)

        next_state = self.id
        if self._body is not None:
            next_state = StateId(self._body(machine))

        if next_state != self.id and self._on_exit is not None:
            self._on_exit(machine)

        return next_state

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"State(id={self.id}, name={self.name!r}, terminal={self.terminal})"


def default_final_state(console: Console | None = None) -> State:
    """Return a ready-made terminal state registered under ``STATE_FINAL``.

    A new instance is built on every call because a state may only ever
    belong to one machine.
    """

    out = console or Console()

    def _enter(machine: StateMachineView) -> None:
        out.print("⚡ Entered FinalState")

    def _exit(machine: StateMachineView) -> None:
        out.print("⚡ Exit FinalState")

    def _body(machine: StateMachineView) -> StateId:
        out.print("⛔ The End")
        return STATE_FINAL

    return State(STATE_FINAL, "FIN", _enter, _exit, True, _body)
