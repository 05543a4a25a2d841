"""State machine that drives questionnaire states until a terminal one runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from ..errors import (
    MachineDefinitionError,
    MachineRunningError,
    UnknownStateError,
)
from .states import STATE_NONE, State, StateId

logger = logging.getLogger("askpath.fsm")

T = TypeVar("T")


@dataclass(frozen=True)
class MachineSnapshot:
    """Read-only view of a machine's status at one point of its run."""

    name: str
    previous: StateId = STATE_NONE
    current: StateId = STATE_NONE
    active: bool = False
    done: bool = False
    steps: int = 0


class StateMachine(Generic[T]):
    """Finite state machine with just enough features for interactive menus.

    The thread calling :meth:`start` is the only writer. Status is published
    as an immutable :class:`MachineSnapshot` after every change, so other
    threads may poll :meth:`snapshot` while the machine runs.
    """

    def __init__(self, name: str, initial_state: State, *other_states: State) -> None:
        self._initial_state = initial_state
        self._states: dict[StateId, State] = {}
        self._state_data: T | None = None
        self._snapshot = MachineSnapshot(name=name)

        # check everything before claiming any state
        states: dict[StateId, State] = {}
        for state in (initial_state, *other_states):
            if state.id == STATE_NONE:
                raise ValueError(
                    f"state '{state.name}' uses the reserved id {STATE_NONE}"
                )
            if state.id in states:
                raise ValueError(
                    f"duplicate state id {state.id} in state machine '{name}'"
                )
            state.check_owner(self)
            states[state.id] = state

        for state in states.values():
            state.attach(self)
        self._states = states

    # Status ---------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._snapshot.name

    @property
    def previous(self) -> StateId:
        """Id of the state executed last; usable inside ``on_enter`` hooks."""

        return self._snapshot.previous

    @property
    def is_active(self) -> bool:
        return self._snapshot.active

    @property
    def is_done(self) -> bool:
        return self._snapshot.done

    @property
    def initial_state(self) -> State:
        return self._initial_state

    @property
    def states(self) -> dict[StateId, State]:
        return dict(self._states)

    def snapshot(self) -> MachineSnapshot:
        return self._snapshot

    # User data ------------------------------------------------------------

    @property
    def state_data(self) -> T | None:
        """Custom data shared with state bodies for the duration of a run."""

        return self._state_data

    def set_user_data(self, user_data: T) -> "StateMachine[T]":
        self._state_data = user_data
        return self

    # Definition checks ----------------------------------------------------

    def is_valid(self) -> MachineDefinitionError | None:
        """Return why the machine cannot be started, or ``None`` if it can."""

        if not self._states:
            return MachineDefinitionError("no states have been defined")
        if len(self._states) == 1:
            return MachineDefinitionError("only has an initial state")
        if not any(state.terminal for state in self._states.values()):
            return MachineDefinitionError("there must be at least one terminal state")
        return None

    def validate(self) -> None:
        error = self.is_valid()
        if error is not None:
            raise error

    # Execution ------------------------------------------------------------

    def start(self) -> None:
        """Run states until a terminal state has been executed."""

        if self._snapshot.active:
            raise MachineRunningError(f"state machine '{self.name}' is already running")

        initial = self._initial_state
        self._publish(active=True, done=False, current=initial.id, steps=0)
        logger.debug("[%s] starting at %s", self.name, initial)
        try:
            next_state = initial.run()
            # previous started as STATE_NONE so the initial on_enter always fires
            self._publish(previous=initial.id, steps=1)

            while not self._snapshot.done:
                current = self._lookup(next_state)
                self._publish(current=current.id)
                logger.debug("[%s] running %s", self.name, current)
                next_state = current.run()
                if next_state != self._snapshot.previous:
                    self._publish(previous=current.id)
                self._publish(done=current.terminal, steps=self._snapshot.steps + 1)
        finally:
            self._publish(active=False)

        logger.debug("[%s] finished after %d steps", self.name, self._snapshot.steps)

    def _lookup(self, state_id: StateId) -> State:
        try:
            return self._states[state_id]
        except KeyError:
            raise UnknownStateError(state_id, self.name) from None

    def _publish(self, **changes: object) -> None:
        self._snapshot = replace(self._snapshot, **changes)

    def __str__(self) -> str:
        snap = self._snapshot
        return f"[{snap.name}] active:{snap.active} done:{snap.done}"

    def __repr__(self) -> str:
        return f"StateMachine(name={self.name!r}, states={len(self._states)})"
