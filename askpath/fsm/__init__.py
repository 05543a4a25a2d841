"""Finite state machine used to sequence questions into decision paths.

A machine owns a set of :class:`State` objects keyed by :data:`StateId`.
``start()`` runs the initial state, then follows the id returned by each
state's body until a state marked ``terminal`` has executed.

Hook protocol of one visit::

    on_enter   if the machine arrives from another state
    body       always, returns the next StateId
    on_exit    if the body leaves for another state
"""

from .machine import MachineSnapshot, StateMachine
from .states import (
    STATE_FINAL,
    STATE_NONE,
    OnEnterHandler,
    OnExitHandler,
    State,
    StateBody,
    StateId,
    StateMachineView,
    default_final_state,
)

__all__ = [
    "STATE_FINAL",
    "STATE_NONE",
    "MachineSnapshot",
    "OnEnterHandler",
    "OnExitHandler",
    "State",
    "StateBody",
    "StateId",
    "StateMachine",
    "StateMachineView",
    "default_final_state",
]
