"""Tests for a single state's visit protocol."""

from __future__ import annotations

import pytest

from askpath.errors import StateOwnershipError
from askpath.fsm import STATE_FINAL, State, StateId, StateMachine, default_final_state


class _Recorder:
    def __init__(self) -> None:
        self.events: list[str] = []

    def enter(self, name: str):
        return lambda machine: self.events.append(f"enter {name}")

    def exit(self, name: str):
        return lambda machine: self.events.append(f"exit {name}")


def test_unattached_state_cannot_run() -> None:
    state = State.simple(StateId(1), "S0", False, lambda machine: StateId(1))

    with pytest.raises(StateOwnershipError):
        state.run()


def test_state_belongs_to_a_single_machine() -> None:
    shared = State.simple(StateId(2), "shared", True, None)
    StateMachine("first", State.simple(StateId(1), "S0", False, None), shared)

    with pytest.raises(StateOwnershipError):
        StateMachine("second", State.simple(StateId(1), "S0", False, None), shared)


def test_state_without_body_stays_put() -> None:
    idle = State(StateId(1), "idle")
    StateMachine("m", idle, State.simple(StateId(2), "end", True, None))

    assert idle.run() == StateId(1)
    assert idle.parent is not None


def test_self_loop_skips_both_hooks_once_inside() -> None:
    recorder = _Recorder()
    rounds = iter([StateId(1), StateId(1), StateId(2)])
    looping = State(
        StateId(1),
        "loop",
        recorder.enter("loop"),
        recorder.exit("loop"),
        False,
        lambda machine: next(rounds),
    )
    machine = StateMachine("m", looping, State.simple(StateId(2), "end", True, None))

    machine.start()

    # entered once from nowhere, left once for "end"
    assert recorder.events == ["enter loop", "exit loop"]


def test_str_is_the_state_name() -> None:
    state = State(StateId(3), "Billing")

    assert str(state) == "Billing"
    assert "Billing" in repr(state)


def test_default_final_state_is_a_fresh_terminal_state(console) -> None:
    first = default_final_state(console)
    second = default_final_state(console)

    assert first is not second
    assert first.id == STATE_FINAL
    assert first.terminal
    assert first.name == "FIN"


def test_default_final_state_prints_its_messages(console) -> None:
    final = default_final_state(console)
    machine = StateMachine(
        "m", State.simple(StateId(1), "S0", False, lambda machine: STATE_FINAL), final
    )

    machine.start()

    output = console.file.getvalue()
    assert "⚡ Entered FinalState" in output
    assert "⛔ The End" in output
    # the body returns its own id, so no exit message
    assert "Exit FinalState" not in output
