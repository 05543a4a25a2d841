"""askpath: console questions chained into decision paths.

===================================================================================
OVERVIEW
===================================================================================
askpath helps build interactive console programs out of two pieces:
  - a small finite state machine whose states run hooks and pick the next
    state from their body
  - console question widgets (typed prompts, numbered menus) that can be
    sequenced into a branching questionnaire

===================================================================================
ARCHITECTURE
===================================================================================

    askpath/
    ├── fsm/            State, StateMachine, MachineSnapshot
    ├── ask/            Questions, answers, menus, Questionnaire
    ├── tty/            ANSI cursor/color helpers and progress lines
    ├── cli/            Conversational demo CLI (Rich + Questionary)
    ├── interfaces/     ConsoleConfig
    ├── utils/          Paths, YAML config, logging, prompt gate
    └── errors.py       AskPathError hierarchy

===================================================================================
USAGE EXAMPLE
===================================================================================

from askpath.fsm import State, StateId, StateMachine

def greet(machine):
    print("hello")
    return StateId(2)

machine = StateMachine(
    "Demo",
    State.simple(StateId(1), "S0", False, greet),
    State.simple(StateId(2), "SX", True, None),
)
machine.start()

===================================================================================
ENTRY POINTS
===================================================================================

Console script: askpath
    Launches the demo CLI defined in askpath.cli.main
"""

__version__ = "1.1.1"

__all__ = [
    "__version__",
]
