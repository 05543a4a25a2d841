"""Conversational CLI interface using Rich and Questionary.

===================================================================================
OVERVIEW
===================================================================================
Runs the askpath demos from a menu or straight from the command line:
  - ask: every question widget, then a branching questionnaire
  - ivr: a customer-service phone menu driven by the state machine
  - tty: cursor movement, colors and progress indicators

Entry point: askpath

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

main.py:
    main(argv) → Entry point
    --demo {ask,ivr,tty}, --config PATH, --skip-banner, --log-level LEVEL
    Without --demo, loops on a questionary menu until "exit"

commands.py:
    InteractionChannel - Protocol for CLI communication
    run_ask() / run_ivr() / run_tty() → one demo each

ivr.py:
    CallAccount - balance, taxes and fees collected during the call
    build_call_machine(terminal) → StateMachine[CallAccount]

chat.py:
    AskChat - Rich panels for greetings, results and errors

===================================================================================
USAGE EXAMPLES
===================================================================================

# Interactive menu
$ askpath

# One demo, no banner
$ askpath --demo ivr --skip-banner

# Debug logging for the questionnaire
$ askpath --demo ask --log-level debug

===================================================================================
CONSTRAINTS
===================================================================================

1. The demo menu uses questionary and needs a TTY; --demo works with piped stdin
2. Cursor and color sequences are skipped when stdout is not a terminal
"""
