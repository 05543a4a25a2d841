"""Customer-service phone menu built on the state machine.

Each state asks one multiple-choice question and picks the next state from
the answer, the way an interactive voice response system routes a call.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ask import InputSelection, QuestionWithChoice, Terminal
from ..fsm import (
    STATE_FINAL,
    State,
    StateId,
    StateMachine,
    StateMachineView,
    default_final_state,
)

INITIAL_STATE = StateId(1)
BUY_DATA = StateId(2)
BUY_VOICE = StateId(3)
TECH_SUPPORT = StateId(4)
CLAIMS_DEPT = StateId(5)
VACATION = StateId(6)
FINAL_STATE = StateId(7)

PHONE = "☎"
MUSIC = "♬"

TAX_RATE = 0.14
FLAT_FEE = 15.0

DATA_COSTS = (0.0, 5.0, 6.0, 9.0)
VOICE_COSTS = (0.0, 7.0, 14.0, 35.0)


@dataclass
class CallAccount:
    """What the caller bought during the call."""

    balance: float = 0.0
    taxes: float = 0.0
    fees: float = 0.0

    @property
    def total(self) -> float:
        return self.balance + self.taxes + self.fees


def _account(machine: StateMachineView) -> CallAccount:
    data = machine.state_data
    if not isinstance(data, CallAccount):
        raise TypeError(f"state machine '{machine.name}' carries no CallAccount")
    return data


def _menu(terminal: Terminal, prompt: str, options: list[str]) -> int:
    question = QuestionWithChoice(
        prompt,
        [InputSelection(number, text) for number, text in enumerate(options)],
        terminal,
    )
    return question.ask().as_int()


def build_call_machine(
    terminal: Terminal, account: CallAccount | None = None
) -> StateMachine[CallAccount]:
    """Define the phone menu states and return the machine, ready to start."""

    def voice(message: str) -> None:
        terminal.say(f"{PHONE} {message}")

    def greeter(machine: StateMachineView) -> None:
        terminal.say(f"✋ Hello! {machine}")

    def byer(machine: StateMachineView) -> None:
        terminal.say(f"✌ Bye! {machine}")

    def main_menu(machine: StateMachineView) -> StateId:
        terminal.say(" * * * MAIN AUTOMATED RESPONSE MENU * * *")
        choice = _menu(
            terminal,
            "What would you like to do?",
            [
                "Hang up",
                "Buy Data packages",
                "Buy Voice packages",
                "Technical Support",
                "Claims Department",
            ],
        )
        return (FINAL_STATE, BUY_DATA, BUY_VOICE, TECH_SUPPORT, CLAIMS_DEPT)[choice]

    def buy_data(machine: StateMachineView) -> StateId:
        choice = _menu(
            terminal,
            "Buy which DATA package?",
            ["Cancel", "3 days for $5", "7 days for $6", "10 days for $9", "Want VOICE instead"],
        )
        if choice == 0:
            return INITIAL_STATE
        if choice == 4:
            return BUY_VOICE
        _account(machine).balance = DATA_COSTS[choice]
        return FINAL_STATE

    def buy_voice(machine: StateMachineView) -> StateId:
        choice = _menu(
            terminal,
            "Buy which VOICE package?",
            ["Cancel", "1 week for $7", "2 weeks for $14", "1 month for $35", "Want DATA instead"],
        )
        if choice == 0:
            return INITIAL_STATE
        if choice == 4:
            return BUY_DATA
        _account(machine).balance = VOICE_COSTS[choice]
        return FINAL_STATE

    def tech_support(machine: StateMachineView) -> StateId:
        choice = _menu(
            terminal,
            "Select Technical Support area?",
            ["Cancel", "Internet", "Phone", "Cable TV"],
        )
        return INITIAL_STATE if choice == 0 else VACATION

    def claims(machine: StateMachineView) -> StateId:
        choice = _menu(
            terminal,
            "Which type of claim?",
            ["Cancel", "Sales returns", "Customer service complaints", "General feedback"],
        )
        return INITIAL_STATE if choice == 0 else VACATION

    def vacation_enter(machine: StateMachineView) -> None:
        voice("The department you have reached is on vacation. Call another time.")

    def vacation_exit(machine: StateMachineView) -> None:
        voice("We are transferring you to another department. Trust us!")

    def vacation(machine: StateMachineView) -> StateId:
        terminal.say(f"{MUSIC} (Annoying music here)")
        return STATE_FINAL

    def hang_up(machine: StateMachineView) -> StateId:
        if machine.previous == INITIAL_STATE:
            voice("Thank you for not bothering us more.")
        data = _account(machine)
        if data.balance > 0:
            data.taxes = data.balance * TAX_RATE
            data.fees = FLAT_FEE
            voice(
                "You spent:\n"
                f"\tPurchases: ${data.balance:g}\n"
                f"\tTaxes    : ${data.taxes:g}\n"
                f"\tFees     : ${data.fees:g}\n"
                f"\tTotal    : ${data.total:g}"
            )
        voice("Thank you for choosing us!")
        terminal.say("Hanging up...")
        return FINAL_STATE

    # two ways out: the polite FINAL_STATE and the library's default one
    machine: StateMachine[CallAccount] = StateMachine(
        "Customer Service",
        State(INITIAL_STATE, "S0", greeter, None, False, main_menu),
        State.simple(BUY_DATA, "SD", False, buy_data),
        State.simple(BUY_VOICE, "SV", False, buy_voice),
        State.simple(TECH_SUPPORT, "ST", False, tech_support),
        State.simple(CLAIMS_DEPT, "SC", False, claims),
        State(VACATION, "SF", vacation_enter, vacation_exit, False, vacation),
        State(FINAL_STATE, "SX", None, byer, True, hang_up),
        default_final_state(terminal.console),
    )
    return machine.set_user_data(account or CallAccount())
