"""Console questions and the questionnaire that chains them.

question.py:
    Question - askable abstraction (ask, answer, as_int/as_string/as_rune)

answers.py:
    Answer variants (IntAnswer, StringAnswer, RuneAnswer, ChoiceAnswer,
    NoAnswer) and AnswerResult for explicit type checks

input_request.py:
    IntInputRequest, StringInputRequest, RuneInputRequest

choice.py:
    InputSelection, select_options(), QuestionWithChoice

smart_question.py / questionnaire.py:
    AnswerMode, SmartQuestion, branch_to(), Questionnaire

terminal.py:
    Terminal - Rich console plus input stream used by every prompt
"""

from .answers import (
    Answer,
    AnswerResult,
    ChoiceAnswer,
    IntAnswer,
    NoAnswer,
    RuneAnswer,
    StringAnswer,
)
from .choice import NO_SELECTION, InputSelection, QuestionWithChoice, select_options
from .input_request import (
    InputRequest,
    IntInputRequest,
    RuneInputRequest,
    StringInputRequest,
)
from .question import Question
from .questionnaire import Questionnaire
from .smart_question import AnswerCallback, AnswerMode, SmartQuestion, branch_to
from .terminal import Terminal, default_terminal, set_default_terminal

__all__ = [
    "NO_SELECTION",
    "Answer",
    "AnswerCallback",
    "AnswerMode",
    "AnswerResult",
    "ChoiceAnswer",
    "InputRequest",
    "InputSelection",
    "IntAnswer",
    "IntInputRequest",
    "NoAnswer",
    "Question",
    "QuestionWithChoice",
    "Questionnaire",
    "RuneAnswer",
    "RuneInputRequest",
    "SmartQuestion",
    "StringAnswer",
    "StringInputRequest",
    "Terminal",
    "branch_to",
    "default_terminal",
    "select_options",
    "set_default_terminal",
]
