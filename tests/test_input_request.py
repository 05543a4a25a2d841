"""Tests for the plain value prompts."""

from __future__ import annotations

import logging

import pytest

from askpath.ask import (
    IntInputRequest,
    RuneInputRequest,
    StringInputRequest,
    set_default_terminal,
)


def test_int_request_parses_the_entry(scripted) -> None:
    terminal = scripted("17")

    request = IntInputRequest("Age", 30, terminal).ask()

    assert request.value == 17
    assert request.as_int() == 17
    output = terminal.console.file.getvalue()
    assert "Age [30]:" in output
    assert "👉 17" in output


def test_int_request_blank_entry_keeps_default(scripted) -> None:
    request = IntInputRequest("Age", 30, scripted("   ")).ask()

    assert request.as_int() == 30


def test_int_request_reprompts_after_bad_entry(scripted) -> None:
    terminal = scripted("twelve", "12")

    assert IntInputRequest("Age", 30, terminal).read() == 12
    output = terminal.console.file.getvalue()
    assert "!!! Error reading input:" in output
    assert output.count("Age [30]:") == 2


def test_int_request_uses_default_at_end_of_input(scripted) -> None:
    assert IntInputRequest("Age", 30, scripted()).read() == 30


def test_string_request_returns_line_or_default(scripted) -> None:
    assert StringInputRequest("Name", "Anonymous", scripted("Ada")).read() == "Ada"
    assert StringInputRequest("Name", "Anonymous", scripted(" \t ")).read() == "Anonymous"


def test_string_request_keeps_inner_spaces(scripted) -> None:
    request = StringInputRequest("Text", "x", scripted("attack at dawn")).ask()

    assert request.as_string() == "attack at dawn"


def test_rune_request_takes_the_first_character(scripted) -> None:
    request = RuneInputRequest("Continue?", "y", scripted("nope")).ask()

    assert request.as_rune() == "n"
    assert request.as_string() == "n"


def test_rune_request_blank_keeps_default(scripted) -> None:
    assert RuneInputRequest("Continue?", "y", scripted("")).read() == "y"


def test_rune_request_rejects_long_default() -> None:
    with pytest.raises(ValueError):
        RuneInputRequest("Continue?", "yes")


def test_wrong_kind_degrades_to_sentinel_and_logs(scripted, caplog) -> None:
    request = StringInputRequest("Name", "Anonymous", scripted("Ada")).ask()

    with caplog.at_level(logging.WARNING, logger="askpath.ask"):
        assert request.as_int() == -1

    assert "cannot be read as int" in caplog.text


def test_unasked_request_holds_zero_value() -> None:
    assert IntInputRequest("Age", 30).value == 0
    assert StringInputRequest("Name", "x").value == ""
    assert RuneInputRequest("Key", "k").value == "\0"


def test_questions_fall_back_to_the_default_terminal(scripted) -> None:
    terminal = scripted("5")
    set_default_terminal(terminal)

    assert IntInputRequest("Count", 1).read() == 5
    assert "Count [1]:" in terminal.console.file.getvalue()
