"""Tests for the ANSI terminal helpers."""

from __future__ import annotations

import logging
from io import StringIO

import pytest
from rich.console import Console
from rich.progress import Progress

from askpath.tty import (
    PROGRESS_GLYPHS,
    ProgressStyle,
    TerminalControl,
    progress_bar,
    progress_line,
)


@pytest.fixture
def tty() -> TerminalControl:
    console = Console(
        file=StringIO(),
        force_terminal=True,
        color_system=None,
        width=80,
        _environ={"TERM": "xterm-256color"},
    )
    return TerminalControl(console)


def _written(tty: TerminalControl) -> str:
    return tty.console.file.getvalue()


def test_cursor_moves_to_one_based_positions(tty) -> None:
    tty.cursor(3, 5)
    tty.cursor(0, -2)

    assert _written(tty) == "\x1b[3;5H\x1b[1;1H"


def test_screen_and_cursor_sequences(tty) -> None:
    tty.home()
    tty.clear()
    tty.cursor_up(2)
    tty.clear_line()
    tty.hide_cursor()
    tty.show_cursor()

    assert _written(tty) == "\x1b[H\x1b[2J\x1b[2A\x1b[2K\x1b[?25l\x1b[?25h"


def test_raw_sequences_are_written_to_terminals(tty) -> None:
    tty.save_cursor()
    tty.clear_below()
    tty.restore_cursor()
    tty.reset()

    assert _written(tty) == "\x1b[s\x1b[0J\x1b[u\x1b[39m\x1b[49m"


def test_plain_files_get_no_escape_sequences(console) -> None:
    tty = TerminalControl(console)

    tty.clear()
    tty.cursor(2, 2)
    tty.save_cursor()
    tty.bold()
    tty.green("ok")

    assert console.file.getvalue() == "ok"


def test_color_helpers_join_arguments(tty) -> None:
    tty.purple("a", 1, "b")

    assert _written(tty) == "a1b"


def test_progress_line_format() -> None:
    assert progress_line("⠇", 5, "", "copy") == "⠇ 05%/100%      copy"
    assert progress_line("|", 100, "✓ OK", "copy") == "| 100%/100% ✓ OK copy"


def test_show_progress_draws_glyph_and_completion(tty) -> None:
    tty.show_progress_at(ProgressStyle.SLASHDOT, 4, "upload", 100)

    glyph = PROGRESS_GLYPHS[ProgressStyle.SLASHDOT][100 % 4]
    written = _written(tty)
    assert written.startswith("\x1b[?25l\x1b[4;1H")
    assert f"{glyph} 100%/100% ✓ OK upload" in written
    assert written.endswith("\x1b[?25h")


def test_show_progress_over_100_logs_and_draws_nothing(tty, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="askpath.tty"):
        tty.show_progress_at(ProgressStyle.BRAILLE_WAVE, 1, "upload", 101)

    assert _written(tty) == ""
    assert "upload" in caplog.text


def test_show_progress_rejects_negative_percent(tty) -> None:
    with pytest.raises(ValueError):
        tty.show_progress_at(ProgressStyle.BRAILLE_ROTATE, 1, "upload", -1)


def test_unknown_style_falls_back_to_braille_rotate(tty) -> None:
    tty.show_progress_at(42, 1, "t", 1)

    assert PROGRESS_GLYPHS[ProgressStyle.BRAILLE_ROTATE][1] in _written(tty)


def test_style_names_map_to_styles() -> None:
    assert ProgressStyle.from_name("braille-wave") is ProgressStyle.BRAILLE_WAVE
    assert ProgressStyle.from_name("SLASHDOT") is ProgressStyle.SLASHDOT
    with pytest.raises(KeyError):
        ProgressStyle.from_name("spinner")


def test_progress_bar_uses_the_given_console(console) -> None:
    progress = progress_bar(console)

    assert isinstance(progress, Progress)
    assert progress.console is console
