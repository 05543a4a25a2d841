"""ANSI terminal gadgets: cursor movement, colored text and progress lines."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from rich.console import Console
from rich.control import Control
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.segment import ControlType

logger = logging.getLogger("askpath.tty")

# Sequences Rich has no Control for.
_RESET_COLORS = "\x1b[39m\x1b[49m"
_CLEAR_BELOW = "\x1b[0J"
_CLEAR_ABOVE = "\x1b[1J"
_SAVE_CURSOR = "\x1b[s"
_RESTORE_CURSOR = "\x1b[u"
_BOLD_ON = "\x1b[1m"
_BOLD_OFF = "\x1b[22m"


class ProgressStyle(IntEnum):
    BRAILLE_ROTATE = 0
    BRAILLE_WAVE = 1
    SLASHDOT = 2

    @classmethod
    def from_name(cls, name: str) -> "ProgressStyle":
        """Map a config name such as ``braille-wave`` to a style."""

        return cls[name.strip().upper().replace("-", "_")]


PROGRESS_GLYPHS: dict[ProgressStyle, str] = {
    ProgressStyle.BRAILLE_ROTATE: "⠇⠋⠉⠙⠸⠴⠤⠦",
    ProgressStyle.BRAILLE_WAVE: "⠄⠤⠴⠶⠾⠿⠷⠶⠦⠤⠠",
    ProgressStyle.SLASHDOT: "/-\\|",
}


class TerminalControl:
    """Cursor and color helpers bound to one Rich console.

    Cursor sequences are only written when the console is an interactive
    terminal, so redirected output stays plain text.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # Screen ---------------------------------------------------------------

    def reset(self) -> None:
        """Restore the default foreground and background colors."""
        self._raw(_RESET_COLORS)

    def home(self) -> None:
        self.console.control(Control.home())

    def clear(self) -> None:
        self.console.control(Control.clear())

    def clear_line(self) -> None:
        """Erase the current line but keep the cursor where it is."""
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))

    def clear_below(self) -> None:
        self._raw(_CLEAR_BELOW)

    def clear_above(self) -> None:
        self._raw(_CLEAR_ABOVE)

    def erase_eol(self) -> None:
        self.console.control(Control((ControlType.ERASE_IN_LINE, 0)))

    # Cursor ---------------------------------------------------------------

    def cursor(self, row: int, col: int) -> None:
        """Move to a 1-based ``row``/``col``; values below 1 are clamped."""
        row = max(row, 1)
        col = max(col, 1)
        self.console.control(Control.move_to(col - 1, row - 1))

    def cursor_up(self, n: int = 1) -> None:
        self.console.control(Control((ControlType.CURSOR_UP, n)))

    def cursor_down(self, n: int = 1) -> None:
        self.console.control(Control((ControlType.CURSOR_DOWN, n)))

    def cursor_right(self, n: int = 1) -> None:
        self.console.control(Control((ControlType.CURSOR_FORWARD, n)))

    def cursor_left(self, n: int = 1) -> None:
        self.console.control(Control((ControlType.CURSOR_BACKWARD, n)))

    def save_cursor(self) -> None:
        self._raw(_SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self._raw(_RESTORE_CURSOR)

    def hide_cursor(self) -> None:
        self.console.control(Control.show_cursor(False))

    def show_cursor(self) -> None:
        self.console.control(Control.show_cursor(True))

    # Text -----------------------------------------------------------------

    def underlined(self, text: str) -> None:
        self.console.print(text, style="underline", end="", markup=False, highlight=False)

    def bolded(self, text: str) -> None:
        self.console.print(text, style="bold", end="", markup=False, highlight=False)

    def bold(self) -> None:
        self._raw(_BOLD_ON)

    def bold_off(self) -> None:
        self._raw(_BOLD_OFF)

    def color(self, style: str, *args: Any) -> None:
        """Print ``args`` (no separator, no newline) in a Rich ``style``."""
        self.console.print(*args, style=style, sep="", end="", markup=False, highlight=False)

    def red(self, *args: Any) -> None:
        self.color("red", *args)

    def green(self, *args: Any) -> None:
        self.color("green", *args)

    def yellow(self, *args: Any) -> None:
        self.color("yellow", *args)

    def purple(self, *args: Any) -> None:
        self.color("magenta", *args)

    def cyan(self, *args: Any) -> None:
        self.color("cyan", *args)

    def bright_red(self, *args: Any) -> None:
        self.color("bright_red", *args)

    def bright_green(self, *args: Any) -> None:
        self.color("bright_green", *args)

    def bright_yellow(self, *args: Any) -> None:
        self.color("bright_yellow", *args)

    def bright_purple(self, *args: Any) -> None:
        self.color("bright_magenta", *args)

    def bright_cyan(self, *args: Any) -> None:
        self.color("bright_cyan", *args)

    def bright_white(self, *args: Any) -> None:
        self.color("bright_white", *args)

    # Progress -------------------------------------------------------------

    def show_progress_at(
        self, style: ProgressStyle | int, row: int, title: str, percent: int
    ) -> None:
        """Draw one progress line at ``row``: glyph, percentage and ``title``.

        The glyph advances with ``percent``; at 100 the line ends with
        ``✓ OK``. Percentages above 100 are reported and not drawn.
        """

        if percent < 0:
            raise ValueError(f"percent cannot be negative, got {percent}")
        if percent > 100:
            logger.warning("progress '%s': percent %d > 100%%", title, percent)
            return

        glyphs = PROGRESS_GLYPHS[_coerce_style(style)]
        done = "✓ OK" if percent == 100 else ""
        indicator = glyphs[percent % len(glyphs)]

        self.hide_cursor()
        self.cursor(row, 0)
        self.console.print(
            progress_line(indicator, percent, done, title), markup=False, highlight=False
        )
        self.show_cursor()

    def _raw(self, sequence: str) -> None:
        console = self.console
        if not console.is_terminal or console.is_dumb_terminal:
            return
        console.file.write(sequence)
        console.file.flush()


def progress_line(indicator: str, percent: int, done: str, title: str) -> str:
    return f"{indicator} {percent:02d}%/100% {done:>4} {title}"


def progress_bar(console: Console | None = None) -> Progress:
    """Rich progress bar for multi-step work, styled like the CLI's other bars."""

    return Progress(
        SpinnerColumn(),
        BarColumn(),
        TextColumn("{task.description}"),
        TimeElapsedColumn(),
        console=console,
    )


def _coerce_style(style: ProgressStyle | int) -> ProgressStyle:
    # unknown styles fall back to the first one
    try:
        return ProgressStyle(style)
    except ValueError:
        return ProgressStyle.BRAILLE_ROTATE
