"""ANSI terminal gadgets built on the Rich console."""

from .control import (
    PROGRESS_GLYPHS,
    ProgressStyle,
    TerminalControl,
    progress_bar,
    progress_line,
)

__all__ = [
    "PROGRESS_GLYPHS",
    "ProgressStyle",
    "TerminalControl",
    "progress_bar",
    "progress_line",
]
