"""Shared data structures consumed by the CLI and the question widgets."""

from .config import PROGRESS_STYLES, ConsoleConfig

__all__ = ["PROGRESS_STYLES", "ConsoleConfig"]
