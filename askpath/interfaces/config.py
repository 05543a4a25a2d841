"""Configuration interfaces and data structures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PROGRESS_STYLES = ("braille-rotate", "braille-wave", "slashdot")


@dataclass(frozen=True)
class ConsoleConfig:
    """Runtime configuration for prompts, terminal output and logging."""

    version: str = "0.0.0"
    color: bool = True
    icon: str = "👉"
    progress_style: str = "braille-rotate"
    log_level: str = "WARNING"
    log_file: Path | None = None

    def __post_init__(self) -> None:
        if self.progress_style not in PROGRESS_STYLES:
            raise ValueError(
                f"progress_style must be one of {', '.join(PROGRESS_STYLES)}, "
                f"got {self.progress_style!r}"
            )
