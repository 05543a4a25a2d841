"""Logging configuration helpers."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .console_gate import GATE, is_prompt_active

LOGGER_NAME = "askpath"


class PromptAwareRichHandler(RichHandler):
    """Rich console handler that keeps quiet while a prompt waits for input.

    Records arriving during a prompt are queued and written once the last
    open prompt closes, so they never land in the middle of what the user
    is typing. The queue keeps the newest ``backlog`` records.
    """

    def __init__(self, *args, backlog: int = 200, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending: deque[logging.LogRecord] = deque(maxlen=backlog)
        GATE.on_release(self.flush_pending)

    def emit(self, record: logging.LogRecord) -> None:
        # queue first, then look at the gate: a release that lands after the
        # check flushes this record, one that landed before it is seen here
        self.acquire()
        try:
            self._pending.append(record)
            if not is_prompt_active():
                self.flush_pending()
        finally:
            self.release()

    def flush_pending(self) -> None:
        self.acquire()
        try:
            while self._pending:
                super().emit(self._pending.popleft())
        finally:
            self.release()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def close(self) -> None:
        GATE.remove_listener(self.flush_pending)
        super().close()


def configure_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Attach handlers to the ``askpath`` logger.

    Args:
        level: Name of the threshold level (``DEBUG``, ``INFO``...).
        log_file: Optional file that receives every record as it happens,
            prompt or not.
        console: Console for the Rich handler. Defaults to one on stderr.

    Returns:
        The configured ``askpath`` logger.
    """

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = PromptAwareRichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_build_formatter())
        logger.addHandler(file_handler)

    logger.setLevel(log_level)
    logger.propagate = False
    return logger


def _build_formatter() -> logging.Formatter:
    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    return logging.Formatter(fmt=fmt, datefmt=datefmt)
