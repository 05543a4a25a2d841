"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Callable

import pytest
from rich.console import Console

from askpath.ask import Terminal, set_default_terminal


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), color_system=None, width=120)


@pytest.fixture
def scripted() -> Callable[..., Terminal]:
    """Build a terminal that reads the given lines and records its output."""

    def _build(*lines: str) -> Terminal:
        stream = StringIO("".join(f"{line}\n" for line in lines))
        return Terminal(
            console=Console(file=StringIO(), color_system=None, width=120),
            stream=stream,
        )

    return _build


@pytest.fixture(autouse=True)
def _reset_default_terminal():
    yield
    set_default_terminal(None)


@pytest.fixture(autouse=True)
def _reset_askpath_logger():
    """Undo ``configure_logging`` so caplog keeps seeing askpath records."""

    yield
    logger = logging.getLogger("askpath")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
