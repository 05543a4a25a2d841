"""Process-wide gate telling log output when the user is typing an answer."""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import Callable, Iterator

ReleaseListener = Callable[[], None]


class PromptGate:
    """Nesting counter of active prompts plus callbacks for when they all close.

    Listeners run on the thread that closes the outermost prompt, outside the
    gate's lock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._open = 0
        self._listeners: list[ReleaseListener] = []

    @contextmanager
    def hold(self) -> Iterator[None]:
        with self._lock:
            self._open += 1
        try:
            yield
        finally:
            with self._lock:
                self._open = max(0, self._open - 1)
                released = self._open == 0
                listeners = list(self._listeners) if released else []
            for listener in listeners:
                listener()

    @property
    def depth(self) -> int:
        with self._lock:
            return self._open

    def on_release(self, listener: ReleaseListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: ReleaseListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)


GATE = PromptGate()


@contextmanager
def prompt_gate() -> Iterator[None]:
    """Mark a blocking prompt as active for the duration of the block."""

    with GATE.hold():
        yield


def is_prompt_active() -> bool:
    return GATE.depth > 0
