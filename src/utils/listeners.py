"""Synchronous listener registry used for change and engine notifications."""

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

Unsubscribe = Callable[[], None]


class ListenerSet(Generic[T]):
    """Ordered set of callbacks invoked synchronously on ``emit``.

    ``subscribe`` returns an unsubscribe callable that is safe to call more
    than once. A failing listener is logged and does not stop the others.
    """

    def __init__(self, name: str = "listeners"):
        self._name = name
        self._listeners: list[Callable[[T], None]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Callable[[T], None]) -> Unsubscribe:
        self._listeners.append(listener)
        released = False

        def unsubscribe() -> None:
            nonlocal released
            if released:
                return
            released = True
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def emit(self, value: T) -> None:
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Listener failed", extra={"channel": self._name})

    def clear(self) -> None:
        self._listeners.clear()
