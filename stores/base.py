import logging
from dataclasses import replace
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar('S')

Listener = Callable[[S], None]


class Store(Generic[S]):
    """
    Holds one immutable state snapshot and swaps it on every change.

    Listeners get each new snapshot. A failing listener is logged and skipped
    so it cannot break the store operation that triggered it.
    """

    def __init__(self, initial: S) -> None:
        self._state = initial
        self._listeners: list[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; call the returned function to unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes) -> S:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception(f"{type(self).__name__} listener failed")
        return self._state
