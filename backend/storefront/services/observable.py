"""
Minimal subscribe/notify base for stateful components.
"""
import logging
from typing import Callable, List

log = logging.getLogger("observable")


class Observable:
    """Calls every subscriber synchronously after each state change."""

    def __init__(self):
        self._subscribers: List[Callable] = []

    def subscribe(self, callback: Callable) -> Callable[[], None]:
        """Register `callback(component)`. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception as e:
                log.exception(f"{type(self).__name__} subscriber {callback!r} failed: {e}")
