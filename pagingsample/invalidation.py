"""Generation counter that tells list observers the table has changed."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

logger = logging.getLogger(__name__)

Observer = Callable[[int], None]


class InvalidationTracker:
    """Thread-safe change counter with observers.

    Each committed mutation bumps the generation. Observers are called with
    the new generation outside the lock.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._generation = 0
        self._observers: list[Observer] = []

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def observe(self, callback: Observer) -> Callable[[], None]:
        with self._lock:
            self._observers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return _unsubscribe

    def notify(self) -> int:
        with self._lock:
            self._generation += 1
            generation = self._generation
            observers = list(self._observers)

        for callback in observers:
            try:
                callback(generation)
            except Exception:
                logger.exception("List observer failed for generation %d", generation)
        return generation
