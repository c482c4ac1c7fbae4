"""Debounced re-parse scheduling with an injectable clock."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.3


class ManualClock:
    """Virtual monotonic clock for tests and simulations."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ReparseScheduler:
    """
    Collect changed document paths and release them after a quiet period.

    Every schedule() call re-arms a single deadline. Once the deadline
    passes, run_pending() hands over every path that changed during the
    window, not only the most recent one.
    """

    def __init__(
        self,
        delay: float = DEFAULT_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay = delay
        self._clock = clock
        self._pending: dict[str, None] = {}  # insertion-ordered set
        self._deadline: float | None = None

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def schedule(self, path: str) -> None:
        self._pending[path] = None
        self._deadline = self._clock() + self.delay

    def is_due(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    def run_pending(self, callback: Callable[[str], None]) -> list[str]:
        """Fire callback(path) for every pending path if the deadline has passed."""
        if not self.is_due():
            return []
        paths = list(self._pending)
        self.cancel()
        logger.debug("Reparsing %d changed documents", len(paths))
        for path in paths:
            callback(path)
        return paths

    def cancel(self) -> None:
        self._pending.clear()
        self._deadline = None
