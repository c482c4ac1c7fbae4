"""Explicit observer registries with handle-based unsubscribe."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscriptionHandle:
    """Opaque token returned by subscribe(), used to unsubscribe."""

    channel: str
    id: int


class ObserverRegistry:
    """
    Ordered set of callbacks for one notification channel.

    Callbacks are invoked in subscription order. Unsubscribing a handle
    that is unknown (or already removed) is a no-op.
    """

    def __init__(self, channel: str = "default") -> None:
        self.channel = channel
        self._callbacks: dict[int, Callable[..., Any]] = {}
        self._ids = itertools.count(1)

    def subscribe(self, callback: Callable[..., Any]) -> SubscriptionHandle:
        handle = SubscriptionHandle(self.channel, next(self._ids))
        self._callbacks[handle.id] = callback
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        """Remove a callback. Returns True if it was registered."""
        if handle.channel != self.channel:
            return False
        return self._callbacks.pop(handle.id, None) is not None

    def notify(self, *args: Any) -> None:
        """Call every subscriber with the given arguments."""
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._callbacks.values()):
            callback(*args)

    def clear(self) -> None:
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)
