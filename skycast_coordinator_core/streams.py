"""Output event streams for coordinator results.

Streams are synchronous publish/subscribe relays: ``emit`` calls every
subscriber in subscription order. There is no replay; values emitted before
a subscription are not delivered to it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class EventStream(Generic[T]):
    """Hot stream of values published by a coordinator."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: list[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a subscriber.

        Returns:
            Callable that removes the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def emit(self, value: T) -> None:
        """Deliver a value to every subscriber.

        A failing subscriber is logged and does not affect the others.
        """
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception as err:
                _LOGGER.exception(
                    "[%s] Stream subscriber error: %s", self.name, err
                )

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class StreamRecorder(Generic[T]):
    """Subscriber that keeps emitted values in a bounded buffer.

    Intended for tests and dev tools. Oldest values are evicted first.
    """

    def __init__(self, stream: EventStream[T], max_size: int = 1000) -> None:
        self._buffer: list[T] = []
        self._max_size = max_size
        self._unsubscribe = stream.subscribe(self._record)

    def _record(self, value: T) -> None:
        if len(self._buffer) >= self._max_size:
            self._buffer.pop(0)
        self._buffer.append(value)

    @property
    def values(self) -> list[T]:
        """Get all recorded values."""
        return list(self._buffer)

    def last(self, n: int = 1) -> list[T]:
        """Get the last N values."""
        return self._buffer[-n:]

    def clear(self) -> None:
        """Clear the buffer."""
        self._buffer.clear()

    def detach(self) -> None:
        """Stop recording."""
        self._unsubscribe()
