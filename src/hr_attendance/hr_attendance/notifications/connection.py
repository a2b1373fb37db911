from __future__ import annotations

import queue
import uuid
from typing import Iterator, Optional, Protocol, Tuple


class Connection(Protocol):
    """Anything the relay can push an event to."""

    def emit(self, event: str, payload: dict) -> None:
        raise NotImplementedError


class ConnectionClosed(Exception):
    pass


class QueueConnection:
    """In-process connection drained by a streaming response."""

    def __init__(self, *, maxsize: int = 100):
        self.id = uuid.uuid4().hex
        self._queue: "queue.Queue[Tuple[str, dict]]" = queue.Queue(maxsize=maxsize)
        self._closed = False

    def emit(self, event: str, payload: dict) -> None:
        if self._closed:
            raise ConnectionClosed(self.id)
        try:
            self._queue.put_nowait((event, payload))
        except queue.Full:
            raise ConnectionClosed(f"{self.id}: client is not draining events") from None

    def close(self) -> None:
        self._closed = True

    def next_event(self, timeout: float) -> Optional[Tuple[str, dict]]:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def events(self, *, timeout: float) -> Iterator[Optional[Tuple[str, dict]]]:
        """Yield queued events, or None after each idle ``timeout``."""
        while not self._closed:
            yield self.next_event(timeout)
