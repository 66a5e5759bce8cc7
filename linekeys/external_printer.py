"""A bounded queue of messages to print above the line being edited."""

from __future__ import annotations

import queue
from typing import Generic, TypeVar

T = TypeVar("T")

EXTERNAL_PRINTER_DEFAULT_CAPACITY = 20


class ExternalPrinter(Generic[T]):
    """Collects lines from other threads; the editor prints them while editing."""

    def __init__(self, max_cap: int = EXTERNAL_PRINTER_DEFAULT_CAPACITY) -> None:
        if max_cap < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = max_cap
        self._queue: queue.Queue[T] = queue.Queue(maxsize=max_cap)

    def print(self, line: T) -> None:
        """Queue ``line``; blocks while the queue is full."""
        self._queue.put(line)

    def get_line(self) -> T | None:
        """Return the oldest queued line, or None without waiting."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> list[T]:
        """Remove and return every queued line, oldest first."""
        lines: list[T] = []
        while True:
            try:
                lines.append(self._queue.get_nowait())
            except queue.Empty:
                return lines