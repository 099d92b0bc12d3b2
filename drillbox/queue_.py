"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class QueueEmptyError(IndexError):
    """Raised when taking a value from an empty queue."""


class Queue:
    """FIFO queue: values leave in the order they were added."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"