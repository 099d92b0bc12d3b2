"""A singly linked list of values with stack-style and positional operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list; positions are numbered from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value after the last one."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add a value before the first one."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert(self, position: int, value: Any) -> None:
        """Insert a value so that it ends up at ``position`` (1 to ``len + 1``)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"insertion at position {position} is not possible in a list of {self._size}"
            )
        if position == 1:
            self.prepend(value)
            return
        if position == self._size + 1:
            self.append(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if there is none."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            raise ValueError(f"{value!r} not found in list")
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._size -= 1

    def pop(self) -> Any:
        """Remove and return the first value, as a stack pop."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def nth_from_end(self, n: int) -> Any:
        """Return the ``n``-th value counting from the end, where 1 is the last."""
        if not 1 <= n <= self._size:
            raise IndexError(f"no value at index {n} from the end")
        return self._node_at(self._size - n + 1).value

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"