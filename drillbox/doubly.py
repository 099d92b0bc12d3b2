"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list; positions are numbered from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value after the last one."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add a value before the first one."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
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
        previous = self._head
        for _ in range(position - 2):
            assert previous is not None
            previous = previous.next
        assert previous is not None and previous.next is not None
        node = _Node(value, prev=previous, next=previous.next)
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if there is none."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} not found in list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"