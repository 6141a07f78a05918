"""A bounded FIFO queue and a linked LIFO stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue at capacity."""


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


class StackEmptyError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedQueue:
    """First-in first-out queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError(f"queue is full ({self.capacity} items)")
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def reversed_items(self) -> list[Any]:
        """Drain the queue through a stack, returning its items last to first."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        stack = list(self._items)
        self._items.clear()
        return stack[::-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class _Node:
    value: Any
    below: _Node | None


class LinkedStack:
    """Last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size