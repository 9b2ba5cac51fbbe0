"""LIFO stack and FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack. Iteration runs from the top down."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def push(self, item: T) -> None:
        """Put an item on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items


class Queue(Generic[T]):
    """A first-in, first-out queue. Iteration runs from front to rear."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: Deque[T] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def enqueue(self, item: T) -> None:
        """Add an item at the rear."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items