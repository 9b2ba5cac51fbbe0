"""A singly linked list supporting head and tail insertion."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: "Optional[_Node[T]]" = None) -> None:
        self.value = value
        self.next = next_node


class SinglyLinkedList(Generic[T]):
    """A forward-linked list; appends and removals at the tail walk the list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, item: T) -> None:
        """Add an item at the end of the list."""
        node = _Node(item)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def prepend(self, item: T) -> None:
        """Add an item at the front of the list."""
        self._head = _Node(item, self._head)
        self._size += 1

    def pop_last(self) -> T:
        """Remove and return the last item; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            self._size -= 1
            return value
        previous = self._head
        current = self._head.next
        while current.next is not None:
            previous = current
            current = current.next
        previous.next = None
        self._size -= 1
        return current.value

    def count_less_than(self, value: Any) -> int:
        """Count the items strictly smaller than ``value``."""
        return sum(1 for item in self if item < value)

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._size = 0