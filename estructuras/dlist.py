"""A doubly linked list with sorted insertion and lookup by equality."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked in both directions, with head and tail access."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
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

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, item: object) -> bool:
        return self._find_node(item) is not None

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, item: T) -> None:
        """Add an item at the tail."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, item: T) -> None:
        """Add an item at the head."""
        node = _Node(item)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_sorted(self, item: T) -> None:
        """Insert an item before the first element not smaller than it.

        The list is assumed to be in ascending order already.
        """
        if self._head is None or self._head.value > item:
            self.prepend(item)
            return
        current = self._head
        while current.next is not None and current.next.value < item:
            current = current.next
        node = _Node(item)
        node.prev = current
        node.next = current.next
        if current.next is not None:
            current.next.prev = node
        else:
            self._tail = node
        current.next = node
        self._size += 1

    def remove(self, item: T) -> None:
        """Remove the first element equal to ``item``; raise ValueError if absent."""
        node = self._find_node(item)
        if node is None:
            raise ValueError(f"{item!r} is not in the list")
        self._unlink(node)

    def pop_first(self) -> T:
        """Remove and return the head element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._unlink(node)
        return node.value

    def pop_last(self) -> T:
        """Remove and return the tail element."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._unlink(node)
        return node.value

    def find(self, item: T) -> Optional[T]:
        """Return the stored element equal to ``item``, or None."""
        node = self._find_node(item)
        return None if node is None else node.value

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def _find_node(self, item: object) -> Optional[_Node[T]]:
        node = self._head
        while node is not None:
            if node.value == item:
                return node
            node = node.next
        return None

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.next = node.prev = None
        self._size -= 1