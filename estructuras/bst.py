"""An unbalanced binary search tree without duplicates."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree ordered by ``<`` and ``>``; equal values are rejected."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self._in_order(self._root)

    def __contains__(self, value: object) -> bool:
        return self._find_node(value) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"

    def insert(self, value: T) -> bool:
        """Add ``value``; return False if an equal value is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def find(self, value: T) -> Optional[T]:
        """Return the stored value equal to ``value``, or None."""
        node = self._find_node(value)
        return None if node is None else node.value

    def remove(self, value: T) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        self._root = self._remove(self._root, value)
        self._size -= 1

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0

    def in_order(self) -> List[T]:
        """Values in left, root, right order (ascending)."""
        return list(self._in_order(self._root))

    def pre_order(self) -> List[T]:
        """Values in root, left, right order."""
        return list(self._pre_order(self._root))

    def post_order(self) -> List[T]:
        """Values in left, right, root order."""
        return list(self._post_order(self._root))

    def breadth_first(self) -> List[T]:
        """Values level by level, left to right."""
        result: List[T] = []
        pending = deque([self._root] if self._root is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.value)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def _find_node(self, value) -> Optional[_Node[T]]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _remove(self, node: Optional[_Node[T]], value: T) -> Optional[_Node[T]]:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._remove(node.left, value)
            return node
        if value > node.value:
            node.right = self._remove(node.right, value)
            return node
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
            return node
        return node.left if node.left is not None else node.right

    @classmethod
    def _in_order(cls, node: Optional[_Node[T]]) -> Iterator[T]:
        if node is not None:
            yield from cls._in_order(node.left)
            yield node.value
            yield from cls._in_order(node.right)

    @classmethod
    def _pre_order(cls, node: Optional[_Node[T]]) -> Iterator[T]:
        if node is not None:
            yield node.value
            yield from cls._pre_order(node.left)
            yield from cls._pre_order(node.right)

    @classmethod
    def _post_order(cls, node: Optional[_Node[T]]) -> Iterator[T]:
        if node is not None:
            yield from cls._post_order(node.left)
            yield from cls._post_order(node.right)
            yield node.value