"""A self-balancing AVL search tree without duplicates."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "height", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.height = 0
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return -1
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree(Generic[T]):
    """A search tree that keeps subtree heights within one of each other."""

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
        self._root, added = self._insert(self._root, value)
        if added:
            self._size += 1
        return added

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

    def height(self) -> int:
        """Height of the root: 0 for a single node, -1 for an empty tree."""
        return _height(self._root)

    def in_order(self) -> List[T]:
        """Values in ascending order."""
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

    def by_height(self) -> List[Tuple[T, int, int]]:
        """``(value, height, depth)`` for each node, right subtree first.

        This is the order of a sideways drawing of the tree, top line first.
        """
        return list(self._sideways(self._root, 0))

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

    def _insert(self, node: Optional[_Node[T]], value: T) -> Tuple[_Node[T], bool]:
        if node is None:
            return _Node(value), True
        if value < node.value:
            node.left, added = self._insert(node.left, value)
        elif value > node.value:
            node.right, added = self._insert(node.right, value)
        else:
            return node, False
        return (_rebalance(node) if added else node), added

    def _remove(self, node: Optional[_Node[T]], value: T) -> Optional[_Node[T]]:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        return _rebalance(node)

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

    @classmethod
    def _sideways(cls, node: Optional[_Node[T]], depth: int) -> Iterator[Tuple[T, int, int]]:
        if node is not None:
            yield from cls._sideways(node.right, depth + 1)
            yield node.value, node.height, depth
            yield from cls._sideways(node.left, depth + 1)