"""A separately chained hash table whose buckets are doubly linked lists."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from estructuras.dlist import DoublyLinkedList

T = TypeVar("T")

HashFunction = Callable[[T, int], int]


class HashTable(Generic[T]):
    """A fixed number of buckets, each chaining the items that hash to it.

    ``hash_function(item, table_size)`` picks the bucket; its result is
    reduced modulo the number of buckets.
    """

    def __init__(self, buckets: int, hash_function: HashFunction) -> None:
        if buckets <= 0:
            raise ValueError("a hash table needs at least one bucket")
        if not callable(hash_function):
            raise TypeError("hash_function must be callable")
        self._hash = hash_function
        self._buckets: List[DoublyLinkedList[T]] = [
            DoublyLinkedList() for _ in range(buckets)
        ]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket

    def __contains__(self, item: object) -> bool:
        return item in self._bucket_for(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(buckets={len(self._buckets)}, items={len(self)})"

    def insert(self, item: T) -> None:
        """Add ``item`` at the end of its bucket."""
        self._bucket_for(item).append(item)

    def remove(self, item: T) -> None:
        """Remove the first stored item equal to ``item``; raise ValueError if absent."""
        self._bucket_for(item).remove(item)

    def find(self, item: T) -> Optional[T]:
        """Return the stored item equal to ``item``, or None."""
        return self._bucket_for(item).find(item)

    def bucket_sizes(self) -> List[int]:
        """Number of items in each bucket, in bucket order."""
        return [len(bucket) for bucket in self._buckets]

    def entries(self) -> List[List[T]]:
        """The contents of every bucket, in bucket order."""
        return [list(bucket) for bucket in self._buckets]

    def report(self) -> str:
        """A line per bucket with its size, then the size of the longest one."""
        sizes = self.bucket_sizes()
        lines = [f"bucket[{index}]: {size}" for index, size in enumerate(sizes)]
        lines.append(f"Longest was: {max(sizes)}")
        return "\n".join(lines)

    def _bucket_for(self, item: object) -> DoublyLinkedList[T]:
        index = self._hash(item, len(self._buckets)) % len(self._buckets)
        return self._buckets[index]