"""
Binary min-heap keyed by a caller-supplied function.

Unlike heapq, the ordering key is read from the items on every comparison
instead of being frozen into a tuple at push time, and the sift rules are
fixed so that tie-breaks are reproducible:

- sift up only while the child is strictly smaller than its parent
- sift down prefers the left child unless the right child is strictly
  smaller, and swaps only when that child is strictly smaller than the parent
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from gridpath.errors import EmptyQueue

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-heap over items ordered by ``key(item)``.

    Membership tests are linear: contains() scans the backing list by
    identity. Callers checking membership once per neighbor should expect
    quadratic behavior on large frontiers.
    """

    def __init__(self, key: Callable[[T], float]) -> None:
        """
        Args:
            key: Returns the priority of an item; lower dequeues first
        """
        self._key = key
        self._data: list[T] = []

    @property
    def count(self) -> int:
        """Number of queued items."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __iter__(self) -> Iterator[T]:
        """Iterate current contents in heap order without mutating the queue."""
        return iter(list(self._data))

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def contains(self, item: object) -> bool:
        return any(queued is item for queued in self._data)

    def to_list(self) -> list[T]:
        """Snapshot of the backing heap array."""
        return list(self._data)

    def clear(self) -> None:
        self._data.clear()

    def peek(self) -> T:
        """
        Return the minimum item without removing it.

        Raises:
            EmptyQueue: If the queue is empty
        """
        if not self._data:
            raise EmptyQueue("peek() on an empty priority queue")
        return self._data[0]

    def enqueue(self, item: T) -> None:
        """Add an item and restore heap order."""
        data = self._data
        data.append(item)
        child = len(data) - 1

        while child > 0:
            parent = (child - 1) // 2
            if not self._key(data[child]) < self._key(data[parent]):
                break
            data[child], data[parent] = data[parent], data[child]
            child = parent

    def dequeue(self) -> T:
        """
        Remove and return the minimum item.

        Raises:
            EmptyQueue: If the queue is empty
        """
        data = self._data
        if not data:
            raise EmptyQueue("dequeue() on an empty priority queue")

        front = data[0]
        last = data.pop()
        if not data:
            return front
        data[0] = last

        last_index = len(data) - 1
        parent = 0
        while True:
            child = parent * 2 + 1
            if child > last_index:
                break

            right = child + 1
            if right <= last_index and self._key(data[right]) < self._key(data[child]):
                child = right

            if not self._key(data[child]) < self._key(data[parent]):
                break

            data[parent], data[child] = data[child], data[parent]
            parent = child

        return front

    def __repr__(self) -> str:
        return f"PriorityQueue(count={len(self._data)})"
