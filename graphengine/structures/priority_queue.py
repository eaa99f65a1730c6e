"""Binary-heap min-priority queue without decrease-key.

Callers simulate decrease-key by inserting a fresh entry for the item and
discarding stale entries on extraction: an extracted entry whose key does not
match the caller's authoritative value for that item (a distance map, tree
membership, ...) is ignored.

Each entry carries a monotonically increasing insertion stamp, so entries
with equal keys are extracted in insertion order and items never need to be
comparable.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Generic, List, Tuple, TypeVar

from graphengine.types.base import Weight

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue of ``(key, item)`` pairs with FIFO tie-breaking."""

    def __init__(self) -> None:
        self._heap: List[Tuple[Weight, int, T]] = []
        self._stamp = count()

    def insert(self, key: Weight, item: T) -> None:
        heappush(self._heap, (key, next(self._stamp), item))

    def extract_min(self) -> Tuple[Weight, T]:
        """Remove and return the ``(key, item)`` pair with the smallest key.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        key, _stamp, item = heappop(self._heap)
        return key, item

    def peek_min(self) -> Tuple[Weight, T]:
        """Return the smallest ``(key, item)`` pair without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek_min from an empty priority queue")
        key, _stamp, item = self._heap[0]
        return key, item

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
