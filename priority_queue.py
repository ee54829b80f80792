"""
Comparator-driven binary heap.

The heap never imposes its own ordering: a caller-supplied predicate
``comparator(a, b)`` answers "does a have strictly higher priority than b",
which decides min-heap vs max-heap semantics (or anything in between).

Storage is a flat list laid out as a complete binary tree:
parent(i) = (i - 1) // 2, left(i) = 2i + 1, right(i) = 2i + 2.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


class MinOrder:
    """Smaller elements first."""

    def __call__(self, a, b) -> bool:
        return a < b


class MaxOrder:
    """Larger elements first."""

    def __call__(self, a, b) -> bool:
        return a > b


class DistanceOrder:
    """
    Order node ids by a distance table held by reference.

    The table is owned by whoever builds the order (e.g. a shortest-path run)
    and may be lowered between heap operations. It must not change while a
    push or pop is in progress.
    """

    def __init__(self, distances: Sequence[float]) -> None:
        self.distances = distances

    def __call__(self, a: int, b: int) -> bool:
        return self.distances[a] < self.distances[b]


class IndexedBinaryHeap(Generic[T]):
    """
    Array-backed binary heap ordered by an external comparator.

    No deduplication: equal elements may coexist, which lazy-deletion
    callers rely on.
    """

    def __init__(self, comparator: Comparator) -> None:
        self._heap: List[T] = []
        self._comparator = comparator

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"IndexedBinaryHeap({self._heap!r})"

    # --- Layout helpers --------------------------------------------------------

    @staticmethod
    def _parent(idx: int) -> int:
        return (idx - 1) // 2

    @staticmethod
    def _left_child(idx: int) -> int:
        return 2 * idx + 1

    @staticmethod
    def _right_child(idx: int) -> int:
        return 2 * idx + 2

    def _compare(self, i: int, j: int) -> bool:
        return self._comparator(self._heap[i], self._heap[j])

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    # --- Sifting ---------------------------------------------------------------

    def _sift_up(self) -> None:
        idx = len(self._heap) - 1
        while idx > 0:
            parent = self._parent(idx)
            if not self._compare(idx, parent):
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self) -> None:
        idx = 0
        size = len(self._heap)
        while True:
            left = self._left_child(idx)
            right = self._right_child(idx)
            best = idx
            if left < size and self._compare(left, best):
                best = left
            if right < size and self._compare(right, best):
                best = right
            if best == idx:
                return
            self._swap(idx, best)
            idx = best

    # --- Public API ------------------------------------------------------------

    def push(self, value: T) -> int:
        """Insert value and return the new size."""
        self._heap.append(value)
        self._sift_up()
        return len(self._heap)

    def pop(self) -> Optional[T]:
        """
        Remove and return the top element, or None when the heap is empty.

        The root is swapped with the last slot, detached, and the element now
        at the root is sifted down toward whichever child is preferred.
        """
        if not self._heap:
            return None
        last = len(self._heap) - 1
        if last > 0:
            self._swap(0, last)
        value = self._heap.pop()
        if self._heap:
            self._sift_down()
        return value

    def peek(self) -> Optional[T]:
        """Top element without removing it, or None when empty."""
        if not self._heap:
            return None
        return self._heap[0]
