"""Binary heap whose entries can be changed in place through handles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class MutablePriorityQueue(Generic[T]):
    """Priority queue ordered by ``less``; the least element is on top.

    ``push`` returns a handle that stays valid until the element is popped,
    and can be used with ``value`` and ``update``. Handles of popped
    elements are reused by later pushes.
    """

    def __init__(self, less: Callable[[T, T], bool]) -> None:
        self._less = less
        self._elements: list[T] = []
        # 1-based heap of handles; slot 0 is unused.
        self._heap: list[int] = [-1]
        self._position: list[int] = []
        self._free: list[int] = []

    def __len__(self) -> int:
        return len(self._heap) - 1

    def push(self, value: T) -> int:
        """Add ``value`` and return its handle."""
        if self._free:
            handle = self._free.pop()
            self._elements[handle] = value
        else:
            handle = len(self._elements)
            self._elements.append(value)
            self._position.append(-1)
        self._position[handle] = len(self._heap)
        self._heap.append(handle)
        self._restore(self._position[handle])
        return handle

    def pop(self) -> T:
        """Remove and return the least element."""
        if not self:
            raise IndexError("pop from an empty priority queue")
        top = self._heap[1]
        result = self._elements[top]
        self._free.append(top)
        self._swap(1, len(self._heap) - 1)
        self._heap.pop()
        if self:
            self._sift_down(1)
        return result

    def top(self) -> T:
        """Return the least element without removing it."""
        return self._elements[self.top_handle()]

    def top_handle(self) -> int:
        """Return the handle of the least element."""
        if not self:
            raise IndexError("top of an empty priority queue")
        return self._heap[1]

    def value(self, handle: int) -> T:
        """Return the element stored under ``handle``."""
        return self._elements[handle]

    def update(self, handle: int, value: T) -> None:
        """Replace the element under ``handle`` and restore heap order."""
        self._elements[handle] = value
        self._restore(self._position[handle])

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        self._position[heap[a]], self._position[heap[b]] = (
            self._position[heap[b]],
            self._position[heap[a]],
        )
        heap[a], heap[b] = heap[b], heap[a]

    def _precedes(self, a: int, b: int) -> bool:
        return self._less(self._elements[self._heap[a]], self._elements[self._heap[b]])

    def _restore(self, index: int) -> None:
        if not self._sift_down(index):
            self._sift_up(index)

    def _sift_down(self, index: int) -> bool:
        moved = False
        size = len(self._heap)
        while True:
            left, right = 2 * index, 2 * index + 1
            best = index
            if left < size and self._precedes(left, best):
                best = left
            if right < size and self._precedes(right, best):
                best = right
            if best == index:
                return moved
            self._swap(best, index)
            index = best
            moved = True

    def _sift_up(self, index: int) -> None:
        while index != 1:
            parent = index // 2
            if not self._precedes(index, parent):
                break
            self._swap(index, parent)
            index = parent