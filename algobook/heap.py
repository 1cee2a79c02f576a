"""Array-backed binary max-heap."""

from __future__ import annotations

from typing import Iterable


class MaxHeap:
    """Binary max-heap of comparable values."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items: list = []
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value) -> None:
        heap = self._items
        heap.append(value)
        here = len(heap) - 1
        while here and heap[(here - 1) // 2] < heap[here]:
            up = (here - 1) // 2
            heap[up], heap[here] = heap[here], heap[up]
            here = up

    def peek(self):
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def pop(self):
        """Remove and return the largest value."""
        heap = self._items
        if not heap:
            raise IndexError("pop from an empty heap")
        top = heap[0]
        last = heap.pop()
        if not heap:
            return top
        heap[0] = last
        here = 0
        size = len(heap)
        while True:
            left, right = 2 * here + 1, 2 * here + 2
            nxt = here
            if left < size and heap[left] > heap[nxt]:
                nxt = left
            if right < size and heap[right] > heap[nxt]:
                nxt = right
            if nxt == here:
                break
            heap[here], heap[nxt] = heap[nxt], heap[here]
            here = nxt
        return top