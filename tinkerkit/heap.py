"""A growable binary max-heap stored in an array."""

from __future__ import annotations

from typing import Any, Optional


class MaxHeap:
    """A max-heap that doubles its capacity when it runs out of room."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._array: list[Any] = []

    def parent(self, i: int) -> Optional[int]:
        """Index of the parent of ``i``, or ``None`` for the root or a bad index."""
        if i <= 0 or i >= len(self._array):
            return None
        return (i - 1) // 2

    def left_child(self, i: int) -> Optional[int]:
        left = 2 * i + 1
        return left if left < len(self._array) else None

    def right_child(self, i: int) -> Optional[int]:
        right = 2 * i + 2
        return right if right < len(self._array) else None

    def get_max(self) -> Any:
        if not self._array:
            raise IndexError("heap is empty")
        return self._array[0]

    def insert(self, data: Any) -> None:
        if len(self._array) == self.capacity:
            self.capacity *= 2
        self._array.append(data)
        i = len(self._array) - 1
        while i > 0 and data > self._array[(i - 1) // 2]:
            self._array[i] = self._array[(i - 1) // 2]
            i = (i - 1) // 2
        self._array[i] = data

    def _percolate_down(self, i: int) -> None:
        array = self._array
        while True:
            largest = i
            for child in (self.left_child(i), self.right_child(i)):
                if child is not None and array[child] > array[largest]:
                    largest = child
            if largest == i:
                return
            array[i], array[largest] = array[largest], array[i]
            i = largest

    def delete_max(self) -> Any:
        """Remove and return the largest value."""
        if not self._array:
            raise IndexError("heap is empty")
        top = self._array[0]
        last = self._array.pop()
        if self._array:
            self._array[0] = last
            self._percolate_down(0)
        return top

    def __len__(self) -> int:
        return len(self._array)