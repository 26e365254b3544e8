"""Bounded array-backed queues: a plain linear one and a circular one."""

from __future__ import annotations

from typing import Any, Iterator

DEFAULT_CAPACITY = 100


class QueueFullError(OverflowError):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


def _describe(queue: Any) -> str:
    if queue.is_empty():
        return "Queue is empty!"
    return "Queue elements are: " + " ".join(str(value) for value in queue)


class LinearQueue:
    """A queue over a fixed array whose slots are not reused until it drains.

    Once ``capacity`` values have been enqueued the queue reports full, even
    if some were dequeued since; it starts over only when emptied.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full!")
        self._slots.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def is_empty(self) -> bool:
        return not self._slots

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def display(self) -> str:
        """Describe the contents from front to rear."""
        return _describe(self)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])


class CircularQueue:
    """A queue over a fixed ring of slots that wraps around."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full!")
        if self.is_empty():
            self._front = 0
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = (self._front + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        return self._front == -1

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def display(self) -> str:
        """Describe the contents from front to rear."""
        return _describe(self)

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[(self._front + offset) % self.capacity]