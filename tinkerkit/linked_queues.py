"""A queue, a double-ended queue and a stack built on linked nodes."""

from __future__ import annotations

from typing import Any, Optional

from .linked_list import Node


class EmptyContainerError(IndexError):
    """Raised when reading from an empty queue, deque or stack."""


class LinkedQueue:
    """A first-in, first-out queue over a singly linked chain."""

    def __init__(self) -> None:
        self._front: Optional[Node] = None
        self._rear: Optional[Node] = None
        self._size = 0

    def enqueue(self, data: Any) -> None:
        node = Node(data)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise EmptyContainerError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._front is None:
            raise EmptyContainerError("Queue is empty")
        return self._front.data

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size


class LinkedDeque:
    """A double-ended queue over a singly linked chain."""

    def __init__(self) -> None:
        self._front: Optional[Node] = None
        self._rear: Optional[Node] = None
        self._size = 0

    def enqueue_front(self, data: Any) -> None:
        node = Node(data, self._front)
        if self._front is None:
            self._rear = node
        self._front = node
        self._size += 1

    def enqueue_rear(self, data: Any) -> None:
        node = Node(data)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue_front(self) -> Any:
        if self._front is None:
            raise EmptyContainerError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def dequeue_rear(self) -> Any:
        if self._rear is None:
            raise EmptyContainerError("Queue is empty")
        data = self._rear.data
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            before = self._front
            while before.next is not self._rear:
                before = before.next
            before.next = None
            self._rear = before
        self._size -= 1
        return data

    def peek_front(self) -> Any:
        if self._front is None:
            raise EmptyContainerError("Queue is empty")
        return self._front.data

    def peek_rear(self) -> Any:
        if self._rear is None:
            raise EmptyContainerError("Queue is empty")
        return self._rear.data

    def is_empty(self) -> bool:
        return self._front is None

    def __len__(self) -> int:
        return self._size


class LinkedStack:
    """A last-in, first-out stack over a singly linked chain."""

    def __init__(self) -> None:
        self._top: Optional[Node] = None
        self._size = 0

    def push(self, data: Any) -> None:
        self._top = Node(data, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise EmptyContainerError("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise EmptyContainerError("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size