"""A doubly linked list with forward and backward traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class _Link:
    data: Any
    prev: Optional[_Link] = None
    next: Optional[_Link] = None


class DoublyLinkedList:
    """A list of values linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _node_at(self, index: int) -> _Link:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_at_end(self, data: Any) -> None:
        node = _Link(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_beginning(self, data: Any) -> None:
        node = _Link(data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_position(self, data: Any, pos: int) -> None:
        """Insert so that ``data`` ends up at index ``pos`` (0 to ``len``)."""
        if pos < 0 or pos > self._size:
            raise IndexError("Position not found")
        if pos == 0:
            self.insert_at_beginning(data)
        elif pos == self._size:
            self.insert_at_end(data)
        else:
            after = self._node_at(pos)
            node = _Link(data, prev=after.prev, next=after)
            after.prev.next = node
            after.prev = node
            self._size += 1

    def delete_at(self, pos: int) -> Any:
        """Remove the value at index ``pos`` and return it."""
        if pos < 0 or pos >= self._size:
            raise IndexError("Position not found")
        node = self._node_at(pos)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.data

    def reverse(self) -> None:
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def update(self, key: Any, data: Any) -> None:
        """Replace the first value equal to ``key``."""
        node = self._head
        while node is not None:
            if node.data == key:
                node.data = data
                return
            node = node.next
        raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size