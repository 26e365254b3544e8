"""A singly linked list whose last node links back to the first."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .linked_list import Node


class CircularList:
    """A circular singly linked list of arbitrary values.

    Only the tail is stored; the head is always ``tail.next``.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _link_after_tail(self, data: Any) -> Node:
        node = Node(data)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_end(self, data: Any) -> None:
        self._tail = self._link_after_tail(data)

    def insert_at_beginning(self, data: Any) -> None:
        self._link_after_tail(data)

    def insert_at_position(self, data: Any, pos: int) -> None:
        """Insert so that ``data`` ends up at index ``pos`` (0 to ``len``)."""
        if pos < 0 or pos > self._size:
            raise IndexError("Position not found")
        if pos == 0:
            self.insert_at_beginning(data)
        elif pos == self._size:
            self.insert_at_end(data)
        else:
            prev = self._tail.next
            for _ in range(pos - 1):
                prev = prev.next
            prev.next = Node(data, prev.next)
            self._size += 1

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; tell whether one was found."""
        if self._tail is None:
            return False
        prev = self._tail
        node = self._tail.next
        for _ in range(self._size):
            if node.data == key:
                if self._size == 1:
                    self._tail = None
                else:
                    prev.next = node.next
                    if node is self._tail:
                        self._tail = prev
                self._size -= 1
                return True
            prev, node = node, node.next
        return False

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        if not self._size:
            return "List is empty"
        return " ".join(str(value) for value in self)