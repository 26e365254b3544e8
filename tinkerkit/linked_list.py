"""A singly linked list with merge sort and helpers over raw node chains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    data: Any
    next: Optional[Node] = None


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the first of the two."""
    if head is None:
        return None
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_sorted(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Merge two ascending chains; on equal values the right node comes first."""
    dummy = Node(None)
    tail = dummy
    while left is not None and right is not None:
        if left.data < right.data:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def merge_sort_nodes(head: Optional[Node]) -> Optional[Node]:
    """Sort a chain ascending and return its new head."""
    if head is None or head.next is None:
        return head
    middle = find_middle(head)
    right = middle.next
    middle.next = None
    return merge_sorted(merge_sort_nodes(head), merge_sort_nodes(right))


class LinkedList:
    """A singly linked list of arbitrary values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert_at_end(self, data: Any) -> None:
        node = Node(data)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def insert_at_beginning(self, data: Any) -> None:
        self.head = Node(data, self.head)

    def insert_at_position(self, data: Any, pos: int) -> None:
        """Insert so that ``data`` ends up at index ``pos``."""
        if pos < 0:
            raise IndexError("Position not found")
        if pos == 0:
            self.insert_at_beginning(data)
            return
        if self.head is None:
            raise IndexError("Position not found")
        prev = self.head
        for _ in range(pos - 1):
            if prev.next is None:
                raise IndexError("Position not found")
            prev = prev.next
        prev.next = Node(data, prev.next)

    def delete(self, key: Any) -> bool:
        """Remove the first node holding ``key``; tell whether one was found."""
        prev: Optional[Node] = None
        for node in self._nodes():
            if node.data == key:
                if prev is None:
                    self.head = node.next
                else:
                    prev.next = node.next
                return True
            prev = node
        return False

    def update(self, key: Any, new_data: Any) -> None:
        """Replace the first value equal to ``key``."""
        for node in self._nodes():
            if node.data == key:
                node.data = new_data
                return
        raise KeyError(key)

    def reverse(self) -> None:
        prev: Optional[Node] = None
        current = self.head
        while current is not None:
            current.next, prev, current = prev, current, current.next
        self.head = prev

    def middle(self) -> Any:
        """Return the middle value; for an even length, the first of the two."""
        node = find_middle(self.head)
        if node is None:
            raise ValueError("list is empty")
        return node.data

    def sort(self) -> None:
        """Sort the list ascending in place with merge sort."""
        self.head = merge_sort_nodes(self.head)

    def render(self, formatter: Callable[[Any], str] = str) -> str:
        """Join the values, each passed through ``formatter``, with spaces."""
        return " ".join(formatter(value) for value in self)

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())