"""Singly linked list with link-rewiring operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list whose operations move nodes rather than data."""

    def __init__(self, head: Node | None = None) -> None:
        self.head = head

    @classmethod
    def from_iterable(cls, values: Iterable) -> LinkedList:
        """Build a list holding ``values`` in the given order."""
        linked = cls()
        for value in reversed(list(values)):
            linked.push_front(value)
        return linked

    def push_front(self, value) -> None:
        """Insert a value at the head of the list."""
        self.head = Node(value, self.head)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _find(self, value) -> tuple[Node | None, Node | None]:
        previous, current = None, self.head
        while current is not None and current.data != value:
            previous, current = current, current.next
        return previous, current

    def swap_nodes(self, x, y) -> None:
        """Swap the first nodes holding ``x`` and ``y`` by relinking them.

        Nothing changes if the values are equal or either is missing.
        """
        if x == y:
            return
        prev_x, curr_x = self._find(x)
        prev_y, curr_y = self._find(y)
        if curr_x is None or curr_y is None:
            return
        if prev_x is not None:
            prev_x.next = curr_y
        else:
            self.head = curr_y
        if prev_y is not None:
            prev_y.next = curr_x
        else:
            self.head = curr_x
        curr_x.next, curr_y.next = curr_y.next, curr_x.next

    def rotate(self, k: int) -> None:
        """Rotate counter-clockwise so the ``k+1``-th node becomes the head.

        The list is left as it is when ``k`` is zero or not smaller than its length.
        """
        if k < 0:
            raise ValueError("k must not be negative")
        if k == 0:
            return
        kth = self.head
        for _ in range(k - 1):
            if kth is None:
                break
            kth = kth.next
        if kth is None:
            return
        tail = kth
        while tail.next is not None:
            tail = tail.next
        tail.next = self.head
        self.head = kth.next
        kth.next = None

    def detect_and_remove_loop(self) -> bool:
        """Find a loop with Floyd's method and cut it; return whether one existed."""
        slow = fast = self.head
        while slow is not None and fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                self._remove_loop(slow)
                return True
        return False

    def _remove_loop(self, loop_node: Node) -> None:
        length = 1
        probe = loop_node
        while probe.next is not loop_node:
            probe = probe.next
            length += 1
        behind = ahead = self.head
        for _ in range(length):
            ahead = ahead.next
        while ahead is not behind:
            behind = behind.next
            ahead = ahead.next
        while ahead.next is not behind:
            ahead = ahead.next
        ahead.next = None

    def middle(self):
        """Return the middle value; of two middles, the second."""
        if self.head is None:
            raise IndexError("middle of empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.data

    def reverse_between(self, start: int, end: int) -> None:
        """Reverse the nodes at 1-based positions ``start`` through ``end``."""
        if start < 1 or end < start:
            raise ValueError("positions must satisfy 1 <= start <= end")
        if end > len(self):
            raise ValueError("end lies beyond the list")
        before: Node | None = None
        first = self.head
        for _ in range(start - 1):
            before, first = first, first.next
        reversed_head: Node | None = None
        current = first
        for _ in range(end - start + 1):
            following = current.next
            current.next = reversed_head
            reversed_head, current = current, following
        first.next = current
        if before is None:
            self.head = reversed_head
        else:
            before.next = reversed_head

    def remove_nth_from_end(self, n: int):
        """Remove the ``n``-th node from the end and return its value.

        If ``n`` is not smaller than the length, the head is removed.
        """
        if self.head is None:
            raise IndexError("remove from empty list")
        if n < 1:
            raise ValueError("n must be at least 1")
        size = len(self)
        if n >= size:
            removed = self.head
            self.head = removed.next
            return removed.data
        node = self.head
        for _ in range(size - n - 1):
            node = node.next
        removed = node.next
        node.next = removed.next
        return removed.data