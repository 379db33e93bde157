"""Doubly linked list of integers with an instrumented bubble sort."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _DNode:
    value: int
    next: Optional["_DNode"] = None
    prev: Optional["_DNode"] = None


class DoublyLinkedList:
    """A doubly linked list whose new elements go to the front by default."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._length = 0
        tail: Optional[_DNode] = None
        for value in values:
            node = _DNode(value, None, tail)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._length += 1

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        node = _DNode(value, self._head, None)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        self._length += 1

    def sorted_insert(self, value: int) -> None:
        """Insert ``value`` before the first element not smaller than it."""
        node = _DNode(value)
        self._length += 1
        previous: Optional[_DNode] = None
        current = self._head
        while current is not None and current.value < value:
            previous = current
            current = current.next
        node.prev = previous
        node.next = current
        if current is not None:
            current.prev = node
        if previous is None:
            self._head = node
        else:
            previous.next = node

    def remove(self) -> Optional[int]:
        """Remove the first element and return it, or None if the list is empty."""
        if self._head is None:
            return None
        removed = self._head
        self._head = removed.next
        if self._head is not None:
            self._head.prev = None
        self._length -= 1
        return removed.value

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        tail: Optional[_DNode] = None
        for tail in self._nodes():
            pass
        node = tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def sort(self) -> int:
        """Bubble-sort the list in place; return the number of node visits.

        Each pass stops just past the position of the previous pass's last swap.
        """
        if self._head is None:
            return 0
        operations = 0
        bound: Optional[int] = None
        swapped = True
        while swapped:
            swapped = False
            visited = 0
            since_swap = 0
            node = self._head
            while node is not None:
                if node.next is not None and node.value > node.next.value:
                    node.value, node.next.value = node.next.value, node.value
                    swapped = True
                    since_swap = 0
                since_swap += 1
                visited += 1
                operations += 1
                if bound is not None and visited > bound:
                    break
                node = node.next
            bound = visited - since_swap
        return operations

    def time_sorted(self) -> timedelta:
        """Sort the list and return how long the sort took."""
        start = time.perf_counter()
        self.sort()
        return timedelta(seconds=time.perf_counter() - start)

    def is_sorted(self) -> bool:
        """Return True if no element is greater than the one after it."""
        return all(
            node.next is None or node.value <= node.next.value
            for node in self._nodes()
        )