"""Singly linked list of integers with an instrumented bubble sort."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list whose new elements go to the front by default."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._length = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._length += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        self._head = _Node(value, self._head)
        self._length += 1

    def insert_at(self, pos: int, value: int) -> None:
        """Insert ``value`` as the ``pos``-th element (1-based).

        A position past the end appends; positions below 2 insert right
        after the first element. An empty list simply gains the value.
        """
        node = _Node(value)
        self._length += 1
        if self._head is None:
            self._head = node
            return
        current = self._head
        step = 1
        while step < pos - 1 and current.next is not None:
            current = current.next
            step += 1
        node.next = current.next
        current.next = node

    def remove_first(self) -> Optional[int]:
        """Remove the first element and return it, or None if the list is empty."""
        if self._head is None:
            return None
        removed = self._head
        self._head = removed.next
        self._length -= 1
        return removed.value

    def remove_after(self, pos: int) -> Optional[int]:
        """Remove the element following the one at 0-based index ``pos``.

        Returns the removed value, or None when there is nothing to remove.
        """
        node = self._head
        for _ in range(pos):
            if node is None:
                break
            node = node.next
        if node is None or node.next is None:
            return None
        removed = node.next
        node.next = removed.next
        self._length -= 1
        return removed.value

    def search(self, value: int) -> Optional[int]:
        """Return the 0-based index of the first element equal to ``value``."""
        for index, node in enumerate(self._nodes()):
            if node.value == value:
                return index
        return None

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def sort(self) -> int:
        """Bubble-sort the list in place; return the number of comparisons made."""
        if self._head is None:
            return 0
        operations = 0
        limit = self._length - 1
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            compared = 0
            while node.next is not None and compared < limit:
                if node.value > node.next.value:
                    node.value, node.next.value = node.next.value, node.value
                    swapped = True
                operations += 1
                compared += 1
                node = node.next
            limit -= 1
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