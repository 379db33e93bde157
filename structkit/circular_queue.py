"""FIFO queue stored as a circular singly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None


class CircularQueue:
    """A queue whose last node links back to the first.

    Only the rear node is kept; the front is always ``rear.next``.
    """

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._length = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> int:
        """Remove and return the front value.

        Raises IndexError if the queue is empty.
        """
        if self._rear is None:
            raise IndexError("dequeue from an empty queue")
        front = self._rear.next
        assert front is not None
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._length -= 1
        return front.value

    def __iter__(self) -> Iterator[int]:
        rear = self._rear
        if rear is None:
            return
        node = rear.next
        while node is not None:
            yield node.value
            if node is rear:
                break
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def display(self) -> str:
        """Return a listing of the queue from front to rear; empty if no values."""
        if self._rear is None:
            return ""
        body = "".join(f"{value}\n" for value in self)
        return f"Beggining of Queue\n{body}End"


def main(argv: Optional[Sequence[str]] = None) -> int:
    queue = CircularQueue()
    queue.enqueue(5)
    queue.enqueue(6)
    sys.stdout.write(queue.display())
    queue.dequeue()
    if queue:
        sys.stdout.write("\n~\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())