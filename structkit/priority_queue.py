"""Max-priority queue of integers kept in sorted order."""

from __future__ import annotations

import bisect
from typing import Iterator, List, Optional, Sequence


class PriorityQueue:
    """A queue that always hands out its largest value first.

    Among equal values the most recently added one comes out first.
    """

    def __init__(self) -> None:
        # Ascending order; the front of the queue is the last item.
        self._items: List[int] = []

    def enqueue(self, value: int) -> None:
        """Add ``value`` ahead of every value not greater than it."""
        bisect.insort_right(self._items, value)

    def dequeue(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def display(self) -> str:
        """Return the values from front to rear, one per line."""
        return "".join(f"{value}\n" for value in self)


def main(argv: Optional[Sequence[str]] = None) -> int:
    queue = PriorityQueue()
    print()
    for value in (5, 9, 3, 4, 2, 17, 1):
        queue.enqueue(value)
    print(queue.display(), end="")
    for _ in range(7):
        print(queue.dequeue())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())