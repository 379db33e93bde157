"""Plain first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterator, Optional, Sequence


class FifoQueue:
    """A first-in, first-out queue of arbitrary values."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value.

        Raises IndexError if the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def display(self) -> str:
        """Return a new line followed by each value with one decimal place."""
        return "\n" + "".join(f"{value:.1f} " for value in self._items)

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()


def main(argv: Optional[Sequence[str]] = None) -> int:
    queue = FifoQueue()
    for value in (5.1, 6.1, 7.1, 8.2, 9.6):
        queue.enqueue(value)
    for _ in range(3):
        print(f"{queue.dequeue():.1f} ", end="")
    print(queue.display(), end="")
    queue.enqueue(55.0)
    queue.clear()
    print("\nQueue is clean")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())