"""Bounded last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence

MAX_SIZE = 10


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from a stack that holds nothing."""


class Stack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise StackFullError if there is no room."""
        if self.is_full():
            raise StackFullError("Stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise StackEmptyError if empty."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"

    def format_all(self) -> str:
        """Return the values from top to bottom, each followed by a space."""
        if not self._items:
            return "Stack is mt!"
        return "".join(f"{value} " for value in self)


def main(argv: Optional[Sequence[str]] = None) -> int:
    numbers = Stack()
    for value in (5, 10, 12, 15):
        numbers.push(value)
    print(numbers.peek())
    print(numbers.pop())
    print(numbers.pop())

    chars = Stack()
    print(int(chars.is_empty()))
    while not chars.is_full():
        chars.push("=")
    print(chars.format_all())
    popped = []
    while not chars.is_empty():
        popped.append(chars.pop())
    print("".join(popped), end="")
    chars.push("p")
    print(chars.format_all(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())