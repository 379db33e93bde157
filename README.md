# structkit

Small in-memory data structures, plus a few demo commands and a
bubble-sort benchmark.

## What is in it

- `structkit.linked_list.LinkedList`: a singly linked list of integers.
  - `insert(value)` adds at the front.
  - `insert_at(pos, value)` inserts at a 1-based position. A position past the end appends the value.
  - `remove_first()` and `remove_after(pos)` return the removed value, or `None` if nothing was removed.
  - `search(value)` returns the 0-based index of the first match, or `None`.
  - `sort()` bubble-sorts the list in place and returns the number of comparisons.
  - `time_sorted()` sorts the list and returns the elapsed time as a `datetime.timedelta`.
  - `is_sorted()` checks the order.
- `structkit.doubly_linked_list.DoublyLinkedList`: a doubly linked list of integers.
  - `insert(value)` adds at the front.
  - `sorted_insert(value)` places the value before the first element that is not smaller than it.
  - `remove()` removes and returns the first element, or `None` if the list is empty.
  - It supports forward and `reversed()` iteration.
  - `sort()` returns the number of node visits. It also has `time_sorted()` and `is_sorted()`.
- `structkit.circular_queue.CircularQueue`: a FIFO queue of integers held
  as a circular linked list.
  - `enqueue(value)` and `dequeue()` add and remove values.
  - `display()` returns a text listing of the queue, or `""` when it is empty.
- `structkit.priority_queue.PriorityQueue`: `dequeue()` always returns the largest value. Among equal values, the most recently added one comes out first.
  - Iteration goes from front to rear.
  - `display()` returns one value per line.
- `structkit.fifo_queue.FifoQueue`: a plain FIFO queue of any values.
  - It has `enqueue`, `dequeue` and `clear`.
  - `display()` formats each value with one decimal place.
- `structkit.stack.Stack(capacity=10)`: a bounded stack.
  - `push`, `pop` and `peek` add, remove and read values.
  - `is_empty()` and `is_full()` report the stack's state.
  - `format_all()` lists the values from top to bottom.
  - A negative capacity raises `ValueError`.
  - Pushing onto a full stack raises `StackFullError`, a subclass of `OverflowError`.
  - Popping or peeking an empty stack raises `StackEmptyError`, a subclass of `IndexError`.

All containers support `len()` and iteration.

The queues raise `IndexError` when you dequeue from an empty queue.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from structkit.linked_list import LinkedList
from structkit.doubly_linked_list import DoublyLinkedList
from structkit.priority_queue import PriorityQueue
from structkit.stack import Stack

items = LinkedList([3, 1, 2])
items.sort()
print(list(items), items.is_sorted())      # [1, 2, 3] True

ordered = DoublyLinkedList()
for value in (5, 1, 3):
    ordered.sorted_insert(value)
print(list(ordered), list(reversed(ordered)))   # [1, 3, 5] [5, 3, 1]

pq = PriorityQueue()
for value in (5, 9, 3):
    pq.enqueue(value)
print(pq.dequeue())   # 9

stack = Stack(10)
stack.push("a")
stack.push("b")
print(stack.peek(), stack.pop(), len(stack))   # b b 1
```

`structkit.benchmark.run_benchmark(singly_count=1, doubly_count=1_000_000, seed=None)`
fills a `LinkedList` using `insert_at` and a `DoublyLinkedList` using
`sorted_insert`. The values are random 32-bit integers. It then sorts both
lists on two threads. It returns a `BenchmarkResult` that holds:

- the two sort times and the total time;
- the length of each list;
- whether each list ended up sorted.

## Commands

```
structkit-benchmark [--singly N] [--doubly N] [--seed S]
structkit-circular-queue
structkit-priority-queue
structkit-fifo-queue
structkit-stack
```

`structkit-benchmark` prints the sort times in milliseconds and whether
each list was sorted correctly. Each sorted insertion walks the list, so the
default of one million elements for the doubly linked list takes a very long
time. Pass a smaller `--doubly` for a quick run.

The other commands run a fixed sequence of operations on their structure
and print the results.

## Limits

Every structure lives in memory only. The package saves nothing and loads
nothing, and none of the containers is safe to share between threads
without your own locking.