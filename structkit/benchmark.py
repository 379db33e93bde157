"""Compare bubble-sort times of the singly and doubly linked lists."""

from __future__ import annotations

import argparse
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Sequence

from .doubly_linked_list import DoublyLinkedList
from .linked_list import LinkedList

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings and checks from one benchmark run."""

    singly_elapsed: timedelta
    doubly_elapsed: timedelta
    total_elapsed: timedelta
    singly_length: int
    doubly_length: int
    singly_sorted: bool
    doubly_sorted: bool


def _millis(delta: timedelta) -> int:
    return int(delta / timedelta(milliseconds=1))


def run_benchmark(
    singly_count: int = 1,
    doubly_count: int = 1_000_000,
    seed: Optional[int] = None,
) -> BenchmarkResult:
    """Fill both lists with random 32-bit integers and sort them concurrently."""
    rng = random.Random(seed)
    started = time.perf_counter()

    singly = LinkedList()
    doubly = DoublyLinkedList()
    for _ in range(singly_count):
        singly.insert_at(10, rng.randint(_INT_MIN, _INT_MAX))
    for _ in range(doubly_count):
        doubly.sorted_insert(rng.randint(_INT_MIN, _INT_MAX))

    with ThreadPoolExecutor(max_workers=2) as pool:
        doubly_job = pool.submit(doubly.time_sorted)
        singly_job = pool.submit(singly.time_sorted)
        singly_elapsed = singly_job.result()
        doubly_elapsed = doubly_job.result()

    total = timedelta(seconds=time.perf_counter() - started)
    return BenchmarkResult(
        singly_elapsed=singly_elapsed,
        doubly_elapsed=doubly_elapsed,
        total_elapsed=total,
        singly_length=len(singly),
        doubly_length=len(doubly),
        singly_sorted=singly.is_sorted(),
        doubly_sorted=doubly.is_sorted(),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time bubble sorts of a singly and a doubly linked list."
    )
    parser.add_argument("--singly", type=int, default=1, help="elements in the singly linked list")
    parser.add_argument("--doubly", type=int, default=1_000_000, help="elements in the doubly linked list")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    result = run_benchmark(args.singly, args.doubly, args.seed)
    print(f"LinkedList sort:       {_millis(result.singly_elapsed)} ms\n")
    print(f"DoublyLinkedList sort: {_millis(result.doubly_elapsed)} ms")
    print(f"\nAll time: {_millis(result.total_elapsed)} ms")
    print()
    print(f"LinkedList sorted correctly:       {int(result.singly_sorted)}")
    print(f"DoublyLinkedList sorted correctly: {int(result.doubly_sorted)}")
    print("\ndll:")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())