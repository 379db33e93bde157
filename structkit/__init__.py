"""In-memory linked lists, queues and a bounded stack, with a sort benchmark."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "circular_queue",
    "doubly_linked_list",
    "fifo_queue",
    "linked_list",
    "priority_queue",
    "stack",
]