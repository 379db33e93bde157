import pytest

from structkit.fifo_queue import FifoQueue, main

SOURCE_VALUES = [5.1, 6.1, 7.1, 8.2, 9.6]


def _filled(values):
    queue = FifoQueue()
    for value in values:
        queue.enqueue(value)
    return queue


def test_fifo_order():
    queue = _filled(SOURCE_VALUES)
    assert [queue.dequeue() for _ in SOURCE_VALUES] == SOURCE_VALUES


def test_iteration_and_length():
    queue = _filled(SOURCE_VALUES)
    queue.dequeue()
    assert list(queue) == SOURCE_VALUES[1:]
    assert len(queue) == len(SOURCE_VALUES) - 1


def test_empty_dequeue_raises():
    with pytest.raises(IndexError):
        FifoQueue().dequeue()


def test_clear_empties_queue():
    queue = _filled(SOURCE_VALUES)
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue("a")
    assert list(queue) == ["a"]


def test_display_formats_one_decimal():
    queue = _filled([8.2, 9.6])
    assert queue.display() == "\n8.2 9.6 "
    assert FifoQueue().display() == "\n"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "5.1 6.1 7.1 \n8.2 9.6 \nQueue is clean\n"