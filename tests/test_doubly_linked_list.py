import random
from datetime import timedelta

import pytest

from structkit.doubly_linked_list import DoublyLinkedList


def test_constructor_keeps_order():
    dl = DoublyLinkedList([4, 8, 15])
    assert list(dl) == [4, 8, 15]
    assert list(reversed(dl)) == [15, 8, 4]
    assert len(dl) == 3


def test_insert_pushes_to_front_and_links_back():
    dl = DoublyLinkedList()
    for value in (1, 2, 3):
        dl.insert(value)
    assert list(dl) == [3, 2, 1]
    assert list(reversed(dl)) == [1, 2, 3]


def test_sorted_insert_into_empty():
    dl = DoublyLinkedList()
    dl.sorted_insert(5)
    assert list(dl) == [5]
    assert len(dl) == 1


@pytest.mark.parametrize(
    "values",
    [
        [5, 3],
        [3, 5],
        [5, 5, 5],
        [10, 1, 7, 3, 3, 12, -4],
    ],
)
def test_sorted_insert_keeps_order(values):
    dl = DoublyLinkedList()
    for value in values:
        dl.sorted_insert(value)
    assert list(dl) == sorted(values)
    assert list(reversed(dl)) == sorted(values, reverse=True)
    assert len(dl) == len(values)


def test_sorted_insert_random_stays_sorted():
    rng = random.Random(11)
    values = [rng.randint(-500, 500) for _ in range(300)]
    dl = DoublyLinkedList()
    for value in values:
        dl.sorted_insert(value)
    assert dl.is_sorted()
    assert list(dl) == sorted(values)


def test_remove_drops_head_and_fixes_links():
    dl = DoublyLinkedList([1, 2, 3])
    assert dl.remove() == 1
    assert list(dl) == [2, 3]
    assert list(reversed(dl)) == [3, 2]
    assert len(dl) == 2


def test_remove_last_and_empty():
    dl = DoublyLinkedList([9])
    assert dl.remove() == 9
    assert list(dl) == []
    assert dl.remove() is None
    assert len(dl) == 0


def test_sort_orders_values_and_links():
    values = [5, -3, 12, 0, 7, 7, -10]
    dl = DoublyLinkedList(values)
    dl.sort()
    assert list(dl) == sorted(values)
    assert list(reversed(dl)) == sorted(values, reverse=True)
    assert dl.is_sorted()


def test_sort_already_sorted_visits_each_node_once():
    values = list(range(15))
    dl = DoublyLinkedList(values)
    assert dl.sort() == len(values)
    assert list(dl) == values


def test_sort_empty():
    dl = DoublyLinkedList()
    assert dl.sort() == 0
    assert list(dl) == []


def test_random_sort_matches_sorted():
    rng = random.Random(5)
    values = [rng.randint(-1000, 1000) for _ in range(250)]
    dl = DoublyLinkedList(values)
    operations = dl.sort()
    assert list(dl) == sorted(values)
    assert operations >= len(values)


def test_time_sorted_sorts_and_reports_duration():
    dl = DoublyLinkedList([9, 1, 5])
    elapsed = dl.time_sorted()
    assert isinstance(elapsed, timedelta) and elapsed >= timedelta(0)
    assert list(dl) == [1, 5, 9]


def test_is_sorted_detects_inversion():
    assert DoublyLinkedList([1, 2, 2, 3]).is_sorted()
    assert not DoublyLinkedList([1, 3, 2]).is_sorted()
    assert DoublyLinkedList().is_sorted()