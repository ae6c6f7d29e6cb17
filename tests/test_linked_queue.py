import pytest

from prioqueues.entry import EmptyQueueError, Entry
from prioqueues.linked_queue import LinkedPriorityQueue


def build(pairs):
    queue = LinkedPriorityQueue()
    for value, priority in pairs:
        queue.insert(value, priority)
    return queue


def test_new_queue_is_empty():
    queue = LinkedPriorityQueue()
    assert len(queue) == 0
    assert list(queue) == []


def test_insert_keeps_descending_priority():
    queue = build([(1, 5), (2, 9), (3, 1), (4, 7)])
    priorities = [entry.priority for entry in queue]
    assert priorities == sorted(priorities, reverse=True)
    assert len(queue) == 4


def test_equal_priorities_keep_insertion_order():
    queue = build([(1, 5), (2, 5), (3, 5)])
    assert [entry.value for entry in queue] == [1, 2, 3]


def test_higher_priority_goes_to_front():
    queue = build([(1, 5), (2, 6)])
    assert queue.find_max() == Entry(2, 6)


def test_extract_max_removes_front():
    queue = build([(1, 5), (2, 9), (3, 7)])
    assert queue.extract_max() == Entry(2, 9)
    assert queue.extract_max() == Entry(3, 7)
    assert len(queue) == 1


def test_extract_from_empty_raises():
    with pytest.raises(EmptyQueueError):
        LinkedPriorityQueue().extract_max()


def test_find_max_on_empty_raises():
    with pytest.raises(EmptyQueueError):
        LinkedPriorityQueue().find_max()


def test_find_max_does_not_remove():
    queue = build([(1, 5)])
    assert queue.find_max() == Entry(1, 5)
    assert len(queue) == 1


def test_modify_key_moves_element():
    queue = build([(1, 9), (2, 5), (3, 1)])
    queue.modify_key(2, 10)
    assert queue.find_max() == Entry(3, 10)
    assert len(queue) == 3


def test_modify_key_single_element():
    queue = build([(4, 2)])
    queue.modify_key(0, 8)
    assert list(queue) == [Entry(4, 8)]


def test_modify_key_lowering_moves_to_back():
    queue = build([(1, 9), (2, 5), (3, 1)])
    queue.modify_key(0, 0)
    assert [entry.value for entry in queue] == [2, 3, 1]


def test_modify_key_on_empty_raises():
    with pytest.raises(EmptyQueueError):
        LinkedPriorityQueue().modify_key(0, 1)


@pytest.mark.parametrize("index", [3, 10, -1])
def test_modify_key_bad_index_raises(index):
    queue = build([(1, 9), (2, 5), (3, 1)])
    with pytest.raises(IndexError):
        queue.modify_key(index, 4)
    assert len(queue) == 3


def test_describe_lists_elements():
    queue = build([(1, 5), (2, 9)])
    assert queue.describe() == "(Priority: 9, Value: 2) (Priority: 5, Value: 1)"


def test_describe_empty():
    assert LinkedPriorityQueue().describe() == "No elements in the queue"