import pytest

from algokit.queues import EmptyQueueError, Queue


def test_enqueue_dequeue_sequence():
    q = Queue()
    q.enqueue(10)
    q.enqueue(1)
    assert q.dequeue() == 10
    assert list(q) == [1]
    assert len(q) == 1
    assert q.first() == 1


def test_fifo_order():
    q = Queue()
    values = ["a", "b", "c", "d"]
    for value in values:
        q.enqueue(value)
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(EmptyQueueError):
        Queue().dequeue()


def test_first_empty_raises():
    with pytest.raises(EmptyQueueError):
        Queue().first()


def test_enqueue_after_emptying():
    q = Queue()
    q.enqueue(1)
    q.dequeue()
    q.enqueue(2)
    q.enqueue(3)
    assert list(q) == [2, 3]
    assert q.first() == 2


def test_remove_last_then_enqueue():
    q = Queue()
    q.enqueue(1)
    q.enqueue(2)
    q.remove(2)
    q.enqueue(3)
    assert list(q) == [1, 3]