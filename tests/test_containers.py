import pytest

from algobox.containers import (
    BoundedQueue,
    LinkedStack,
    QueueEmptyError,
    QueueFullError,
    StackEmptyError,
)


def test_queue_is_fifo():
    queue = BoundedQueue(4)
    items = [10, 20, 30]
    for item in items:
        queue.enqueue(item)
    assert list(queue) == items
    assert [queue.dequeue() for _ in items] == items
    assert queue.is_empty()


def test_queue_fills_to_capacity():
    queue = BoundedQueue(3)
    for item in "abc":
        queue.enqueue(item)
    assert queue.is_full()
    assert len(queue) == queue.capacity
    with pytest.raises(QueueFullError):
        queue.enqueue("d")


def test_queue_space_frees_after_dequeue():
    queue = BoundedQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_default_capacity_from_source_limit():
    queue = BoundedQueue()
    for item in range(5):
        queue.enqueue(item)
    with pytest.raises(QueueFullError):
        queue.enqueue(5)


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        BoundedQueue(2).dequeue()


def test_reversed_items_drains_queue():
    queue = BoundedQueue(5)
    items = [4, 8, 15, 16, 23]
    for item in items:
        queue.enqueue(item)
    assert queue.reversed_items() == items[::-1]
    assert len(queue) == 0


def test_reversed_items_empty_raises():
    with pytest.raises(QueueEmptyError):
        BoundedQueue(1).reversed_items()


@pytest.mark.parametrize("capacity", [0, -3])
def test_bad_capacity(capacity):
    with pytest.raises(ValueError):
        BoundedQueue(capacity)


def test_stack_is_lifo():
    stack = LinkedStack()
    items = ["x", "y", "z"]
    for item in items:
        stack.push(item)
    assert len(stack) == len(items)
    assert list(stack) == items[::-1]
    assert [stack.pop() for _ in items] == items[::-1]
    assert stack.is_empty()


def test_stack_pop_empty_raises():
    stack = LinkedStack()
    stack.push(1)
    assert stack.pop() == 1
    with pytest.raises(StackEmptyError):
        stack.pop()
    assert len(stack) == 0