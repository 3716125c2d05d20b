import pytest

from algoshelf.stack_queue import Stack, TwoStackQueue


def test_stack_source_walkthrough():
    stack = Stack()
    for value in range(1, 6):
        stack.push(value)
    assert stack.top() == 5
    stack.pop()
    assert stack.top() == 4
    assert len(stack) == 4
    assert bool(stack) is True
    drained = []
    while stack:
        drained.append(stack.top())
        stack.pop()
    assert drained == [4, 3, 2, 1]


def test_stack_pop_returns_value():
    stack = Stack([1, 2])
    assert stack.pop() == 2
    assert len(stack) == 1


def test_stack_pop_on_empty_is_noop():
    stack = Stack()
    assert stack.pop() is None
    assert len(stack) == 0


def test_stack_top_on_empty_raises():
    with pytest.raises(IndexError):
        Stack().top()


def test_queue_source_walkthrough():
    queue = TwoStackQueue()
    for value in range(1, 6):
        queue.push(value)
    assert queue.front() == 1
    assert len(queue) == 5
    queue.pop()
    assert queue.front() == 2
    assert bool(queue) is True
    drained = []
    while queue:
        drained.append(queue.front())
        queue.pop()
    assert drained == [2, 3, 4, 5]


def test_queue_interleaved_keeps_fifo():
    queue = TwoStackQueue([1, 2])
    assert queue.pop() == 1
    queue.push(3)
    queue.push(4)
    assert [queue.pop() for _ in range(3)] == [2, 3, 4]


def test_queue_empty_raises():
    queue = TwoStackQueue()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.pop()