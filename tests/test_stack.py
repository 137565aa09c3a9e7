import pytest

from travcore.stack import Stack


def test_push_pop_is_lifo():
    stack = Stack(4)
    for item in ("a", "b", "c"):
        stack.push(item)
    assert len(stack) == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert len(stack) == 0


def test_pop_empty_raises():
    stack = Stack(2)
    with pytest.raises(IndexError):
        stack.pop()


def test_capacity_doubles_when_full():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.capacity == 2
    stack.push(3)
    assert stack.capacity == 4
    assert list(stack) == [1, 2, 3]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(0)


def test_clear_calls_free_bottom_first():
    freed = []
    stack = Stack(2, free=freed.append)
    for item in (1, 2, 3):
        stack.push(item)
    stack.clear()
    assert freed == [1, 2, 3]
    assert len(stack) == 0


def test_clear_without_free():
    stack = Stack(2)
    stack.push("x")
    stack.clear()
    assert list(stack) == []
    stack.push("y")
    assert stack.pop() == "y"


def test_iter_bottom_to_top():
    stack = Stack(3)
    for item in range(5):
        stack.push(item)
    assert list(stack) == [0, 1, 2, 3, 4]