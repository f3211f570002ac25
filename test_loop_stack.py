import pytest
from loop_stack import LoopFrame, LoopStack, LoopStackError


def test_push_peek_pop_order():
    stack = LoopStack()
    outer = LoopFrame("x", 2, 0)
    inner = LoopFrame("y", 3, 4)
    stack.push(outer)
    stack.push(inner)
    assert stack.depth == 2
    assert stack.peek() is inner
    assert stack.frames() == [outer, inner]
    assert stack.pop() is inner
    assert stack.pop() is outer
    assert stack.peek() is None
    assert len(stack) == 0


def test_pop_empty_raises():
    with pytest.raises(LoopStackError):
        LoopStack().pop()


def test_frame_satisfied_only_at_bound():
    frame = LoopFrame("x", 3, 1)
    assert not frame.is_satisfied(2)
    assert frame.is_satisfied(3)
    assert not frame.is_satisfied(4)


def test_frame_listing_uses_one_based_line():
    stack = LoopStack()
    stack.push(LoopFrame("x", 3, 1))
    assert stack.format_lines() == ["loop{counter=x,bound=3,lineNumber=2}"]


def test_clear_and_iteration_snapshot():
    stack = LoopStack()
    stack.push(LoopFrame("x", 1, 0))
    frames = stack.frames()
    stack.clear()
    assert len(frames) == 1
    assert len(stack) == 0
