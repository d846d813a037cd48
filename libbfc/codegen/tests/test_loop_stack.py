import pytest

from libbfc.codegen.errors import LoopStackAllocationError, LoopStackUnderflowError
from libbfc.codegen.labels import LabelAllocator
from libbfc.codegen.loop_stack import (
    LOOP_STACK_GROWTH_FACTOR,
    LOOP_STACK_INITIAL_CAPACITY,
    LoopStack,
    next_loop_stack_capacity,
)


def test_loop_stack_initial_state() -> None:
    stack = LoopStack()
    assert stack.is_empty
    assert len(stack) == 0
    assert stack.capacity == LOOP_STACK_INITIAL_CAPACITY
    assert stack.growth_factor == LOOP_STACK_GROWTH_FACTOR


def test_loop_stack_lifo() -> None:
    stack = LoopStack()
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty


def test_loop_stack_pop_empty() -> None:
    stack = LoopStack()
    with pytest.raises(LoopStackUnderflowError):
        stack.pop()


def test_loop_stack_peek_empty() -> None:
    stack = LoopStack()
    with pytest.raises(LoopStackUnderflowError):
        stack.peek()


def test_loop_stack_growth_preserves_order() -> None:
    stack = LoopStack(capacity=2)
    for label in range(1, 101):
        stack.push(label)

    assert len(stack) == 100
    assert stack.capacity >= 100
    assert [stack.pop() for _ in range(100)] == list(range(100, 0, -1))


def test_loop_stack_grows_only_when_full() -> None:
    stack = LoopStack(capacity=10)
    for label in range(10):
        stack.push(label)
    assert stack.capacity == 10

    stack.push(10)
    assert stack.capacity == 11


def test_loop_stack_grows_proportionally() -> None:
    stack = LoopStack(capacity=100)
    for label in range(101):
        stack.push(label)
    assert stack.capacity == 110


def test_next_loop_stack_capacity_always_progresses() -> None:
    # 1 * 1.1 is rounded down to 1, must still grow
    assert next_loop_stack_capacity(1, 1.1) == 2
    assert next_loop_stack_capacity(5, 1.0) == 6
    assert next_loop_stack_capacity(1024, 1.1) == 1126


def test_loop_stack_allocation_failure() -> None:
    with pytest.raises(LoopStackAllocationError) as e:
        LoopStack(capacity=2**62)
    assert e.value.requested_capacity == 2**62
    assert "[loop-stack-allocation-error]" in repr(e.value)


def test_label_allocator_strictly_increasing() -> None:
    labels = LabelAllocator()
    assert labels.allocated_count == 0
    assert [labels.allocate() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert labels.allocated_count == 5


def test_label_allocators_are_independent() -> None:
    first, second = LabelAllocator(), LabelAllocator()
    first.allocate()
    first.allocate()
    assert second.allocate() == 1
