"""Growable LIFO container with labels of currently open loops."""

from __future__ import annotations

from typing import Final

from libbfc.codegen.errors import LoopStackAllocationError, LoopStackUnderflowError

# Capacity of an freshly created loop stack
LOOP_STACK_INITIAL_CAPACITY: Final[int] = 1024

# Increase capacity by 10% when stack is full
LOOP_STACK_GROWTH_FACTOR: Final[float] = 1.1


def next_loop_stack_capacity(capacity: int, growth_factor: float) -> int:
    """Get capacity after growth, always greater than given one."""
    return max(int(capacity * growth_factor), capacity + 1)


class LoopStack:
    """Stack that contains labels of currently open loops.

    Backed by preallocated storage of fixed capacity which grows proportionally when full.
    """

    # Preallocated storage, only `[:_top]` is meaningful
    _storage: list[int]
    _top: int

    growth_factor: float

    def __init__(
        self,
        capacity: int = LOOP_STACK_INITIAL_CAPACITY,
        growth_factor: float = LOOP_STACK_GROWTH_FACTOR,
    ) -> None:
        assert capacity > 0, "Loop stack must have positive initial capacity"
        assert growth_factor >= 1, "Loop stack must not shrink when growing"

        self.growth_factor = growth_factor
        self._top = 0
        self._storage = self._allocate(capacity)

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def is_empty(self) -> bool:
        return self._top == 0

    def push(self, label: int) -> None:
        """Push label of an opened loop on stack, growing storage if it is full."""
        if self._top == self.capacity:
            self._grow()
        self._storage[self._top] = label
        self._top += 1

    def pop(self) -> int:
        """Pop label of last opened loop from the stack.

        :raises LoopStackUnderflowError: Stack is empty
        """
        if self.is_empty:
            raise LoopStackUnderflowError
        self._top -= 1
        return self._storage[self._top]

    def peek(self) -> int:
        """Get label of last opened loop without removing it.

        :raises LoopStackUnderflowError: Stack is empty
        """
        if self.is_empty:
            raise LoopStackUnderflowError
        return self._storage[self._top - 1]

    def __len__(self) -> int:
        """Get depth of the stack."""
        return self._top

    def _grow(self) -> None:
        capacity = next_loop_stack_capacity(self.capacity, self.growth_factor)
        try:
            self._storage.extend([0] * (capacity - self.capacity))
        except MemoryError as e:
            raise LoopStackAllocationError(requested_capacity=capacity) from e

    @staticmethod
    def _allocate(capacity: int) -> list[int]:
        try:
            return [0] * capacity
        except MemoryError as e:
            raise LoopStackAllocationError(requested_capacity=capacity) from e
