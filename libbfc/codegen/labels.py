"""Loop label allocation."""

from typing import Final

# First label allocated within an compilation
FIRST_LABEL: Final[int] = 1


class LabelAllocator:
    """Monotonic allocator of loop labels.

    Labels are allocated in strictly increasing order and never reused within one allocator.
    """

    _last: int

    def __init__(self) -> None:
        self._last = FIRST_LABEL - 1

    def allocate(self) -> int:
        """Allocate next label."""
        self._last += 1
        return self._last

    @property
    def allocated_count(self) -> int:
        return self._last - FIRST_LABEL + 1
