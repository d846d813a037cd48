from collections.abc import Sequence
from typing import Protocol

from libbfc.targets.target import Target


class InstructionSetBackend(Protocol):
    """Base instruction emission backend protocol.

    One operation per source symbol plus program framing.
    Each operation returns assembly text lines (without line terminators) in emission order.
    All backends inherited from this protocol.
    """

    def __init__(self, target: Target) -> None: ...

    def program_prologue(self, cells_size: int) -> Sequence[str]: ...

    def program_epilogue(self) -> Sequence[str]: ...

    def pointer_advance(self) -> Sequence[str]: ...

    def pointer_retreat(self) -> Sequence[str]: ...

    def cell_increment(self) -> Sequence[str]: ...

    def cell_decrement(self) -> Sequence[str]: ...

    def cell_input(self) -> Sequence[str]: ...

    def cell_output(self) -> Sequence[str]: ...

    def loop_begin(self, label: int) -> Sequence[str]: ...

    def loop_end(self, label: int) -> Sequence[str]: ...
