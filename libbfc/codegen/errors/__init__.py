"""Errors collections that code generation may raise (user-facing ones)."""

from .assembly_file_write import AssemblyFileWriteError
from .invalid_cells_size import InvalidCellsSizeError
from .loop_stack_allocation import LoopStackAllocationError
from .loop_stack_underflow import LoopStackUnderflowError
from .source_file_read import SourceFileReadError
from .unclosed_loop import UnclosedLoopError
from .unmatched_loop_end import UnmatchedLoopEndError

__all__ = [
    "AssemblyFileWriteError",
    "InvalidCellsSizeError",
    "LoopStackAllocationError",
    "LoopStackUnderflowError",
    "SourceFileReadError",
    "UnclosedLoopError",
    "UnmatchedLoopEndError",
]
