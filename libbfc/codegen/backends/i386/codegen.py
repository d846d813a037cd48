"""Core I386 codegen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libbfc.codegen.backends.general import (
    CODEGEN_LOOP_BEGIN_LABEL,
    CODEGEN_LOOP_END_LABEL,
)
from libbfc.linker.entry_point import LINKER_EXPECTED_ENTRY_POINT

from ._context import I386CodegenContext
from .assembly import (
    evaluate_current_cell_with_jump,
    ipc_syscall_linux,
    modify_current_cell,
    shift_cells_pointer,
)
from .executable_entry_point import i386_program_entry_point, i386_program_exit
from .registers import (
    I386_CELLS_POINTER_REGISTER,
    I386_LINUX_FD_STDIN,
    I386_LINUX_FD_STDOUT,
    I386_LINUX_SYSCALL_READ,
    I386_LINUX_SYSCALL_WRITE,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libbfc.targets.target import Target


class I386CodegenBackend:
    """Instruction emission backend for IA-32 Linux (Intel syntax, GNU assembler)."""

    target: Target

    def __init__(self, target: Target) -> None:
        assert target.architecture == "I386"
        assert target.operating_system == "Linux"
        self.target = target

    def program_prologue(self, cells_size: int) -> Sequence[str]:
        context = self._new_context()
        i386_program_entry_point(
            context,
            system_entry_point_name=LINKER_EXPECTED_ENTRY_POINT,
            cells_size=cells_size,
        )
        return context.lines

    def program_epilogue(self) -> Sequence[str]:
        context = self._new_context()
        i386_program_exit(context)
        return context.lines

    def pointer_advance(self) -> Sequence[str]:
        context = self._new_context()
        shift_cells_pointer(context, cells=1)
        return context.lines

    def pointer_retreat(self) -> Sequence[str]:
        context = self._new_context()
        shift_cells_pointer(context, cells=-1)
        return context.lines

    def cell_increment(self) -> Sequence[str]:
        context = self._new_context()
        modify_current_cell(context, operation="inc")
        return context.lines

    def cell_decrement(self) -> Sequence[str]:
        context = self._new_context()
        modify_current_cell(context, operation="dec")
        return context.lines

    def cell_input(self) -> Sequence[str]:
        # Read one byte from standard input into current cell
        context = self._new_context()
        ipc_syscall_linux(
            context,
            number=I386_LINUX_SYSCALL_READ,
            arguments=(I386_LINUX_FD_STDIN, I386_CELLS_POINTER_REGISTER, 1),
        )
        return context.lines

    def cell_output(self) -> Sequence[str]:
        # Write one (lowest) byte of current cell into standard output
        context = self._new_context()
        ipc_syscall_linux(
            context,
            number=I386_LINUX_SYSCALL_WRITE,
            arguments=(I386_LINUX_FD_STDOUT, I386_CELLS_POINTER_REGISTER, 1),
        )
        return context.lines

    def loop_begin(self, label: int) -> Sequence[str]:
        context = self._new_context()
        evaluate_current_cell_with_jump(
            context,
            jump_to_label=CODEGEN_LOOP_END_LABEL % label,
            when="zero",
        )
        context.label(CODEGEN_LOOP_BEGIN_LABEL % label)
        return context.lines

    def loop_end(self, label: int) -> Sequence[str]:
        context = self._new_context()
        evaluate_current_cell_with_jump(
            context,
            jump_to_label=CODEGEN_LOOP_BEGIN_LABEL % label,
            when="nonzero",
        )
        context.label(CODEGEN_LOOP_END_LABEL % label)
        return context.lines

    def _new_context(self) -> I386CodegenContext:
        return I386CodegenContext(target=self.target)
