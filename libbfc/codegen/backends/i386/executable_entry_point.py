from libbfc.codegen.backends.general import CODEGEN_CELLS_SYMBOL
from libbfc.codegen.sections._factory import SectionType

from ._context import I386CodegenContext
from .assembly import (
    ipc_syscall_linux,
    load_cells_base_address,
    reserve_zeroed_memory_blob,
)
from .registers import I386_LINUX_EPILOGUE_EXIT_CODE, I386_LINUX_SYSCALL_EXIT


def i386_program_entry_point(
    context: I386CodegenContext,
    system_entry_point_name: str,
    cells_size: int,
) -> None:
    """Write program header with memory cells and executable entry point which is followed by program instructions."""
    context.directive(".intel_syntax noprefix")

    context.section(SectionType.BSS)
    reserve_zeroed_memory_blob(
        context,
        symbol=CODEGEN_CELLS_SYMBOL,
        size_in_bytes=cells_size,
    )

    context.section(SectionType.INSTRUCTIONS)
    context.directive(f".globl {system_entry_point_name}")
    context.label(system_entry_point_name)
    load_cells_base_address(context, symbol=CODEGEN_CELLS_SYMBOL)


def i386_program_exit(context: I386CodegenContext) -> None:
    """Write program termination, there is nothing to return into so exit is done via kernel."""
    ipc_syscall_linux(
        context,
        number=I386_LINUX_SYSCALL_EXIT,
        arguments=(I386_LINUX_EPILOGUE_EXIT_CODE,),
    )
