"""Assembly abstraction layer that hides declarative assembly OPs into functions that generates that for you."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from .registers import (
    I386_CELL_OPERAND_SIZE,
    I386_CELLS_POINTER_REGISTER,
    I386_LINUX_SYSCALL_ARGUMENTS_REGISTERS,
    I386_LINUX_SYSCALL_INTERRUPT,
    I386_LINUX_SYSCALL_NUMBER_REGISTER,
)

if TYPE_CHECKING:
    from ._context import I386CodegenContext
    from .registers import I386_GP_REGISTERS


def store_into_register(
    context: I386CodegenContext,
    register: I386_GP_REGISTERS,
    value: int | I386_GP_REGISTERS,
) -> None:
    """Store given integer value or another register into given register (as DWORD)."""
    if isinstance(value, int):
        assert value.bit_length() <= 4 * 8, (
            "Can store only integers within 32 bits range (4 bytes, x86)"
        )
    context.write(f"mov {register}, {value}")


def reserve_zeroed_memory_blob(
    context: I386CodegenContext,
    symbol: str,
    size_in_bytes: int,
) -> None:
    """Reserve local zero-initialized memory blob with given size under given symbol."""
    assert size_in_bytes > 0, "Memory blob must have positive size"
    context.write(f".lcomm {symbol}, {size_in_bytes}")


def load_cells_base_address(context: I386CodegenContext, symbol: str) -> None:
    """Point cells pointer register at first cell."""
    context.write(f"mov {I386_CELLS_POINTER_REGISTER}, OFFSET {symbol}")


def shift_cells_pointer(context: I386CodegenContext, *, cells: Literal[1, -1]) -> None:
    """Move cells pointer register by one cell forward or backward.

    No bounds checking is performed, moving outside of memory blob is undefined.
    """
    offset = context.target.cpu_word_size
    if cells > 0:
        context.write(f"add {I386_CELLS_POINTER_REGISTER}, {offset}")
    else:
        context.write(f"sub {I386_CELLS_POINTER_REGISTER}, {offset}")


def modify_current_cell(
    context: I386CodegenContext,
    *,
    operation: Literal["inc", "dec"],
) -> None:
    """Increment or decrement cell under cells pointer (wraps around as machine word)."""
    context.write(f"{operation} {I386_CELL_OPERAND_SIZE} [{I386_CELLS_POINTER_REGISTER}]")


def ipc_syscall_linux(
    context: I386CodegenContext,
    *,
    number: int,
    arguments: tuple[int | I386_GP_REGISTERS, ...],
) -> None:
    """Call system via software interrupt and apply IPC ABI convention to arguments."""
    assert len(arguments) <= len(I386_LINUX_SYSCALL_ARGUMENTS_REGISTERS), (
        "Too many arguments for system call"
    )

    store_into_register(context, I386_LINUX_SYSCALL_NUMBER_REGISTER, number)
    for register, argument in zip(
        I386_LINUX_SYSCALL_ARGUMENTS_REGISTERS,
        arguments,
        strict=False,
    ):
        store_into_register(context, register, argument)

    context.write(f"int {I386_LINUX_SYSCALL_INTERRUPT}")


def evaluate_current_cell_with_jump(
    context: I386CodegenContext,
    *,
    jump_to_label: str,
    when: Literal["zero", "nonzero"],
) -> None:
    """Compare cell under cells pointer against zero and jump to given label if condition holds."""
    jump = "jz" if when == "zero" else "jnz"
    context.write(
        f"cmp {I386_CELL_OPERAND_SIZE} [{I386_CELLS_POINTER_REGISTER}], 0",
        f"{jump} {jump_to_label}",
    )
