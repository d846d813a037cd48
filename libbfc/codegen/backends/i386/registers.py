"""Consts and types related to I386 (IA-32) registers and architecture (including IPC)."""

from __future__ import annotations

from typing import Literal, TypeAlias

####
# Bare I386 related
####

# Registers specification for I386
# Skips some of registers due to currently being unused
I386_GP_REGISTERS: TypeAlias = Literal[
    "eax",
    "ebx",
    "ecx",
    "edx",
    "edi",
]

# Holds address of current cell during whole program execution
I386_CELLS_POINTER_REGISTER: I386_GP_REGISTERS = "edi"

# Cell is an machine word (DWORD), see `Target.cpu_word_size`
I386_CELL_OPERAND_SIZE = "DWORD PTR"

####
# Linux related
####

# System calls via `int 0x80` (number in EAX, arguments in EBX, ECX, EDX)
I386_LINUX_SYSCALL_INTERRUPT = "0x80"
I386_LINUX_SYSCALL_NUMBER_REGISTER: I386_GP_REGISTERS = "eax"
I386_LINUX_SYSCALL_ARGUMENTS_REGISTERS: tuple[I386_GP_REGISTERS, ...] = (
    "ebx",
    "ecx",
    "edx",
)

I386_LINUX_SYSCALL_EXIT = 1
I386_LINUX_SYSCALL_READ = 3
I386_LINUX_SYSCALL_WRITE = 4

I386_LINUX_FD_STDIN = 0
I386_LINUX_FD_STDOUT = 1

# Epilogue
I386_LINUX_EPILOGUE_EXIT_CODE = 0
