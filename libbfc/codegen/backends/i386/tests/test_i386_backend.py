import pytest

from libbfc.codegen.backends import I386CodegenBackend
from libbfc.codegen.get_backend import get_backend_for_target
from libbfc.targets import Target


@pytest.fixture
def backend() -> I386CodegenBackend:
    return I386CodegenBackend(Target.from_triplet("i386-unknown-linux"))


def test_backend_for_default_target() -> None:
    target = Target.from_triplet("i386-unknown-linux")
    assert get_backend_for_target(target) is I386CodegenBackend


def test_prologue(backend: I386CodegenBackend) -> None:
    assert list(backend.program_prologue(cells_size=30000)) == [
        ".intel_syntax noprefix",
        '.section .bss, "aw", @nobits',
        "\t.lcomm cells, 30000",
        '.section .text, "ax", @progbits',
        ".globl _start",
        "_start:",
        "\tmov edi, OFFSET cells",
    ]


def test_epilogue_exits_with_zero(backend: I386CodegenBackend) -> None:
    assert list(backend.program_epilogue()) == [
        "\tmov eax, 1",
        "\tmov ebx, 0",
        "\tint 0x80",
    ]


def test_pointer_and_cell_templates(backend: I386CodegenBackend) -> None:
    assert list(backend.pointer_advance()) == ["\tadd edi, 4"]
    assert list(backend.pointer_retreat()) == ["\tsub edi, 4"]
    assert list(backend.cell_increment()) == ["\tinc DWORD PTR [edi]"]
    assert list(backend.cell_decrement()) == ["\tdec DWORD PTR [edi]"]


def test_input_output_syscalls(backend: I386CodegenBackend) -> None:
    assert list(backend.cell_input()) == [
        "\tmov eax, 3",
        "\tmov ebx, 0",
        "\tmov ecx, edi",
        "\tmov edx, 1",
        "\tint 0x80",
    ]
    assert list(backend.cell_output()) == [
        "\tmov eax, 4",
        "\tmov ebx, 1",
        "\tmov ecx, edi",
        "\tmov edx, 1",
        "\tint 0x80",
    ]


def test_loop_templates_are_parameterized_by_label(
    backend: I386CodegenBackend,
) -> None:
    assert list(backend.loop_begin(7)) == [
        "\tcmp DWORD PTR [edi], 0",
        "\tjz .LE7",
        ".LB7:",
    ]
    assert list(backend.loop_end(7)) == [
        "\tcmp DWORD PTR [edi], 0",
        "\tjnz .LB7",
        ".LE7:",
    ]


def test_templates_do_not_share_state(backend: I386CodegenBackend) -> None:
    first = backend.cell_increment()
    backend.cell_increment()
    assert list(first) == ["\tinc DWORD PTR [edi]"]
