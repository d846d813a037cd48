from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libbfc.assembler.drivers._driver import AssemblerDriver

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libbfc.targets.target import Target


class ClangAssemblerDriver(AssemblerDriver):
    """Driver for clang integrated assembler, used when binutils are missing."""

    name = "clang"
    executable = "clang"

    @classmethod
    def is_supported(cls, target: Target) -> bool:
        return target.architecture == "I386"

    @classmethod
    def compose_command(
        cls,
        target: Target,
        in_assembly_file: Path,
        out_object_file: Path,
        *,
        flags: Sequence[str],
    ) -> list[str]:
        # fmt: off
        return [
            cls.executable,
            "-target", cls._clang_target(target),
            "-x", "assembler", # Input is assembly whatever its suffix is
            "-c", str(in_assembly_file),
            *flags,
            "-o", str(out_object_file),
        ]
        # fmt: on

    @staticmethod
    def _clang_target(target: Target) -> str:
        match target.triplet:
            case "i386-unknown-linux":
                return target.triplet
            case _:
                assert_never(target.triplet)
