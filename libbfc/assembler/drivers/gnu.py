from __future__ import annotations

from typing import TYPE_CHECKING

from libbfc.assembler.drivers._driver import AssemblerDriver

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libbfc.targets.target import Target


class GNUAssemblerDriver(AssemblerDriver):
    """Driver for GNU assembler (`as` from binutils)."""

    name = "gnu-as"
    executable = "as"

    @classmethod
    def is_supported(cls, target: Target) -> bool:
        return target.architecture == "I386" and target.operating_system == "Linux"

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
            "--32", # Emit IA-32 (ELF32) object even on 64-bit hosts
            *flags,
            "-o", str(out_object_file),
            str(in_assembly_file),
        ]
        # fmt: on
