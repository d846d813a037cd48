from __future__ import annotations

from abc import ABC, abstractmethod
from shutil import which
from subprocess import CompletedProcess, run
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from libbfc.targets.target import Target


class AssemblerDriver(ABC):
    """Assembler which is spawned as an external process to turn assembly file into object file.

    Concrete drivers only describe their executable, supported targets and command line.
    """

    # Displayed in diagnostics and version info
    name: ClassVar[str]

    # Searched in PATH
    executable: ClassVar[str]

    @classmethod
    @abstractmethod
    def is_supported(cls, target: Target) -> bool:
        """Can that assembler emit objects for given target?."""

    @classmethod
    @abstractmethod
    def compose_command(
        cls,
        target: Target,
        in_assembly_file: Path,
        out_object_file: Path,
        *,
        flags: Sequence[str],
    ) -> list[str]:
        """Construct command that assembles given assembly file into object file."""

    @classmethod
    def is_installed(cls) -> bool:
        return which(cls.executable) is not None

    def assemble(
        self,
        target: Target,
        in_assembly_file: Path,
        out_object_file: Path,
        *,
        flags: Sequence[str],
        on_shell_call: Callable[[Sequence[str]], None] | None = None,
    ) -> CompletedProcess[bytes]:
        """Run assembler process and wait for it, exit code is not checked here.

        :param on_shell_call: If passed, called with command before execution e.g for logging
        """
        assert self.is_supported(target)
        command = self.compose_command(
            target,
            in_assembly_file,
            out_object_file,
            flags=flags,
        )
        if on_shell_call:
            on_shell_call(command)
        return run(command, check=False, capture_output=False)
