"""Assembler module to assemble generated assembly into object files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .drivers import get_assembler_driver
from .errors import NoAssemblerDriverError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path
    from subprocess import CompletedProcess

    from libbfc.targets import Target

    from .drivers import AssemblerDriver


def assemble_object_file(  # noqa: PLR0913
    assembly: Path,
    output: Path,
    target: Target,
    *,
    flags: Sequence[str] = (),
    driver: AssemblerDriver | None = None,
    on_shell_call: Callable[[Sequence[str]], None] | None = None,
) -> CompletedProcess[bytes]:
    """Convert given assembly file into object file using assembler for next linkage step.

    :param driver: Assembler driver to use, by default first installed one supporting target is used
    :param on_shell_call: Called with command before it is executed, e.g for logging
    :raises NoAssemblerDriverError: No suitable assembler is found
    :raises subprocess.CalledProcessError: Assembler finished with non-zero exit code
    """
    if driver is None:
        driver = get_assembler_driver(target)
    if driver is None:
        raise NoAssemblerDriverError(target=target)

    process = driver.assemble(
        target,
        in_assembly_file=assembly,
        out_object_file=output,
        flags=flags,
        on_shell_call=on_shell_call,
    )
    process.check_returncode()
    return process
