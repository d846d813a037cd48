from __future__ import annotations

from subprocess import CompletedProcess, run
from typing import TYPE_CHECKING

from libbfc.linker.command_composer import (
    LinkerCommandComposer,
    get_linker_command_composer_backend,
)
from libbfc.linker.entry_point import LINKER_EXPECTED_ENTRY_POINT

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from pathlib import Path

    from libbfc.targets.target import Target


def link_object_files(  # noqa: PLR0913
    objects: Iterable[Path],
    output: Path,
    target: Target,
    additional_flags: Sequence[str] = (),
    *,
    executable_entry_point_symbol: str = LINKER_EXPECTED_ENTRY_POINT,
    linker_backend: LinkerCommandComposer | None = None,
    linker_executable: Path | None = None,
    on_shell_call: Callable[[Sequence[str]], None] | None = None,
) -> CompletedProcess[bytes]:
    """Link given objects into an executable.

    Runs an new process with linker, returns it for high-level checks.
    """
    if not linker_backend:
        linker_backend = get_linker_command_composer_backend(target)

    command = linker_backend(
        objects=objects,
        target=target,
        output=output,
        additional_flags=additional_flags,
        executable_entry_point_symbol=executable_entry_point_symbol,
        linker_executable=linker_executable,
    )
    if on_shell_call:
        on_shell_call(command)

    return run(
        command,
        check=False,
        capture_output=False,
        shell=False,
    )
