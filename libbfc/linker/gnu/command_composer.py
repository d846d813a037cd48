from collections.abc import Iterable, Sequence
from pathlib import Path
from shutil import which
from typing import Literal, TypeAlias

from libbfc.linker.entry_point import LINKER_EXPECTED_ENTRY_POINT
from libbfc.targets.target import Target

GNU_LINKER_EMULATION: TypeAlias = Literal["elf_i386"]

# Cross-compilation toolchains which may link IA-32 objects, searched when no `ld` installed
GNU_LINKER_CROSS_EXECUTABLES = ("i686-linux-gnu-ld", "x86_64-linux-gnu-ld")


def compose_gnu_linker_command(
    objects: Iterable[Path],
    output: Path,
    target: Target,
    additional_flags: Sequence[str],
    executable_entry_point_symbol: str = LINKER_EXPECTED_ENTRY_POINT,
    *,
    linker_executable: Path | None = None,
) -> list[str]:
    """General driver for GNU linker."""
    if target.operating_system != "Linux":
        msg = f"Cannot compose GNU linker driver command for {target.operating_system} operating system! GNU linker may link only Linux objects (ELF only)"
        raise ValueError(msg)

    return _compose_raw_gnu_linker_command(
        executable_entry_point_symbol=executable_entry_point_symbol,
        additional_flags=additional_flags,
        output=output,
        objects=objects,
        emulation="elf_i386",
        _linker_executable=linker_executable or _get_linker_backend_executable_path(),
    )


def _get_linker_backend_executable_path() -> Path:
    """Acquire executable of GNU linker that is installed and suitable on that host system."""
    if which("ld"):
        return Path("ld")

    for cross_ld in GNU_LINKER_CROSS_EXECUTABLES:
        if which(cross_ld):
            return Path(cross_ld)

    # Default, will fail at linkage with proper system message
    return Path("ld")


def _compose_raw_gnu_linker_command(  # noqa: PLR0913
    objects: Iterable[Path],
    output: Path,
    *,
    executable_entry_point_symbol: str | None = LINKER_EXPECTED_ENTRY_POINT,
    additional_flags: Iterable[str] | None = None,
    emulation: GNU_LINKER_EMULATION,
    _linker_executable: Path,
) -> list[str]:
    """Compose command to GNU Linker CLI tool.

    Taken from `man ld`
    DOES NOT raise any validation errors - as it is work of GNU Linker itself and its command result
    """
    command: list[str] = [str(_linker_executable)]  # Call to an GNU LD

    # Architecture and file format
    command.extend(("-m", emulation))

    # Main executable entry point
    if executable_entry_point_symbol:
        command.extend(("-e", executable_entry_point_symbol))

    # Generated code never executes stack, this also silents missing `.note.GNU-stack` warning
    command.extend(("-z", "noexecstack"))

    # Specify input object files
    command.extend(map(str, objects))

    # Propagated linker flags from above.
    if additional_flags:
        command.extend(additional_flags)

    # Actual output path
    command.extend(("-o", str(output)))

    return command
