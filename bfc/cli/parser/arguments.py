from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from libbfc.targets.target import Target


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole BFC toolchain process."""

    source_filepath: Path | None
    output_filepath: Path
    # Final stage of the toolchain, which emits output file
    output_format: Literal["assembly", "object", "executable"]

    cells_size: int

    execute_after_compilation: bool
    propagate_execute_child_exit_code: bool

    version: bool

    verbose: bool
    show_commands: bool

    target: Target

    keep_intermediates: bool

    assembler_flags: list[str]

    linker_additional_flags: list[str]
    linker_executable: Path | None

    cli_debug_user_friendly_errors: bool
