from __future__ import annotations

from typing import TYPE_CHECKING

from libbfc.codegen.errors import AssemblyFileWriteError, SourceFileReadError

from .translator import translate

if TYPE_CHECKING:
    from pathlib import Path

    from libbfc.targets import Target

    from .translator import TranslationSummary


def generate_assembly_file(
    source_path: Path,
    output_path: Path,
    target: Target,
    cells_size: int,
) -> TranslationSummary:
    """Generate assembly for given source file and specified ARCHxOS pair into given file.

    Both files are closed on any exit path, assembly file may be left partially written on errors.

    :raises SourceFileReadError: Source cannot be opened
    :raises AssemblyFileWriteError: Output cannot be created
    """
    try:
        source = source_path.open(mode="rb")
    except OSError as e:
        raise SourceFileReadError(path=source_path, reason=e.strerror or str(e)) from e

    with source:
        try:
            fd = output_path.open(
                mode="w",
                errors="strict",
                newline="",
                encoding="UTF-8",
            )
        except OSError as e:
            raise AssemblyFileWriteError(
                path=output_path,
                reason=e.strerror or str(e),
            ) from e

        with fd:
            return translate(
                source,
                fd,
                cells_size,
                target=target,
                path=source_path,
            )
