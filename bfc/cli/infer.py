from pathlib import Path
from typing import Literal

from libbfc.targets.target import Target


def infer_output_filename(
    source_filepath: Path,
    output_format: Literal["assembly", "object", "executable"],
    target: Target,
) -> Path:
    """Try to infer filename for output from input source file."""
    match output_format:
        case "assembly":
            return replace_extension(source_filepath, target.file_assembly_suffix)
        case "object":
            return replace_extension(source_filepath, target.file_object_suffix)
        case "executable":
            return Path(target.file_executable_default_name)


def replace_extension(filepath: Path, suffix: str) -> Path:
    """Replace last extension of given filename with given one, append if filename has no extension.

    Never returns given path itself (e.g `program.s` becomes `program.s.s`).
    """
    if filepath.suffix == suffix:
        suffix = filepath.suffix + suffix
    return filepath.with_suffix(suffix)


def infer_intermediate_filename(
    source_filepath: Path,
    intermediate_format: Literal["assembly", "object"],
    target: Target,
    *,
    final_output: Path,
) -> Path:
    """Infer filename for an intermediate file of an earlier stage.

    Intermediate never takes final output path (e.g `-o program.s` makes assembly `program.s.s`).
    """
    filepath = infer_output_filename(source_filepath, intermediate_format, target)
    if filepath == final_output:
        return replace_extension(filepath, filepath.suffix)
    return filepath
