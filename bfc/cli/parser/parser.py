from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

from bfc.cli.infer import infer_output_filename
from bfc.cli.output import cli_fatal_abort
from bfc.cli.parser.arguments import CLIArguments
from libbfc.codegen.config import parse_cells_size
from libbfc.codegen.errors import InvalidCellsSizeError
from libbfc.targets import Target
from libbfc.targets.target import DEFAULT_TARGET_TRIPLET

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    target = Target.from_triplet(DEFAULT_TARGET_TRIPLET)
    source_filepath = _process_source_filepath(args)
    output_format = _process_output_format(args)
    output = _process_output_path(source_filepath, output_format, args, target)
    cells_size = _process_cells_size(args)
    linker_executable = _process_linker_executable(args)

    if args.execute and output_format != "executable":
        return cli_fatal_abort(
            "Cannot execute after compilation due to output is not an executable (`-S`/`-c` passed)!",
        )

    return CLIArguments(
        version=bool(args.version),
        source_filepath=source_filepath,
        output_filepath=output,
        output_format=output_format,
        cells_size=cells_size,
        execute_after_compilation=bool(args.execute),
        propagate_execute_child_exit_code=bool(
            args.propagate_execute_child_exit_code,
        ),
        verbose=bool(args.verbose),
        show_commands=bool(args.show_commands),
        target=target,
        keep_intermediates=bool(args.keep_intermediates),
        assembler_flags=cast("list[str]", args.assembler),
        linker_additional_flags=cast("list[str]", args.linker_additional_flags),
        linker_executable=linker_executable,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_output_format(
    args: Namespace,
) -> Literal["assembly", "object", "executable"]:
    """Process stage flags into final output format, earliest requested stage wins."""
    if args.compile_only:
        return "assembly"
    if args.assemble_only:
        return "object"
    return "executable"


def _process_cells_size(args: Namespace) -> int:
    """Process cells size as positive integer, rejected before any compilation begins."""
    try:
        return parse_cells_size(args.cells_size)
    except InvalidCellsSizeError as e:
        return cli_fatal_abort(e.summary, details=e.details)


def _process_linker_executable(args: Namespace) -> Path | None:
    executable = Path(args.linker_executable) if args.linker_executable else None
    if executable is not None and not executable.exists():
        return cli_fatal_abort("Specified linker executable does not exists!")
    return executable


def _process_source_filepath(args: Namespace) -> Path | None:
    """Process input source file as path and validate it."""
    if args.version:
        return Path(args.source_file) if args.source_file else None

    if not args.source_file:
        return cli_fatal_abort("Missing input file; see 'bfc -h'")

    return Path(args.source_file)


def _process_output_path(
    source_filepath: Path | None,
    output_format: Literal["assembly", "object", "executable"],
    args: Namespace,
    target: Target,
) -> Path:
    """Process output path with auto inference if not passed."""
    if args.output:
        inferred_output_path = Path(args.output)
    elif source_filepath is None:
        inferred_output_path = Path(target.file_executable_default_name)
    else:
        inferred_output_path = infer_output_filename(
            source_filepath,
            output_format=output_format,
            target=target,
        )

    if source_filepath is not None and inferred_output_path == source_filepath:
        return cli_fatal_abort(
            "Inferred/specified output file path will rewrite existing input file, please specify another output path.",
        )
    return inferred_output_path
