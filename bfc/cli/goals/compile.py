from __future__ import annotations

import signal
import sys
from contextlib import contextmanager
from functools import partial
from time import perf_counter_ns
from typing import TYPE_CHECKING, NoReturn

from bfc.cli.infer import infer_intermediate_filename
from bfc.cli.output import cli_message, cli_shell_command
from bfc.execution.execution import execute_binary_executable
from bfc.execution.permissions import apply_file_executable_permissions
from libbfc.assembler import assemble_object_file
from libbfc.codegen.generator import generate_assembly_file
from libbfc.linker import link_object_files

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

    from bfc.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


@contextmanager
def wrap_with_perf_time_taken(message: str, *, verbose: bool) -> Generator[None]:
    start_time = perf_counter_ns()
    yield
    time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
    cli_message(
        level="INFO",
        text=f"{message} took {time_taken:.2f}s",
        verbose=verbose,
    )


def cli_perform_compile_goal(args: CLIArguments) -> NoReturn:
    """Process full toolchain onto input source file, stopping at requested stage.

    Intermediate file of each stage is removed as soon as next stage succeeds (unless kept).
    """
    assert args.source_filepath is not None
    on_shell_call = partial(cli_shell_command, show_commands=args.show_commands)

    assembly_filepath = (
        args.output_filepath
        if args.output_format == "assembly"
        else infer_intermediate_filename(
            args.source_filepath,
            "assembly",
            args.target,
            final_output=args.output_filepath,
        )
    )

    cli_message(
        level="INFO",
        text=f"Compiling `{args.source_filepath}` with {args.cells_size} bytes of cells...",
        verbose=args.verbose,
    )
    with wrap_with_perf_time_taken("Compile", verbose=args.verbose):
        summary = generate_assembly_file(
            args.source_filepath,
            assembly_filepath,
            target=args.target,
            cells_size=args.cells_size,
        )
    cli_message(
        level="INFO",
        text=f"Translated {summary.symbols_count} symbol(s), {summary.loops_count} loop(s) with max nesting depth of {summary.max_loop_depth}",
        verbose=args.verbose,
    )

    if args.output_format == "assembly":
        return _finish_compilation(args)

    object_filepath = (
        args.output_filepath
        if args.output_format == "object"
        else infer_intermediate_filename(
            args.source_filepath,
            "object",
            args.target,
            final_output=args.output_filepath,
        )
    )

    cli_message(level="INFO", text="Assembling object file...", verbose=args.verbose)
    with wrap_with_perf_time_taken("Assembler", verbose=args.verbose):
        assemble_object_file(
            assembly=assembly_filepath,
            output=object_filepath,
            target=args.target,
            flags=args.assembler_flags,
            on_shell_call=on_shell_call,
        )
    _remove_intermediate_file(args, assembly_filepath)

    if args.output_format == "object":
        return _finish_compilation(args)

    cli_message(
        level="INFO",
        text="Linking final executable from object file...",
        verbose=args.verbose,
    )
    with wrap_with_perf_time_taken("Linker", verbose=args.verbose):
        linker_process = link_object_files(
            objects=[object_filepath],
            output=args.output_filepath,
            target=args.target,
            additional_flags=args.linker_additional_flags,
            linker_executable=args.linker_executable,
            on_shell_call=on_shell_call,
        )
        linker_process.check_returncode()
    _remove_intermediate_file(args, object_filepath)

    apply_file_executable_permissions(args.output_filepath)
    return _finish_compilation(args)


def _remove_intermediate_file(args: CLIArguments, filepath: Path) -> None:
    if args.keep_intermediates:
        return
    cli_message(
        level="INFO",
        text=f"Removing intermediate file `{filepath}`...",
        verbose=args.verbose,
    )
    filepath.unlink(missing_ok=True)


def _finish_compilation(args: CLIArguments) -> NoReturn:
    cli_message(
        level="INFO",
        text=f"Compiled input file down to {args.output_format} `{args.output_filepath}`!",
        verbose=args.verbose,
    )

    if args.execute_after_compilation:
        with wrap_with_perf_time_taken("Execution", verbose=args.verbose):
            exit_code = cli_execute_after_compilation(args)
        if args.propagate_execute_child_exit_code:
            return sys.exit(exit_code)

    return sys.exit(0)


def cli_execute_after_compilation(args: CLIArguments) -> int:
    """Run executable after compilation if user requested, returns its exit code."""
    cli_message(
        "INFO",
        "Trying to execute compiled file due to execute flag...",
        verbose=args.verbose,
    )

    try:
        exit_code = execute_binary_executable(args.output_filepath).returncode
    except KeyboardInterrupt:
        cli_message("WARNING", "Execution was interrupted by user!")
        sys.exit(0)

    if exit_code == 0:
        cli_message(
            "INFO",
            f"Program finished with exit code {exit_code}!",
            verbose=args.verbose,
        )
        return exit_code

    is_sigsegv = exit_code in (
        signal.SIGSEGV,
        -signal.SIGSEGV,
        128 + signal.SIGSEGV,
    )
    if is_sigsegv:
        cli_message(
            "ERROR",
            f"Program finished with segmentation fault exit code (SIGSEGV, {exit_code}), did pointer move outside of cells?",
        )
    else:
        cli_message("ERROR", f"Program finished with fail exit code {exit_code}!")
    return exit_code
