from argparse import ArgumentParser

from libbfc.codegen.config import DEFAULT_CELLS_SIZE


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output (stage) options into given parser."""
    group = parser.add_argument_group(
        "Output",
        "Final stage of the toolchain and its output file. By default compiles, assembles and links.",
    )

    group.add_argument(
        "-S",
        dest="compile_only",
        required=False,
        action="store_true",
        help="Compile only; do not assemble or link (emits assembly `.s` file)",
    )

    group.add_argument(
        "-c",
        dest="assemble_only",
        required=False,
        action="store_true",
        help="Compile and assemble, but do not link (emits object `.o` file)",
    )

    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Write output to file, by default inferred from input filename (`a.out` for executables)",
    )


def add_memory_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with memory model options into given parser."""
    group = parser.add_argument_group("Memory", "Memory model of compiled program")

    group.add_argument(
        "--cells-size",
        "-s",
        dest="cells_size",
        type=str,
        required=False,
        default=str(DEFAULT_CELLS_SIZE),
        metavar="<size>",
        help=f"Allocate specified number of bytes as cells memory (defaults to {DEFAULT_CELLS_SIZE})",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Toolchain messages")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from compiler.",
    )

    group.add_argument(
        "-vv",
        "-###",
        required=False,
        dest="show_commands",
        action="store_true",
        help="If passed will display commands that compiler performed if any.",
    )


def add_toolchain_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with assembler and linker options into given parser."""
    group = parser.add_argument_group(
        "Toolchain",
        "Flags for external assembler and linker.",
    )

    group.add_argument(
        "--assembler-flag",
        "-Af",
        dest="assembler",
        required=False,
        help="Additional flags passed to assembler",
        action="append",
        default=[],
    )

    group.add_argument(
        "--linker-flag",
        "-Lf",
        dest="linker_additional_flags",
        required=False,
        help="Additional flags passed to linker",
        action="append",
        default=[],
    )

    group.add_argument(
        "--linker-executable",
        type=str,
        required=False,
        default=None,
        dest="linker_executable",
        help="Linker executable path to use",
    )


def add_additional_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with additional options into given parser."""
    group = parser.add_argument_group("Additional")

    group.add_argument(
        "--keep-intermediates",
        "-k",
        dest="keep_intermediates",
        required=False,
        action="store_true",
        help="If passed, will not delete intermediate assembly and object files",
    )

    group.add_argument(
        "--execute",
        "-e",
        required=False,
        action="store_true",
        help="If provided, will execute output executable file after compilation. Expects output to be executable",
    )

    group.add_argument(
        "--no-propagate-exit-code",
        dest="propagate_execute_child_exit_code",
        required=False,
        action="store_false",
        help="If passed, exit code of executed program is not propagated as toolchain exit code",
    )

    group.add_argument(
        "--cli-debug-errors",
        dest="cli_debug_user_friendly_errors",
        required=False,
        action="store_false",
        help="If passed, toolchain errors are raised with traceback instead of user-friendly messages",
    )
