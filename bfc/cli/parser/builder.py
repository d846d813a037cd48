from argparse import ArgumentParser

from bfc.cli.parser import groups


# Same name under `bfc` script and `python -m bfc`
CLI_PROGRAM_NAME = "bfc"


def build_cli_parser(prog: str = CLI_PROGRAM_NAME) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="BFC Toolkit - CLI for compiling BF programs into IA-32 Linux executables",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input source code file in BF to compile (`.b`, `.bf` files)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_memory_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_group(parser)
    groups.add_additional_group(parser)
    return parser
