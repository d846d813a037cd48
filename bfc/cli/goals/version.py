import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from bfc.cli.parser.arguments import CLIArguments
from libbfc.assembler.drivers import get_assembler_driver
from libbfc.codegen.config import DEFAULT_CELLS_SIZE
from libbfc.codegen.loop_stack import (
    LOOP_STACK_GROWTH_FACTOR,
    LOOP_STACK_INITIAL_CAPACITY,
)
from libbfc.linker.command_composer import get_linker_command_composer_backend


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    linker_composer_backend = (
        get_linker_command_composer_backend(args.target)
        .__qualname__.removeprefix("compose_")
        .removesuffix("_command")
    )
    assembler_driver = get_assembler_driver(args.target)

    print("[BFC toolchain]")
    print("Toolchain target (may be unavailable on host machine):")
    print(f"\tTriplet: {args.target.triplet}")
    print(f"\tArchitecture: {args.target.architecture}")
    print(f"\tOS: {args.target.operating_system}")
    print(f"\t(assembler driver: {assembler_driver.name if assembler_driver else 'not found'})")
    print(f"\t(linker command composer: {linker_composer_backend})")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print("Defaults:")
    print(f"\tCells size: {DEFAULT_CELLS_SIZE} bytes")
    print(
        f"\tLoop stack: {LOOP_STACK_INITIAL_CAPACITY} labels, grows by x{LOOP_STACK_GROWTH_FACTOR}",
    )
    return sys.exit(0)
