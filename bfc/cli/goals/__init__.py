"""Goals of the CLI (compile or show version), each one exits with its own status."""

from time import perf_counter_ns
from typing import NoReturn

from bfc.cli.goals.compile import NANOS_TO_SECONDS, cli_perform_compile_goal
from bfc.cli.goals.version import cli_perform_version_goal
from bfc.cli.output import cli_message
from bfc.cli.parser.arguments import CLIArguments


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform goal requested by arguments, compile goal is the default one."""
    goal = cli_perform_version_goal if args.version else cli_perform_compile_goal

    start = perf_counter_ns()
    try:
        goal(args)
    finally:
        time_taken = (perf_counter_ns() - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Whole toolchain run took {time_taken:.2f}s",
            verbose=args.verbose,
        )
