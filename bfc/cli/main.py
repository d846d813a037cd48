from __future__ import annotations

from bfc.cli.errors.error_handler import cli_bfc_error_handler
from bfc.cli.goals import perform_desired_toolchain_goal
from bfc.cli.parser.builder import build_cli_parser
from bfc.cli.parser.parser import parse_cli_arguments


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry, never returns (exits with status of performed goal)."""
    parser = build_cli_parser()
    args = parse_cli_arguments(parser.parse_args(argv))

    with cli_bfc_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    ):
        perform_desired_toolchain_goal(args)


if __name__ == "__main__":
    cli_entry_point()
