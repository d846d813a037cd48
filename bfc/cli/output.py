"""User-facing output of the toolchain (diagnostics and information messages)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Final, Literal, NoReturn, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Sequence

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

# Fatal diagnostics are prefixed with program name, as compilers usually do
CLI_DIAGNOSTIC_PREFIX: Final[str] = "bfc: "


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message for user into stderr.

    INFO messages are emitted only when verbose, others are always emitted.
    """
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_diagnostic(summary: str, *, details: str = "") -> None:
    """Emit `bfc: <summary>` diagnostic into stderr, followed by details if any."""
    print(f"{CLI_DIAGNOSTIC_PREFIX}{summary}", file=sys.stderr)
    if details:
        print(details, file=sys.stderr)


def cli_fatal_abort(summary: str, *, details: str = "") -> NoReturn:
    """Emit diagnostic and terminate toolchain with failure exit code."""
    cli_diagnostic(summary, details=details)
    sys.exit(1)


def cli_shell_command(command: Sequence[str], *, show_commands: bool) -> None:
    """Display command that toolchain is about to execute."""
    if not show_commands:
        return
    print(f"[CMD] {' '.join(command)}", file=sys.stderr)
