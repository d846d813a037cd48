import shlex
import sys
from collections.abc import Generator
from contextlib import contextmanager
from subprocess import CalledProcessError
from typing import NoReturn

from bfc.cli.output import cli_diagnostic, cli_fatal_abort, cli_message
from libbfc.exceptions import BFCError


@contextmanager
def cli_bfc_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Turn errors escaping an toolchain goal into `bfc:` diagnostics and exit status.

    Toolchain errors exit with 1, failed assembler or linker exit with their own exit code.
    Any other exception is an bug and propagates with traceback.
    """
    try:
        yield
    except BFCError as e:
        if not debug_user_friendly_errors:
            raise
        cli_fatal_abort(e.summary, details=e.details)
    except CalledProcessError as e:
        command = e.cmd if isinstance(e.cmd, str) else shlex.join(map(str, e.cmd))
        cli_diagnostic(
            f"external command failed with exit code {e.returncode}",
            details=command,
        )
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        cli_message("WARNING", "Interrupted by user (Ctrl+C)!")
        sys.exit(0)
    cli_fatal_abort("Bug in a CLI: toolchain goal returned instead of exiting")
