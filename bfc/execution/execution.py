"""Running compiled programs after compilation."""

from __future__ import annotations

from subprocess import CompletedProcess, run
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def execute_binary_executable(
    filepath: Path,
    *,
    args: Sequence[str] = (),
    timeout: float | None = None,
) -> CompletedProcess[bytes]:
    """Run compiled program and wait for it, exit code is not checked.

    Program inherits toolchain standard streams, as it reads cells from stdin and writes them to stdout.

    :raises subprocess.TimeoutExpired: Program did not finish within timeout
    """
    # Bare `a.out` would be searched in PATH
    return run([filepath.absolute(), *args], timeout=timeout, check=False)
