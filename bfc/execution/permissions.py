"""Executable permissions of linked output."""

import stat
from pathlib import Path

# Owner and its group may execute linked program, others never
EXECUTABLE_MODE_GRANTED = stat.S_IXUSR | stat.S_IXGRP
EXECUTABLE_MODE_DENIED = stat.S_IXOTH


def apply_file_executable_permissions(filepath: Path) -> None:
    """Mark linked output file as executable, other permission bits are kept.

    :raises PermissionError: Path is an symlink, which is never followed
    :raises OSError: Path is not an regular file
    """
    if filepath.is_symlink():
        msg = f"Refusing to change permissions of {filepath} through symlink"
        raise PermissionError(msg)

    mode = filepath.stat().st_mode
    if not stat.S_ISREG(mode):
        msg = f"Linked output {filepath} is not an regular file"
        raise OSError(msg)

    filepath.chmod(
        (stat.S_IMODE(mode) | EXECUTABLE_MODE_GRANTED) & ~EXECUTABLE_MODE_DENIED,
    )
